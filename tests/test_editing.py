"""Tests édition de liste de blocs — fonctions pures (la liste d'entrée n'est jamais modifiée)."""
import pytest

from blockhtml import (
    Block, UnknownBlockType, add_block, create_block, find_block, move_block, remove_block, update_block,
)


@pytest.fixture
def blocks():
    return [create_block("heading", block_id="a"),
            create_block("paragraph", block_id="b"),
            create_block("list", block_id="c")]


def _ids(blocks):
    return [b.id for b in blocks]


def test_add_block_appends(blocks):
    result, new = add_block(blocks, "button")
    assert _ids(result) == ["a", "b", "c", new.id]
    assert new.type == "button"
    assert _ids(blocks) == ["a", "b", "c"]


def test_add_block_unknown_type(blocks):
    with pytest.raises(UnknownBlockType):
        add_block(blocks, "carousel")


def test_find_block(blocks):
    assert find_block(blocks, "b").type == "paragraph"
    assert find_block(blocks, "zzz") is None


def test_update_block_merges_fields(blocks):
    result = update_block(blocks, "a", {"content": "Titre", "properties": {"level": 1}})
    updated = find_block(result, "a")
    assert updated.content == "Titre"
    assert updated.properties == {"level": 1}
    assert find_block(blocks, "a").content == "Sample Heading"


def test_update_block_keeps_id_and_type(blocks):
    result = update_block(blocks, "a", {"id": "x", "type": "paragraph", "content": "T"})
    assert _ids(result) == ["a", "b", "c"]
    assert find_block(result, "a").type == "heading"


def test_update_block_unknown_id(blocks):
    result = update_block(blocks, "zzz", {"content": "T"})
    assert [b.model_dump() for b in result] == [b.model_dump() for b in blocks]


def test_remove_block(blocks):
    assert _ids(remove_block(blocks, "b")) == ["a", "c"]
    assert _ids(remove_block(blocks, "zzz")) == ["a", "b", "c"]


class TestMoveBlock:
    def test_move_down(self, blocks):
        assert _ids(move_block(blocks, 0, 2)) == ["b", "c", "a"]

    def test_move_up(self, blocks):
        assert _ids(move_block(blocks, 2, 0)) == ["c", "a", "b"]

    def test_same_index(self, blocks):
        assert _ids(move_block(blocks, 1, 1)) == ["a", "b", "c"]

    def test_input_untouched(self, blocks):
        move_block(blocks, 0, 2)
        assert _ids(blocks) == ["a", "b", "c"]

    def test_source_out_of_range(self, blocks):
        with pytest.raises(IndexError):
            move_block(blocks, 5, 0)

    def test_plain_blocks(self):
        items = [Block(id=str(i), type="paragraph") for i in range(4)]
        assert _ids(move_block(items, 3, 1)) == ["0", "3", "1", "2"]
