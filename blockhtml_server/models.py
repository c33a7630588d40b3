"""
Data models — Project
SQLAlchemy (SQLite) + Pydantic v2 (JSON camelCase : userId, createdAt, updatedAt)
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Annotated, List, Optional

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from blockhtml import Block

log = logging.getLogger(__name__)


# ── Horodatage ─────────────────────────────────────────────────────────

def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """SQLite perd le fuseau : un datetime naïf relu est de l'UTC."""
    return dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt


def touch(previous: datetime) -> datetime:
    """Nouvel updated_at, strictement postérieur au précédent (horloge à faible résolution)."""
    now = utcnow()
    floor = as_utc(previous) + timedelta(microseconds=1)
    return now if now >= floor else floor


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class ProjectDB(Base):
    __tablename__ = "projects"
    # AUTOINCREMENT SQLite : un id supprimé n'est jamais réattribué
    __table_args__ = {"sqlite_autoincrement": True}

    id:          Mapped[int]           = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name:        Mapped[str]           = mapped_column(sa.String, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(sa.Text, nullable=True)
    user_id:     Mapped[Optional[int]] = mapped_column(sa.Integer, nullable=True)
    blocks:      Mapped[str]           = mapped_column(sa.Text, default="[]")  # JSON
    created_at:  Mapped[datetime]      = mapped_column(sa.DateTime(timezone=True), default=utcnow)
    updated_at:  Mapped[datetime]      = mapped_column(sa.DateTime(timezone=True), default=utcnow)


# ── PYDANTIC ───────────────────────────────────────────────────────────

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# userId tient dans un INTEGER SQLite (signé 64 bits), quel que soit le backend
UserId = Annotated[int, Field(ge=-2 ** 63, le=2 ** 63 - 1)]


def _clean_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("le nom du projet ne peut pas être vide")
    return v


class ProjectCreate(CamelModel):
    name: str
    description: Optional[str] = None
    blocks: List[Block] = Field(default_factory=list)
    user_id: Optional[UserId] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        return _clean_name(v)


class ProjectUpdate(CamelModel):
    """Mise à jour partielle : seuls les champs explicitement fournis sont appliqués."""
    name: Optional[str] = None
    description: Optional[str] = None
    blocks: Optional[List[Block]] = None
    user_id: Optional[UserId] = None

    @field_validator("name", "blocks")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("champ non nullable")
        return _clean_name(v) if isinstance(v, str) else v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class Project(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    user_id: Optional[int] = None
    blocks: List[Block] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("blocks", mode="wrap")
    @classmethod
    def _blocks_or_empty(cls, value, handler):
        """Absent ou mal formé à la lecture → liste vide (jamais d'erreur au chargement)."""
        if value is None:
            return []
        try:
            return handler(value)
        except ValidationError as e:
            log.warning("Blocs mal formés ignorés : %s", e.error_count())
            return []
