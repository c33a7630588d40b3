"""
Backend relationnel — table `projects` via SQLAlchemy (SQLite par défaut).
Une session (donc une transaction) par opération ; ids en AUTOINCREMENT, jamais réutilisés.
"""
import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..database import (
    db_create_project, db_delete_project, db_get_project, db_list_projects, db_list_projects_by_user,
    db_update_project, init_db, jd, jl, make_engine, make_session_factory,
)
from ..models import Project, ProjectCreate, ProjectDB, ProjectUpdate, as_utc, touch, utcnow
from .errors import ProjectValidationError, StorageIOError

log = logging.getLogger(__name__)

# INTEGER SQLite : entier signé 64 bits
_SQLITE_INT_MIN, _SQLITE_INT_MAX = -2 ** 63, 2 ** 63 - 1


def _storable(value: int) -> bool:
    """Hors plage, sqlite3 lève OverflowError : aucun enregistrement ne peut porter cette valeur."""
    return _SQLITE_INT_MIN <= value <= _SQLITE_INT_MAX


def _to_project(row: ProjectDB) -> Project:
    return Project(
        id=row.id,
        name=row.name,
        description=row.description,
        user_id=row.user_id,
        blocks=jl(row.blocks),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlProjectStore:
    def __init__(self, db_path: str):
        self.engine = make_engine(db_path)
        init_db(self.engine)
        self._sessions = make_session_factory(self.engine)

    @contextmanager
    def _session(self):
        db = self._sessions()
        try:
            yield db
        except IntegrityError as e:
            db.rollback()
            raise ProjectValidationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            db.rollback()
            log.error("Erreur base projets : %s", e)
            raise StorageIOError(str(e)) from e
        finally:
            db.close()

    def get_all(self) -> List[Project]:
        with self._session() as db:
            return [_to_project(row) for row in db_list_projects(db)]

    def get_by_user(self, user_id: int) -> List[Project]:
        if not _storable(user_id):
            return []
        with self._session() as db:
            return [_to_project(row) for row in db_list_projects_by_user(db, user_id)]

    def get(self, project_id: int) -> Optional[Project]:
        if not _storable(project_id):
            return None
        with self._session() as db:
            row = db_get_project(db, project_id)
            return _to_project(row) if row else None

    def create(self, data: ProjectCreate) -> Project:
        now = utcnow()
        with self._session() as db:
            row = db_create_project(db, ProjectDB(
                name=data.name,
                description=data.description,
                user_id=data.user_id,
                blocks=jd([b.model_dump() for b in data.blocks]),
                created_at=now,
                updated_at=now,
            ))
            return _to_project(row)

    def update(self, project_id: int, data: ProjectUpdate) -> Optional[Project]:
        if not _storable(project_id):
            return None
        changes = data.changes()
        if "blocks" in changes:
            changes["blocks"] = jd(changes["blocks"])
        with self._session() as db:
            row = db_get_project(db, project_id)
            if row is None:
                return None
            row = db_update_project(db, row, updated_at=touch(as_utc(row.updated_at)), **changes)
            return _to_project(row)

    def delete(self, project_id: int) -> bool:
        if not _storable(project_id):
            return False
        with self._session() as db:
            return db_delete_project(db, project_id)
