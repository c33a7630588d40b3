"""SQLite — engine + session + CRUD helpers projets"""
import json
import logging
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base, ProjectDB

log = logging.getLogger(__name__)

DATA_DIR = Path.cwd() / "data"


def make_engine(db_path: str) -> Engine:
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{db_path}", connect_args={"check_same_thread": False})


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


def init_db(engine: Engine):
    Base.metadata.create_all(bind=engine)
    log.info("Table projects prête (%s)", engine.url)


# ── JSON helpers ──
def jl(s: Optional[str]) -> list:
    try:
        v = json.loads(s or "[]")
    except (TypeError, ValueError):
        log.warning("Colonne JSON illisible, liste vide utilisée")
        return []
    return v if isinstance(v, list) else []

def jd(o) -> str:
    return json.dumps(o, ensure_ascii=False)


# ── Project ──
def db_create_project(db: Session, obj: ProjectDB) -> ProjectDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_project(db: Session, project_id: int) -> Optional[ProjectDB]:
    return db.get(ProjectDB, project_id)

def db_list_projects(db: Session) -> List[ProjectDB]:
    return db.query(ProjectDB).order_by(ProjectDB.id).all()

def db_list_projects_by_user(db: Session, user_id: int) -> List[ProjectDB]:
    return db.query(ProjectDB).filter(ProjectDB.user_id == user_id).order_by(ProjectDB.id).all()

def db_update_project(db: Session, obj: ProjectDB, **kwargs) -> ProjectDB:
    for k, v in kwargs.items():
        setattr(obj, k, v)
    db.commit(); db.refresh(obj); return obj

def db_delete_project(db: Session, project_id: int) -> bool:
    obj = db.get(ProjectDB, project_id)
    if obj is None:
        return False
    db.delete(obj); db.commit()
    return True
