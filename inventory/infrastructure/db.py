from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from inventory.core_settings import get_settings
from inventory.domain.models import Base

settings = get_settings()
DATABASE_URL = settings.database_url

def is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")

def build_engine(url: str) -> Engine:
    if is_memory_sqlite(url):
        # One shared connection keeps the in-memory database alive across sessions
        return create_engine(
            url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if make_url(url).get_backend_name() == "sqlite":
        # File databases get a connection per session; writers wait on the file lock
        return create_engine(
            url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False, "timeout": 30},
        )
    return create_engine(url, echo=False, future=True, pool_pre_ping=True)

engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_models():
    Base.metadata.create_all(engine)

def drop_models():
    Base.metadata.drop_all(engine)
