from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from moviesapi.core.config import get_settings

load_dotenv()

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Engine for the movie store; SQLite is shared across FastAPI's threadpool"""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    options = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # One connection, or every checkout would see a different empty database
        options["poolclass"] = StaticPool
    return create_engine(database_url, **options)


engine = build_engine(get_settings().DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=True)


def get_db():
    """Request-scoped session, closed once the response is produced"""
    with SessionLocal() as db:
        yield db
