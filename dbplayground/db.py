from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from .config import settings
from .exceptions import ConfigurationError

def _engine_options(database_url: str) -> dict:
    url = make_url(database_url)
    options = {"pool_pre_ping": True, "echo": settings.echo_sql}
    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        # in-memory databases live on a single connection
        if url.database in (None, "", ":memory:"):
            if settings.environment == "production":
                raise ConfigurationError("database_url", "in-memory SQLite cannot back a production deployment")
            options["poolclass"] = StaticPool
    return options

engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create every table registered on Base."""
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
