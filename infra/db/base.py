# infra/db/base.py
from __future__ import annotations
import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.config import EngineSettings

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(settings: EngineSettings | None = None) -> Engine:
    settings = settings or EngineSettings.from_env()
    logger.info("Using database at: %s", settings.db_url)
    return create_engine(settings.db_url, echo=settings.sql_echo, future=True)


def init_db(engine: Engine) -> None:
    # import registers the ORM classes on Base.metadata
    from infra.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
