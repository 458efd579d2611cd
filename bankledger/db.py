from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from bankledger.settings import get_settings


def get_database_url() -> str:
    return get_settings().database_url


def build_engine(url: str) -> Engine:
    # sqlite needs check_same_thread when the engine outlives its creating thread
    connect_args = {}
    if url.startswith("sqlite:///"):
        connect_args = {"check_same_thread": False}

    return create_engine(url, future=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@lru_cache
def get_engine() -> Engine:
    return build_engine(get_database_url())


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    return build_session_factory(get_engine())


def init_db(engine: Engine | None = None, *, reset: bool = False) -> None:
    """
    Create the tables. With reset=True every mapped table is dropped first,
    which wipes all stored transactions.
    """
    # import here to avoid circular imports
    from bankledger.repositories.sql_transaction_repository import Base  # noqa

    engine = engine or get_engine()
    if reset:
        Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
