# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import os

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from volunteer_hub.config import settings

Base = declarative_base()


def resolve_database_url() -> str:
    # Safety check: prevent production database access during testing
    if os.getenv("TESTING") == "1":
        return "sqlite:///:memory:"
    return settings.database_url


class Database:
    """
    Owns the engine and session factory for the lifetime of the application.
    """

    def __init__(self, url: str, timeout: float = settings.store_timeout_seconds, **engine_kwargs):
        self.url = url
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False, "timeout": timeout})
        else:
            engine_kwargs.setdefault("pool_timeout", timeout)
        self.engine = create_engine(url, pool_pre_ping=True, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
