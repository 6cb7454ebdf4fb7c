"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers,
and the only place that reads configuration from the environment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from sqlalchemy import Engine

from northwind.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from northwind.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATABASE_URL_ENV = "NORTHWIND_DATABASE_URL"
SQL_ECHO_ENV = "NORTHWIND_SQL_ECHO"


def database_url() -> str:
    url = os.environ.get(DATABASE_URL_ENV)
    if url:
        return url
    _DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{_DATA_DIR / 'northwind.db'}"


def sql_echo() -> bool:
    return os.environ.get(SQL_ECHO_ENV, "").lower() in ("1", "true", "yes")


@lru_cache(maxsize=1)
def engine() -> Engine:
    return create_database_engine(database_url(), echo=sql_echo())


def order_repository() -> SqlOrderRepository:
    return SqlOrderRepository(create_session_factory(engine()))
