"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI creates it on startup and
closes it on shutdown (see `api/main.py`); any caller that runs before that
gets the pool created on first use instead.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg

logger = logging.getLogger(__name__)

# No connection is opened until the first statement runs, so an unreachable
# database surfaces as a failed query rather than a failed startup.
DEFAULT_POOL_MIN_SIZE = 0
DEFAULT_POOL_MAX_SIZE = 5
DEFAULT_COMMAND_TIMEOUT_S = 30

_pool: asyncpg.Pool | None = None
_pool_lock: asyncio.Lock | None = None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    """
    DSN for the pool.

    `DATABASE_URL` wins when set; otherwise the DSN is assembled from
    DB_HOST / DB_PORT / DB_USER / DB_PASSWORD / DB_NAME.
    """
    url = os.environ.get("DATABASE_URL", "").strip()
    if url:
        return _sanitize_database_url(url)

    host = os.environ.get("DB_HOST", "").strip() or "localhost"
    port = _env_int("DB_PORT", 5432)
    user = os.environ.get("DB_USER", "").strip() or "postgres"
    password = os.environ.get("DB_PASSWORD", "")
    name = os.environ.get("DB_NAME", "").strip() or "sections"

    credentials = quote(user, safe="")
    if password:
        credentials = f"{credentials}:{quote(password, safe='')}"
    return f"postgresql://{credentials}@{host}:{port}/{quote(name, safe='')}"


def _init_lock() -> asyncio.Lock:
    # Created lazily so the lock belongs to the running loop.
    global _pool_lock
    if _pool_lock is None:
        _pool_lock = asyncio.Lock()
    return _pool_lock


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    async with _init_lock():
        # Another caller may have finished while we waited on the lock.
        if _pool is not None:
            return None
        min_size = max(0, _env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE))
        max_size = max(1, min_size, _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE))
        _pool = await asyncpg.create_pool(
            dsn=database_url(),
            min_size=min_size,
            max_size=max_size,
            command_timeout=_env_int("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT_S),
        )
        logger.info("db_pool_initialized min_size=%s max_size=%s", min_size, max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def set_pool(pool: asyncpg.Pool | None) -> None:
    """
    Install an already-built pool (or clear it with None).
    """
    global _pool
    _pool = pool


async def get_pool() -> asyncpg.Pool:
    if _pool is None:
        await init_pool()
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _statement_head(sql: str) -> str:
    for line in sql.splitlines():
        line = line.strip()
        if line:
            return line
    return ""


async def execute_query(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a parameterized statement and return its rows as dicts.

    Statements without a result set (UPDATE/DELETE without RETURNING) return
    an empty list. Failures are logged and re-raised unchanged.
    """
    pool = await get_pool()
    try:
        rows = await pool.fetch(sql, *args)
    except Exception:
        logger.exception("query_failed sql=%r", _statement_head(sql))
        raise
    return [_record_to_dict(r) for r in rows]


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    rows = await execute_query(sql, *args)
    return rows[0] if rows else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    return await execute_query(sql, *args)
