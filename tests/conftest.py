"""Shared test fixtures: in-memory fake pool + FastAPI test client.

Invariants:
    - Every test gets a fresh FakePool installed as the shared DB pool
    - FakePool answers the exact statement shapes the repositories send
    - Every executed statement is recorded as (sql, args)

Design Decisions:
    - Fake at the pool boundary (`fetch`), not at the repository functions,
      so the real SQL text and parameter order are exercised
    - The ASGI transport does not run the lifespan, so no real pool is created
"""

import re

import pytest
from httpx import ASGITransport, AsyncClient

from core import db
from main import app

_WS = re.compile(r"\s+")
_SELECT = re.compile(r"^SELECT (?P<cols>.+?) FROM (?P<table>\w+)(?: WHERE (?P<where>.+))?$")
_INSERT = re.compile(
    r"^INSERT INTO (?P<table>\w+) \((?P<cols>[^)]+)\) VALUES \((?P<params>[^)]+)\) RETURNING id$"
)
_UPDATE = re.compile(r"^UPDATE (?P<table>\w+) SET (?P<sets>.+) WHERE id = \$(?P<id>\d+) RETURNING id$")
_DELETE = re.compile(r"^DELETE FROM (?P<table>\w+) WHERE id = \$(?P<id>\d+) RETURNING id$")
_ASSIGN = re.compile(r"(\w+) = (?:COALESCE\(\$(\d+), \w+\)|\$(\d+))")
_EQUALS = re.compile(r"^(\w+) = \$(\d+)$")
_NOT_NULL = re.compile(r"^(\w+) IS NOT NULL$")


def _param(args, placeholder):
    return args[int(placeholder) - 1]


class FakePool:
    """Stands in for asyncpg.Pool; only `fetch` and `close` are used."""

    def __init__(self):
        self.tables = {"users": [], "chef": [], "section": [], "eventtable": []}
        self.statements = []
        self.error = None
        self.closed = False
        self._last_id = {}

    def seed(self, table, **row):
        if "id" not in row:
            row["id"] = self._last_id.get(table, 0) + 1
        self._last_id[table] = max(self._last_id.get(table, 0), row["id"])
        self.tables[table].append(row)
        return row

    def row(self, table, row_id):
        for row in self.tables[table]:
            if row["id"] == row_id:
                return row
        return None

    def statements_starting_with(self, verb):
        return [sql for sql, _ in self.statements if _WS.sub(" ", sql).strip().startswith(verb)]

    async def close(self):
        self.closed = True

    async def fetch(self, sql, *args):
        self.statements.append((sql, args))
        if self.error is not None:
            raise self.error

        stmt = _WS.sub(" ", sql).strip()
        if stmt == "SELECT 1 AS test":
            return [{"test": 1}]
        for pattern, handler in (
            (_SELECT, self._select),
            (_INSERT, self._insert),
            (_UPDATE, self._update),
            (_DELETE, self._delete),
        ):
            match = pattern.match(stmt)
            if match:
                return handler(match, args)
        raise AssertionError(f"FakePool cannot run: {stmt}")

    def _matches(self, row, where, args):
        if where is None:
            return True
        for condition in where.split(" OR "):
            equals = _EQUALS.match(condition)
            if equals and row.get(equals.group(1)) == _param(args, equals.group(2)):
                return True
            not_null = _NOT_NULL.match(condition)
            if not_null and row.get(not_null.group(1)) is not None:
                return True
        return False

    def _select(self, match, args):
        cols = match["cols"]
        rows = [r for r in self.tables[match["table"]] if self._matches(r, match["where"], args)]
        if cols == "*":
            return [dict(r) for r in rows]
        names = [c.strip() for c in cols.split(",")]
        return [{name: r.get(name) for name in names} for r in rows]

    def _insert(self, match, args):
        cols = [c.strip() for c in match["cols"].split(",")]
        params = [p.strip() for p in match["params"].split(",")]
        row = self.seed(match["table"], **{c: _param(args, p[1:]) for c, p in zip(cols, params)})
        return [{"id": row["id"]}]

    def _update(self, match, args):
        row = self.row(match["table"], _param(args, match["id"]))
        if row is None:
            return []
        for column, coalesce_param, plain_param in _ASSIGN.findall(match["sets"]):
            if coalesce_param:
                value = _param(args, coalesce_param)
                if value is not None:
                    row[column] = value
            else:
                row[column] = _param(args, plain_param)
        return [{"id": row["id"]}]

    def _delete(self, match, args):
        row = self.row(match["table"], _param(args, match["id"]))
        if row is None:
            return []
        self.tables[match["table"]].remove(row)
        return [{"id": row["id"]}]


@pytest.fixture
def fake_pool():
    pool = FakePool()
    db.set_pool(pool)
    yield pool
    db.set_pool(None)


@pytest.fixture
async def client(fake_pool):
    """FastAPI test client backed by the fake pool."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def pool_factory():
    """The FakePool class, for tests that build pools themselves."""
    return FakePool
