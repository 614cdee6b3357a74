"""Scripted stand-ins for psycopg2 connections and cursors."""

from unittest import mock


class FakeCursor:
    """
    Replays one scripted result per execute() call.

    Each result is either a dict with optional ``rows`` and ``rowcount`` keys,
    or an exception instance that execute() raises.
    """

    def __init__(self, results):
        self._results = list(results)
        self._rows = []
        self.rowcount = -1
        self.executed = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        result = self._results.pop(0) if self._results else {}
        if isinstance(result, Exception):
            raise result
        self._rows = list(result.get("rows", []))
        self.rowcount = result.get("rowcount", len(self._rows))

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows


class FakeConnection:
    def __init__(self, results=(), rollback_error=None):
        self.cursor_obj = FakeCursor(results)
        self.rollback_error = rollback_error
        self.cursor_factories = []
        self.autocommit = True
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return self.cursor_obj

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1
        if self.rollback_error is not None:
            raise self.rollback_error

    def close(self):
        self.closed = True

    @property
    def executed(self):
        return self.cursor_obj.executed


def patch_connect(*connections):
    """Patch psycopg2.connect to hand out the given fake connections in order."""
    return mock.patch("db.connection.psycopg2.connect", side_effect=list(connections))


def project_row(project_id, name, estimated=None, actual=None, difficulty=None, notes=None):
    return {
        "project_id": project_id,
        "project_name": name,
        "estimated_hours": estimated,
        "actual_hours": actual,
        "difficulty": difficulty,
        "notes": notes,
    }
