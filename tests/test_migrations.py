"""
tests.test_migrations

Migration step and runner behaviour.

Responsibilities:
- Ensure the KBAData table creation is idempotent and matches the record schema.
- Ensure steps run in timestamp order and SQL errors reach the caller unchanged.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.dialects import mysql
from sqlalchemy.exc import OperationalError

from kba_plugin.db.session import sync_database_url
from kba_plugin.migrations import (
    ALL_MIGRATIONS,
    Migration1722080412CreateKBADataTable,
    MigrationStep,
    run_migrations,
)

REPO_ROOT = Path(__file__).resolve().parents[1]

EXPECTED_COLUMNS = {
    "id": False,
    "name": True,
    "description": True,
    "active": True,
    "created_at": False,
    "updated_at": True,
}


@pytest.fixture
def engine(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    yield engine
    engine.dispose()


def test_create_table_twice_leaves_one_table_with_exact_columns(engine) -> None:
    step = Migration1722080412CreateKBADataTable()

    with engine.begin() as conn:
        step.update(conn)
    with engine.begin() as conn:
        step.update(conn)

    insp = inspect(engine)
    assert insp.get_table_names() == ["k_b_a_data"]

    columns = {c["name"]: c["nullable"] for c in insp.get_columns("k_b_a_data")}
    assert columns == EXPECTED_COLUMNS
    assert insp.get_pk_constraint("k_b_a_data")["constrained_columns"] == ["id"]


def test_create_table_keeps_existing_rows(engine) -> None:
    step = Migration1722080412CreateKBADataTable()
    with engine.begin() as conn:
        step.update(conn)
        conn.execute(
            text(
                "INSERT INTO k_b_a_data (id, name, created_at) "
                "VALUES (:id, 'kept', '2024-07-27 11:40:12.000')"
            ),
            {"id": b"\x01" * 16},
        )

    with engine.begin() as conn:
        step.update(conn)
        count = conn.execute(text("SELECT COUNT(*) FROM k_b_a_data")).scalar_one()

    assert count == 1


def test_destructive_update_is_noop(engine) -> None:
    step = Migration1722080412CreateKBADataTable()
    with engine.begin() as conn:
        step.update(conn)
        step.update_destructive(conn)

    assert inspect(engine).has_table("k_b_a_data")


def test_mysql_statement_matches_storage_layout() -> None:
    ddl = str(Migration1722080412CreateKBADataTable().statement().compile(dialect=mysql.dialect()))

    assert "CREATE TABLE IF NOT EXISTS k_b_a_data" in ddl
    assert "BINARY(16) NOT NULL" in ddl
    assert "DATETIME(3) NOT NULL" in ddl
    assert "PRIMARY KEY (id)" in ddl
    assert "ENGINE=InnoDB" in ddl
    assert "utf8mb4_unicode_ci" in ddl


def test_creation_timestamp() -> None:
    assert Migration1722080412CreateKBADataTable().creation_timestamp == 1722080412
    assert Migration1722080412CreateKBADataTable in ALL_MIGRATIONS


class _RecordingStep(MigrationStep):
    def __init__(self, timestamp: int, calls: list[tuple[str, int]]) -> None:
        self._timestamp = timestamp
        self._calls = calls

    @property
    def creation_timestamp(self) -> int:
        return self._timestamp

    def update(self, connection) -> None:
        self._calls.append(("update", self._timestamp))

    def update_destructive(self, connection) -> None:
        self._calls.append(("destructive", self._timestamp))


def test_run_migrations_orders_by_timestamp(engine) -> None:
    calls: list[tuple[str, int]] = []
    steps = [_RecordingStep(30, calls), _RecordingStep(10, calls), _RecordingStep(20, calls)]

    with engine.begin() as conn:
        applied = run_migrations(conn, steps)

    assert applied == [10, 20, 30]
    assert calls == [("update", 10), ("update", 20), ("update", 30)]


def test_run_migrations_destructive_runs_both_phases(engine) -> None:
    calls: list[tuple[str, int]] = []

    with engine.begin() as conn:
        run_migrations(conn, [_RecordingStep(1, calls)], destructive=True)

    assert calls == [("update", 1), ("destructive", 1)]


class _BrokenStep(Migration1722080412CreateKBADataTable):
    def statement(self):
        return text("CREATE TABLE")


def test_sql_errors_propagate(engine) -> None:
    with pytest.raises(OperationalError):
        with engine.begin() as conn:
            run_migrations(conn, [_BrokenStep()])

    assert not inspect(engine).has_table("k_b_a_data")


def _alembic_config(output_buffer=None) -> Config:
    cfg = Config(output_buffer=output_buffer)
    cfg.set_main_option("script_location", str(REPO_ROOT / "alembic"))
    return cfg


def test_alembic_revision_creates_table_idempotently(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    db_path = tmp_path / "alembic.db"
    # Runtime (async) URL; the environment rewrites it for the sync engine.
    monkeypatch.setenv("KBA_DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    cfg = _alembic_config()

    command.upgrade(cfg, "head")
    command.upgrade(cfg, "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        insp = inspect(engine)
        assert sorted(insp.get_table_names()) == ["alembic_version", "k_b_a_data"]
        columns = {c["name"]: c["nullable"] for c in insp.get_columns("k_b_a_data")}
        assert columns == EXPECTED_COLUMNS

        command.downgrade(cfg, "base")
        assert inspect(engine).has_table("k_b_a_data")
        with engine.connect() as conn:
            assert conn.execute(text("SELECT COUNT(*) FROM alembic_version")).scalar_one() == 0

        # Re-applying over the existing table goes through CREATE TABLE IF NOT EXISTS.
        command.upgrade(cfg, "head")
        with engine.connect() as conn:
            version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one()
        assert version == "1722080412"
    finally:
        engine.dispose()


def test_alembic_offline_mode_emits_create_statement(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("KBA_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'offline.db'}")
    buffer = io.StringIO()

    command.upgrade(_alembic_config(buffer), "head", sql=True)

    assert "CREATE TABLE IF NOT EXISTS k_b_a_data" in buffer.getvalue()
    assert not (tmp_path / "offline.db").exists()


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite+aiosqlite:///./kba.db", "sqlite:///./kba.db"),
        ("sqlite:///./kba.db", "sqlite:///./kba.db"),
        ("postgresql://user:secret@db/kba", "postgresql://user:secret@db/kba"),
    ],
)
def test_sync_database_url(url: str, expected: str) -> None:
    assert sync_database_url(url) == expected
