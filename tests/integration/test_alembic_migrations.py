"""
Apply the Alembic chain to a scratch SQLite file and compare with the ORM metadata.
"""
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from innkeeper.db.models import Base

ROOT = Path(__file__).resolve().parents[2]


def _config():
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "migrations"))
    return cfg


def test_upgrade_creates_every_model_table(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setenv("TEST_DATABASE_URL", url)

    command.upgrade(_config(), "head")

    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        assert set(Base.metadata.tables) <= tables
        for name, table in Base.metadata.tables.items():
            migrated = {c["name"] for c in inspector.get_columns(name)}
            assert set(table.columns.keys()) == migrated, name
    finally:
        engine.dispose()


def test_downgrade_drops_tables(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'roundtrip.db'}"
    monkeypatch.setenv("TEST_DATABASE_URL", url)
    cfg = _config()

    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine = create_engine(url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
