"""
ContactBook Backend: Migration Tests
====================================

What:  Applies and rolls back the Alembic revisions against a SQLite file.
How:   Alembic's command API with POSTGRES_URL pointing at tmp_path. These
       tests are synchronous because env.py drives its own event loop.
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

BACKEND_DIR = Path(__file__).resolve().parent.parent


@pytest.fixture
def alembic_setup(tmp_path, monkeypatch):
    db_file = tmp_path / "migrations.db"
    monkeypatch.setenv("POSTGRES_URL", f"sqlite+aiosqlite:///{db_file}")
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    sync_engine = create_engine(f"sqlite:///{db_file}")
    yield config, sync_engine
    sync_engine.dispose()


def test_upgrade_creates_contacts_table(alembic_setup):
    config, sync_engine = alembic_setup

    command.upgrade(config, "head")

    inspector = inspect(sync_engine)
    assert "contacts" in inspector.get_table_names()
    columns = {col["name"] for col in inspector.get_columns("contacts")}
    assert columns == {"id", "name", "email"}
    assert inspector.get_pk_constraint("contacts")["constrained_columns"] == ["id"]


def test_downgrade_drops_contacts_table(alembic_setup):
    config, sync_engine = alembic_setup

    command.upgrade(config, "head")
    command.downgrade(config, "base")

    assert "contacts" not in inspect(sync_engine).get_table_names()
