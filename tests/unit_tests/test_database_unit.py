# tests/unit_tests/test_database_unit.py
from unittest.mock import patch

import pytest
from sqlalchemy import text, select, insert

from personnel.database import Database
from personnel.exceptions import StoreConnectionError, QueryError
from personnel.models import Department


def test_connect_unreachable_database():
    database = Database("sqlite:////nonexistent-directory/nested/personnel.db")
    with pytest.raises(StoreConnectionError):
        database.connect()
    assert database.connection is None


def test_execute_before_connect():
    with pytest.raises(StoreConnectionError):
        Database("sqlite://").execute(select(Department.id))


def test_connect_reports_database_name(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'personnel_db.sqlite'}").connect()
    assert database.name.endswith("personnel_db.sqlite")
    database.close()


def test_foreign_keys_enforced_on_sqlite(db):
    assert db.execute(text("PRAGMA foreign_keys")) == [{"foreign_keys": 1}]


def test_execute_returns_rowcount_for_writes(db):
    assert db.execute(insert(Department).values(name="Sales")) == 1


def test_execute_binds_parameters(db):
    hostile = "x'); DROP TABLE department; --"
    db.execute(Department.__table__.insert().values(name=hostile))
    rows = db.execute(select(Department.name).where(Department.name == hostile))
    assert rows == [{"name": hostile}]


def test_execute_malformed_statement(db):
    with pytest.raises(QueryError):
        db.execute(text("SELECT * FROM no_such_table"))


def test_close_is_idempotent(db):
    db.close()
    db.close()
    with pytest.raises(StoreConnectionError):
        db.execute(select(Department.id))


def test_connect_driver_not_installed():
    database = Database("mysql+pymysql://user@localhost/personnel_db")
    with patch("personnel.database.create_engine", side_effect=ModuleNotFoundError("No module named 'pymysql'")):
        with pytest.raises(StoreConnectionError, match="mysql\\+pymysql is not installed"):
            database.connect()
    assert database.engine is None
