"""
Tests for the startup sequence in main.py.
"""
from unittest.mock import patch, Mock

import pytest
from sqlalchemy import text

import main
from personnel.exceptions import ConfigurationError

EMPLOYEE_TABLE = text(
    "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'employee'"
)


@patch("main.sentry_sdk")
@patch("main.database_url", side_effect=ConfigurationError("DB_HOST is not set"))
def test_open_database_missing_configuration_exits(mock_url, mock_sentry):
    with pytest.raises(SystemExit) as exit_info:
        main.open_database()
    assert exit_info.value.code == 1
    mock_sentry.capture_exception.assert_called_once()


@patch("main.sentry_sdk")
@patch("main.database_url", return_value="sqlite:////nonexistent-directory/nested/x.db")
def test_open_database_unreachable_exits(mock_url, mock_sentry):
    with pytest.raises(SystemExit) as exit_info:
        main.open_database()
    assert exit_info.value.code == 1


@patch("main.database_url", return_value="sqlite://")
def test_open_database_creates_schema(mock_url):
    db = main.open_database()
    try:
        assert db.execute(EMPLOYEE_TABLE) == [{"name": "employee"}]
    finally:
        db.close()


@patch("main.sentry_sdk")
@patch("main.main_menu")
@patch("main.open_database")
@patch("main.load_dotenv", return_value=False)
def test_main_closes_database_after_quit(mock_dotenv, mock_open, mock_menu, mock_sentry):
    db = Mock()
    mock_open.return_value = db

    main.main()

    mock_menu.assert_called_once_with(db)
    db.close.assert_called_once()


@patch("main.sentry_sdk")
@patch("main.main_menu", side_effect=KeyboardInterrupt)
@patch("main.open_database")
@patch("main.load_dotenv", return_value=True)
def test_main_closes_database_on_interrupt(mock_dotenv, mock_open, mock_menu, mock_sentry):
    main.main()
    mock_open.return_value.close.assert_called_once()


@patch("main.sentry_sdk")
@patch.dict("os.environ", {"DATABASE_URL": "not a url"})
def test_open_database_malformed_url_exits(mock_sentry):
    with pytest.raises(SystemExit) as exit_info:
        main.open_database()
    assert exit_info.value.code == 1


@patch("main.sentry_sdk")
@patch("personnel.database.create_engine", side_effect=ModuleNotFoundError("No module named 'pymysql'"))
@patch("main.database_url", return_value="mysql+pymysql://user@localhost/personnel_db")
def test_open_database_missing_driver_exits(mock_url, mock_engine, mock_sentry):
    with pytest.raises(SystemExit) as exit_info:
        main.open_database()
    assert exit_info.value.code == 1
