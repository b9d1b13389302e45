# tests/conftest.py
import pytest

from personnel.database import Database
from personnel.controllers.department_controller import add_department
from personnel.controllers.role_controller import add_role
from personnel.controllers.employee_controller import add_employee


@pytest.fixture
def db():
    database = Database("sqlite://").connect()
    database.create_schema()
    yield database
    database.close()


@pytest.fixture
def sales_department(db):
    add_department(db, "Sales")
    return "Sales"


@pytest.fixture
def rep_role(db, sales_department):
    add_role(db, "Rep", "50000", sales_department)
    return "Rep"


@pytest.fixture
def staffed_db(db, rep_role):
    """Sales/Rep with Ann Lee managing Bob Stone, plus an empty Legal department."""
    add_department(db, "Legal")
    add_role(db, "Lead", "80000", "Sales")
    add_employee(db, "Ann", "Lee", "Lead", "None")
    add_employee(db, "Bob", "Stone", "Rep", "Ann Lee")
    return db
