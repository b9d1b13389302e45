# tests/integration_tests/test_role_controller.py
from decimal import Decimal

import pytest

from personnel.controllers.role_controller import (
    list_roles,
    role_choices,
    role_delete_choices,
    add_role,
    delete_role,
)
from personnel.controllers.employee_controller import add_employee, list_employees
from personnel.exceptions import NotFound, ValidationError


def test_add_role_stores_numeric_salary(db, sales_department):
    add_role(db, "Engineer", "95000.50", sales_department)

    role = list_roles(db)[0]
    assert isinstance(role["salary"], Decimal)
    assert role["salary"] == Decimal("95000.50")


def test_list_roles_projection(db, rep_role):
    rows = list_roles(db)
    assert list(rows[0].keys()) == ["id", "title", "salary", "department"]
    assert rows[0]["department"] == "Sales"


def test_add_role_unknown_department(db):
    with pytest.raises(NotFound):
        add_role(db, "Rep", "50000", "Nowhere")
    assert list_roles(db) == []


@pytest.mark.parametrize("salary", ["abc", "", "-10", "NaN", "Infinity"])
def test_add_role_invalid_salary(db, sales_department, salary):
    with pytest.raises(ValidationError):
        add_role(db, "Rep", salary, sales_department)


def test_role_choices(db, rep_role):
    add_role(db, "Lead", "80000", "Sales")
    assert role_choices(db) == [("Rep", "Rep"), ("Lead", "Lead")]
    assert role_delete_choices(db) == [("Rep", 1), ("Lead", 2)]


def test_delete_role(db, rep_role):
    delete_role(db, 1)
    assert list_roles(db) == []


def test_delete_role_already_gone(db):
    with pytest.raises(NotFound):
        delete_role(db, 42)


def test_delete_role_keeps_employees(db, rep_role):
    add_employee(db, "Ann", "Lee", "Rep", "None")
    delete_role(db, 1)

    employee = list_employees(db)[0]
    assert employee["name"] == "Ann Lee"
    assert employee["title"] is None
    assert employee["salary"] is None


@pytest.mark.parametrize("salary, expected", [(".5", "0.50"), ("1e5", "100000.00")])
def test_add_role_accepts_numeric_notations(db, sales_department, salary, expected):
    add_role(db, "Intern", salary, sales_department)
    assert list_roles(db)[0]["salary"] == Decimal(expected)
