"""
Personnel Tracker: menu-driven CLI for departments, roles and employees.
"""
