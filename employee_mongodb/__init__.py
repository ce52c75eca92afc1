"""employee_mongodb package initializer

Connection bootstrap, the Employee schema and the record writer used by the
``employee-insert`` command.
"""

__all__ = [
    "connect_db",
    "create_collections",
    "insert_employee",
    "models",
    "schema",
]
