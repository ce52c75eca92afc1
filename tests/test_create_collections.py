from unittest.mock import MagicMock

from pymongo.errors import CollectionInvalid, OperationFailure

from employee_mongodb.create_collections import create_collections
from employee_mongodb.schema import employees_schema


def _db(existing=()):
    db = MagicMock()
    db.list_collection_names.return_value = list(existing)
    return db


def test_creates_and_applies_validator(capsys):
    db = _db()

    create_collections(db)

    db.create_collection.assert_called_once_with("employees")
    db.command.assert_called_once_with(
        "collMod", "employees", validator={"$jsonSchema": employees_schema}
    )
    assert "✅ Employee validator applied to 'employees'" in capsys.readouterr().out


def test_existing_collection_not_recreated():
    db = _db(existing=["staff"])

    create_collections(db, "staff")

    db.create_collection.assert_not_called()
    db.command.assert_called_once_with(
        "collMod", "staff", validator={"$jsonSchema": employees_schema}
    )


def test_collection_created_concurrently():
    db = _db()
    db.create_collection.side_effect = CollectionInvalid("collection employees already exists")

    create_collections(db)

    db.command.assert_called_once()


def test_validator_failure_reported(capsys):
    db = _db()
    db.command.side_effect = OperationFailure("not authorized")

    create_collections(db)

    out = capsys.readouterr().out
    assert "⚠️ Employee validator not applied to 'employees': not authorized" in out
    assert "✅" not in out
