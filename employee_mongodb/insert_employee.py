"""Insert a sample Employee into MongoDB.

Connects first and only then writes: one ``insert_one`` followed by an
optional re-save, which writes nothing when the record is unchanged.

Usage:
    MONGO_URI='mongodb://localhost:27017/employee_db' employee-insert
    employee-insert --uri mongodb://localhost:27017 --db-name hr --no-resave
"""
from __future__ import annotations

import argparse
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

import jsonschema
from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from employee_mongodb.connect_db import COLLECTION_NAME, CONNECT_ERRORS, get_client, get_database
from employee_mongodb.create_collections import create_collections
from employee_mongodb.models import EMPLOYEE_FIELDS, Employee
from employee_mongodb.schema import validate_employee_document

WRITE_ERRORS = (ValidationError, jsonschema.ValidationError, PyMongoError)

SAMPLE_EMPLOYEE = {
    "name": "John date",
    "email": "johndoe123@example.com",
    "age": 35,
    "address": {
        "landmark": "tea shop",
        "street": "123 Main St",
        "city": "Anytown",
        "state": "CA",
        "country": "GB",
    },
    "hobbies": ["Eating", "sleeping", "cooking"],
    "designation": "SDET-II",
    "previousCompanies": {
        "companyName": "xfgbhn",
        "companyType": "Healthcare",
        "yearsOfExperience": 8.6,
    },
}


def build_document(data: Mapping[str, Any]) -> dict:
    """Validate ``data`` as an Employee and return the document to store."""
    doc = Employee.model_validate(data).to_document()
    validate_employee_document(doc)
    return doc


def _comparable(value):
    # what a round trip through BSON gives back: naive UTC, millisecond precision
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.replace(microsecond=value.microsecond // 1000 * 1000)
    if isinstance(value, dict):
        return {k: _comparable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_comparable(v) for v in value]
    return value


def create_employee(collection: Collection, data: Mapping[str, Any]) -> dict:
    doc = build_document(data)
    result = collection.insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def save_employee(collection: Collection, document: dict) -> bool:
    """Persist local changes to ``document``.

    Inserts it when it has never been stored. Otherwise only fields that
    differ from the stored copy are written. Returns False when there was
    nothing to write.
    """
    doc = build_document(document)
    doc_id = document.get("_id")

    stored = collection.find_one({"_id": doc_id}) if doc_id is not None else None
    if stored is None:
        if doc_id is not None:
            doc["_id"] = doc_id
        result = collection.insert_one(doc)
        document["_id"] = result.inserted_id
        print(f"✅ Saved new employee with ID: {result.inserted_id}")
        return True

    changes = {
        key: value for key, value in doc.items()
        if _comparable(stored.get(key)) != _comparable(value)
    }
    removed = [key for key in EMPLOYEE_FIELDS if key in stored and key not in doc]
    if not changes and not removed:
        print(f"No changes to save for employee {doc_id}")
        return False

    update: dict = {}
    if changes:
        update["$set"] = changes
    if removed:
        update["$unset"] = {key: "" for key in removed}
    collection.update_one({"_id": doc_id}, update)
    print(f"✅ Updated employee {doc_id}: {sorted(list(changes) + removed)}")
    return True


def run(
    collection: Collection,
    data: Mapping[str, Any] = SAMPLE_EMPLOYEE,
    resave: bool = True,
) -> Optional[dict]:
    """Create one employee, print it, and optionally save it again.

    Failures are printed, not raised. A failed re-save still returns the
    inserted employee.
    """
    try:
        employee = create_employee(collection, data)
    except WRITE_ERRORS as e:
        print(f"❌ Failed to insert employee: {e}")
        return None

    print(f"✅ Inserted employee with ID: {employee['_id']}")
    print(employee)

    if resave:
        try:
            save_employee(collection, employee)
        except WRITE_ERRORS as e:
            print(f"❌ Failed to save employee {employee['_id']}: {e}")
    return employee


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Insert a sample employee document into MongoDB",
    )
    parser.add_argument(
        "--uri",
        help="MongoDB connection string (default: $MONGO_URI)",
    )
    parser.add_argument(
        "--db-name",
        help="Database name (default: database in the URI, then $DB_NAME)",
    )
    parser.add_argument(
        "--collection",
        default=COLLECTION_NAME,
        help="Collection to insert into",
    )
    parser.add_argument(
        "--no-resave",
        dest="resave",
        action="store_false",
        help="Skip the save call after the insert",
    )
    parser.add_argument(
        "--setup-collection",
        action="store_true",
        help="Create the collection and apply its $jsonSchema validator first",
    )

    args = parser.parse_args(argv)

    try:
        client = get_client(args.uri)
    except CONNECT_ERRORS:
        # already reported; the writer never runs without a connection
        return 0

    try:
        db = get_database(client, args.db_name)
        if args.setup_collection:
            create_collections(db, args.collection)
        run(db[args.collection], resave=args.resave)
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
