from datetime import datetime

import jsonschema
import pytest
from bson import ObjectId

from employee_mongodb.schema import employees_schema, to_jsonschema, validate_employee_document


def _doc(**overrides):
    doc = {
        "name": "Ann",
        "email": "ann@example.com",
        "hobbies": ["chess"],
        "createdAt": datetime(2024, 1, 1),
        "updatedAt": datetime(2024, 1, 1),
    }
    doc.update(overrides)
    return doc


def test_to_jsonschema_maps_bson_types():
    converted = to_jsonschema(employees_schema)

    assert converted["type"] == "object"
    assert converted["required"] == employees_schema["required"]
    props = converted["properties"]
    assert props["age"] == {"type": "integer", "minimum": 0}
    assert props["hobbies"] == {"type": "array", "items": {"type": "string"}}
    assert props["createdAt"] == {"type": "date"}
    assert props["referral"] == {"type": "objectId"}
    assert props["address"]["properties"]["city"] == {"type": "string"}
    assert props["previousCompanies"]["properties"]["yearsOfExperience"]["type"] == "number"


def test_to_jsonschema_type_list():
    assert to_jsonschema({"bsonType": ["date", "null"]}) == {"type": ["date", "null"]}


def test_valid_document_passes():
    validate_employee_document(_doc(
        age=35,
        referral=ObjectId(),
        address={"city": "Anytown"},
        previousCompanies={"companyName": "Acme", "yearsOfExperience": 8.6},
    ))


@pytest.mark.parametrize("overrides", [
    {"age": "35"},
    {"age": True},
    {"hobbies": ["chess", 3]},
    {"createdAt": "2024-01-01"},
    {"referral": "not-an-object-id"},
    {"address": {"city": 12}},
    {"previousCompanies": {"yearsOfExperience": -1.0}},
])
def test_invalid_document_fails(overrides):
    with pytest.raises(jsonschema.ValidationError):
        validate_employee_document(_doc(**overrides))


def test_missing_required_field_fails():
    doc = _doc()
    del doc["email"]
    with pytest.raises(jsonschema.ValidationError):
        validate_employee_document(doc)
