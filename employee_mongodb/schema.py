# schema.py
from datetime import datetime

from bson import ObjectId
from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import best_match

address_schema = {
    "bsonType": "object",
    "properties": {
        "landmark": {"bsonType": "string"},
        "street": {"bsonType": "string"},
        "city": {"bsonType": "string"},
        "state": {"bsonType": "string"},
        "country": {"bsonType": "string"}
    }
}

previous_company_schema = {
    "bsonType": "object",
    "properties": {
        "companyName": {"bsonType": "string"},
        "companyType": {"bsonType": "string"},
        "yearsOfExperience": {"bsonType": "double", "minimum": 0}
    }
}

employees_schema = {
    "bsonType": "object",
    "required": ["name", "email", "hobbies", "createdAt", "updatedAt"],
    "properties": {
        "name": {"bsonType": "string"},
        "email": {"bsonType": "string"},
        "age": {"bsonType": "int", "minimum": 0},
        "address": address_schema,
        "referral": {"bsonType": "objectId"},
        "hobbies": {"bsonType": "array", "items": {"bsonType": "string"}},
        "designation": {"bsonType": "string"},
        "previousCompanies": previous_company_schema,
        "createdAt": {"bsonType": "date"},
        "updatedAt": {"bsonType": "date"}
    }
}


# ======== $jsonSchema -> JSON Schema ========
_BSON_TO_JSON_TYPES = {
    "string": "string",
    "int": "integer",
    "long": "integer",
    "double": "number",
    "decimal": "number",
    "bool": "boolean",
    "null": "null",
    "object": "object",
    "array": "array",
    "date": "date",
    "objectId": "objectId",
}

_type_checker = Draft7Validator.TYPE_CHECKER.redefine_many({
    "date": lambda checker, instance: isinstance(instance, datetime),
    "objectId": lambda checker, instance: isinstance(instance, ObjectId),
})

EmployeeValidator = validators.extend(Draft7Validator, type_checker=_type_checker)


def to_jsonschema(bson_schema: dict) -> dict:
    """Translate a MongoDB ``$jsonSchema`` document into plain JSON Schema.

    ``bsonType`` is mapped onto ``type``; ``date`` and ``objectId`` become
    custom types understood by ``EmployeeValidator``. Nested ``properties``
    and array ``items`` are converted recursively.
    """
    json_schema: dict = {}
    bson_type = bson_schema.get("bsonType")
    if bson_type is not None:
        types = bson_type if isinstance(bson_type, list) else [bson_type]
        json_types = [_BSON_TO_JSON_TYPES.get(t, "string") for t in types]
        json_schema["type"] = json_types[0] if len(json_types) == 1 else json_types

    if "properties" in bson_schema:
        json_schema["properties"] = {
            key: to_jsonschema(prop) for key, prop in bson_schema["properties"].items()
        }
    if "items" in bson_schema:
        json_schema["items"] = to_jsonschema(bson_schema["items"])
    for keyword in ("required", "minimum", "maximum", "enum"):
        if keyword in bson_schema:
            json_schema[keyword] = bson_schema[keyword]
    return json_schema


_VALIDATOR_CACHE: dict = {}


def validate_employee_document(doc: dict) -> None:
    """Raise ``jsonschema.ValidationError`` if ``doc`` does not match ``employees_schema``."""
    # custom types are not in the draft 7 metaschema, so skip check_schema
    if "employees" not in _VALIDATOR_CACHE:
        _VALIDATOR_CACHE["employees"] = EmployeeValidator(to_jsonschema(employees_schema))
    error = best_match(_VALIDATOR_CACHE["employees"].iter_errors(doc))
    if error is not None:
        raise error
