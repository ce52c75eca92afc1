from pymongo.database import Database
from pymongo.errors import CollectionInvalid, OperationFailure

from employee_mongodb.connect_db import COLLECTION_NAME, get_database
from employee_mongodb.schema import employees_schema


def create_collections(db: Database, collection_name: str = COLLECTION_NAME) -> None:
    """Make sure the employees collection exists and enforces ``employees_schema``.

    A validator that cannot be applied (missing privileges, old server) is
    reported and the collection is left as it is.
    """
    if collection_name not in db.list_collection_names():
        try:
            db.create_collection(collection_name)
        except CollectionInvalid:
            # created concurrently
            pass

    try:
        db.command("collMod", collection_name, validator={"$jsonSchema": employees_schema})
    except OperationFailure as e:
        print(f"⚠️ Employee validator not applied to '{collection_name}': {e}")
        return
    print(f"✅ Employee validator applied to '{collection_name}'")


if __name__ == "__main__":
    create_collections(get_database())
