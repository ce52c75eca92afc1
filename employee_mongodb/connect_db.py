# connect_db.py
import os
from typing import Optional

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError, PyMongoError

# pymongo raises ValueError for some malformed URIs, e.g. a non-numeric port
CONNECT_ERRORS = (PyMongoError, ValueError)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"⚠️ Ignoring {name}={value!r}, using {default}")
        return default


load_dotenv()
MONGO_URI = os.getenv("MONGO_URI")
DB_NAME = os.getenv("DB_NAME", "employee_db")
COLLECTION_NAME = os.getenv("EMPLOYEE_COLLECTION", "employees")
SERVER_SELECTION_TIMEOUT_MS = _env_int("MONGO_TIMEOUT_MS", 5000)


def get_client(uri: Optional[str] = None, timeout_ms: Optional[int] = None) -> MongoClient:
    """Open a client and wait for the server to answer a ping.

    Raises the driver error after reporting it; nothing is retried.
    """
    uri = uri or MONGO_URI
    if not uri:
        print("❌ Not connected to MongoDB: MONGO_URI is not set")
        raise ConfigurationError("MONGO_URI is not set")
    if timeout_ms is None:
        timeout_ms = SERVER_SELECTION_TIMEOUT_MS

    client = None
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        client.admin.command("ping")
    except CONNECT_ERRORS as e:
        print(f"❌ Not connected to MongoDB: {e}")
        if client is not None:
            client.close()
        raise

    print("✅ Connected to MongoDB")
    return client


def get_database(client: Optional[MongoClient] = None, db_name: Optional[str] = None) -> Database:
    if client is None:
        client = get_client()
    if db_name:
        return client[db_name]
    # database named in the URI wins over DB_NAME
    return client.get_default_database(default=DB_NAME)


if __name__ == "__main__":
    db = get_database()
    print(f"Using database: {db.name}")
