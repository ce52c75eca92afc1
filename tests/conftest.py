from datetime import datetime

import mongomock
import pytest


@pytest.fixture
def client():
    return mongomock.MongoClient()


@pytest.fixture
def employees(client):
    return client["employee_db"]["employees"]


@pytest.fixture
def john():
    return {
        "name": "John date",
        "email": "johndoe123@example.com",
        "age": 35,
        "hobbies": ["Eating", "sleeping", "cooking"],
        "createdAt": datetime(2024, 5, 1, 9, 30, 0, 123000),
        "updatedAt": datetime(2024, 5, 1, 9, 30, 0, 123000),
    }
