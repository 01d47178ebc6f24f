"""
Shared pytest fixtures for the Fleet API tests.

This module provides:
- FakeDatabase: an in-memory stand-in for the Motor database, covering the
  collection calls the stores make
- A FastAPI test client wired to a fresh FakeDatabase
- Seeded users and vehicles, and bearer tokens for the protected routes
"""

import copy
import os
import sys
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGODB_DB_NAME"] = "fleet_test"
os.environ["JWT_SECRET"] = "test-signing-secret"
os.environ["JWT_MAGIC_CODE"] = "test-magic-code"
os.environ["AUTH_STRICT"] = "false"

from fastapi.testclient import TestClient

from fleet_api.config import get_settings
from fleet_api.database import get_database
from fleet_api.main import app
from fleet_api.security import create_access_token


# =============================================================================
# In-memory database
# =============================================================================

class FakeCursor:
    """Result of ``find``; only ``to_list`` is supported."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        documents = self._documents if length is None else self._documents[:length]
        return [copy.deepcopy(document) for document in documents]


class FakeCollection:
    """
    Async collection keeping documents in insertion order.

    Queries support equality and ``$in``; updates support ``$set`` and
    ``$push``. Register an exception in ``failures`` under a method name to
    make the next calls to that method raise it.
    """

    def __init__(self):
        self.documents: List[Dict[str, Any]] = []
        self.failures: Dict[str, Exception] = {}

    def _maybe_fail(self, method: str):
        if method in self.failures:
            raise self.failures[method]

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, condition in query.items():
            value = document.get(key)
            if isinstance(condition, dict) and "$in" in condition:
                if value not in condition["$in"]:
                    return False
            elif value != condition:
                return False
        return True

    def _first(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if self._matches(document, query):
                return document
        return None

    @staticmethod
    def _apply(document: Dict[str, Any], update: Dict[str, Any]):
        for key, value in update.get("$set", {}).items():
            document[key] = copy.deepcopy(value)
        for key, value in update.get("$push", {}).items():
            document.setdefault(key, []).append(value)

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        self._maybe_fail("find")
        return FakeCursor([d for d in self.documents if self._matches(d, query or {})])

    async def find_one(self, query: Optional[Dict[str, Any]] = None):
        self._maybe_fail("find_one")
        return copy.deepcopy(self._first(query or {}))

    async def insert_one(self, document: Dict[str, Any]):
        self._maybe_fail("insert_one")
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]):
        self._maybe_fail("update_one")
        document = self._first(query)
        if document is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        self._apply(document, update)
        return SimpleNamespace(matched_count=1, modified_count=1)

    async def find_one_and_update(self, query, update, return_document=False):
        self._maybe_fail("find_one_and_update")
        document = self._first(query)
        if document is None:
            return None
        before = copy.deepcopy(document)
        self._apply(document, update)
        return copy.deepcopy(document) if return_document else before

    async def find_one_and_delete(self, query: Dict[str, Any]):
        self._maybe_fail("find_one_and_delete")
        document = self._first(query)
        if document is None:
            return None
        self.documents.remove(document)
        return document

    async def delete_one(self, query: Dict[str, Any]):
        self._maybe_fail("delete_one")
        document = self._first(query)
        if document is None:
            return SimpleNamespace(deleted_count=0)
        self.documents.remove(document)
        return SimpleNamespace(deleted_count=1)

    # Test helpers, not part of the Motor API

    def ids(self) -> List[ObjectId]:
        return [document["_id"] for document in self.documents]

    def by_id(self, oid: Any) -> Optional[Dict[str, Any]]:
        return self._first({"_id": ObjectId(oid)})


class FakeDatabase:
    def __init__(self):
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection())

    def __getattr__(self, name: str) -> FakeCollection:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]


# =============================================================================
# Sample documents
# =============================================================================

def make_vehicle(index: int = 0) -> Dict[str, Any]:
    return {
        "type": "car",
        "brand": f"Brand {index}",
        "model": f"Model {index}",
        "licensePlateNumber": f"KR {1000 + index}",
    }


def make_user(index: int = 0, vehicles: Optional[List[ObjectId]] = None) -> Dict[str, Any]:
    return {
        "firstName": f"First{index}",
        "lastName": f"Last{index}",
        "email": f"user{index}@example.com",
        "phoneNumber": f"+48 600 000 {index:03d}",
        "vehicles": list(vehicles or []),
    }


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def seeded_db(fake_db):
    """Five vehicles and five users, every user referencing every vehicle."""
    for index in range(5):
        fake_db.vehicles.documents.append({"_id": ObjectId(), **make_vehicle(index)})
    vehicle_ids = fake_db.vehicles.ids()
    for index in range(5):
        fake_db.users.documents.append({"_id": ObjectId(), **make_user(index, vehicle_ids)})
    return fake_db


@pytest.fixture
def client(seeded_db):
    app.dependency_overrides[get_database] = lambda: seeded_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def token(settings):
    return create_access_token(settings.JWT_MAGIC_CODE, settings.JWT_SECRET)


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
