"""
Shared fixtures: an in-memory engine with index/alias namespace semantics.
"""

import copy
from unittest.mock import MagicMock

import pytest


class ResourceAlreadyExists(Exception):
    """Raised by the fake engine when a created name is taken"""


class FakeIndices:
    def __init__(self, engine):
        self._engine = engine

    def get_alias(self):
        self._engine.calls.append("get_alias")
        return {
            name: {"aliases": {alias: {} for alias in sorted(entry["aliases"])}}
            for name, entry in self._engine.store.items()
        }

    def create(self, index, body=None):
        self._engine.calls.append("create")
        if index in self._engine.namespace():
            raise ResourceAlreadyExists(index)
        self._engine.store[index] = {"aliases": set(), "body": body, "docs": {}}
        return {"acknowledged": True, "shards_acknowledged": True, "index": index}

    def update_aliases(self, body):
        self._engine.calls.append("update_aliases")
        staged = copy.deepcopy(self._engine.store)
        for action in body["actions"]:
            (kind, target), = action.items()
            entry = staged.get(target["index"])
            if entry is None:
                raise KeyError(target["index"])
            if kind == "add":
                entry["aliases"].add(target["alias"])
            elif kind == "remove":
                if target["alias"] not in entry["aliases"]:
                    raise KeyError(target["alias"])
                entry["aliases"].discard(target["alias"])
        # All actions succeed or none do
        self._engine.store = staged
        return {"acknowledged": True}


class FakeElasticsearch:
    """Just enough of the Elasticsearch client for migrations"""

    def __init__(self):
        self.store = {}
        self.calls = []
        self.indices = FakeIndices(self)

    def namespace(self):
        names = set(self.store)
        for entry in self.store.values():
            names.update(entry["aliases"])
        return names

    def reindex(self, body):
        self.calls.append("reindex")
        source = self.store[body["source"]["index"]]
        dest = self.store[body["dest"]["index"]]
        for doc_id, doc in source["docs"].items():
            dest["docs"][doc_id] = dict(doc)
        count = len(source["docs"])
        return {"total": count, "created": count, "failures": []}

    # Test helpers

    def add_index(self, name, aliases=(), docs=None):
        self.store[name] = {"aliases": set(aliases), "body": {}, "docs": dict(docs or {})}

    def resolve(self, alias):
        return sorted(name for name, entry in self.store.items() if alias in entry["aliases"])

    def mutating_calls(self):
        return [c for c in self.calls if c != "get_alias"]

    def state(self):
        return {
            name: (sorted(entry["aliases"]), copy.deepcopy(entry["docs"]))
            for name, entry in self.store.items()
        }


@pytest.fixture
def engine():
    """In-memory engine"""
    return FakeElasticsearch()


@pytest.fixture
def mock_client():
    """Mock Elasticsearch client with an empty namespace"""
    client = MagicMock()
    client.indices.get_alias.return_value = {}
    return client


@pytest.fixture
def index_body():
    return {
        "mappings": {
            "properties": {
                "name": {"type": "text"}
            }
        }
    }
