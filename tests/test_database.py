import pytest

from goduit.database import DatabaseClearError, clear_database


class FakeCollection:
    def __init__(self, documents, fail=False):
        self.documents = list(documents)
        self.fail = fail
        self.filters = []

    def delete_many(self, query):
        if self.fail:
            raise OSError("write refused")
        self.filters.append(query)
        self.documents.clear()


class FakeDatabase:
    def __init__(self, collections, fail_listing=False):
        self.collections = collections
        self.fail_listing = fail_listing

    def list_collection_names(self):
        if self.fail_listing:
            raise ConnectionError("server unreachable")
        return list(self.collections)

    def __getitem__(self, name):
        return self.collections[name]


class FakeClient:
    def __init__(self, databases):
        self.databases = databases

    def __getitem__(self, name):
        return self.databases[name]


def test_clear_database_empties_every_collection():
    users = FakeCollection([{"username": "a"}, {"username": "b"}])
    articles = FakeCollection([{"slug": "x"}])
    client = FakeClient({"conduit": FakeDatabase({"users": users, "articles": articles})})
    cleared = clear_database(client)
    assert sorted(cleared) == ["articles", "users"]
    assert users.documents == []
    assert articles.documents == []
    assert users.filters == [{}]
    assert articles.filters == [{}]


def test_clear_database_leaves_other_databases_alone():
    kept = FakeCollection([{"keep": True}])
    wiped = FakeCollection([{"drop": True}])
    client = FakeClient(
        {
            "conduit": FakeDatabase({"users": wiped}),
            "other": FakeDatabase({"users": kept}),
        }
    )
    assert clear_database(client) == ["users"]
    assert wiped.documents == []
    assert kept.documents == [{"keep": True}]


def test_clear_database_uses_given_name():
    target = FakeCollection([{"n": 1}])
    client = FakeClient({"scratch": FakeDatabase({"things": target})})
    assert clear_database(client, "scratch") == ["things"]
    assert target.documents == []


def test_clear_empty_database_returns_no_names():
    client = FakeClient({"conduit": FakeDatabase({})})
    assert clear_database(client) == []


def test_listing_failure_raises():
    client = FakeClient({"conduit": FakeDatabase({}, fail_listing=True)})
    with pytest.raises(DatabaseClearError, match="Could not list collections") as excinfo:
        clear_database(client)
    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_delete_failure_raises():
    broken = FakeCollection([{"n": 1}], fail=True)
    client = FakeClient({"conduit": FakeDatabase({"broken": broken})})
    with pytest.raises(DatabaseClearError, match="Could not clear database") as excinfo:
        clear_database(client)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert broken.documents == [{"n": 1}]