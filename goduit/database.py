"""Helpers for wiping a MongoDB-style database between test runs."""

from __future__ import annotations

from typing import Any

DEFAULT_DATABASE = "conduit"


class DatabaseClearError(RuntimeError):
    """Raised when the database cannot be listed or emptied."""


def clear_database(client: Any, database_name: str = DEFAULT_DATABASE) -> list[str]:
    """Delete every document in every collection of the named database.

    ``client`` is any client indexable by database name whose databases offer
    ``list_collection_names()`` and are indexable by collection name, with
    collections offering ``delete_many(filter)``. Returns the names of the
    collections that were emptied.
    """
    database = client[database_name]
    try:
        names = list(database.list_collection_names())
    except Exception as exc:
        raise DatabaseClearError("Could not list collections") from exc
    for name in names:
        try:
            database[name].delete_many({})
        except Exception as exc:
            raise DatabaseClearError("Could not clear database") from exc
    return names