"""Generators of unique usernames, e-mails and titles, and slug derivation."""

from __future__ import annotations

import uuid


def unique_username(*args: str) -> str:
    """Return a random UUID string followed by the given suffix parts."""
    return str(uuid.uuid4()) + "".join(args)


def unique_email(*args: str) -> str:
    """Return a unique e-mail address built from a unique username."""
    return unique_username(*args) + "@example.com"


def unique_title(*args: str) -> str:
    """Return a unique title: a unique username with hyphens turned into spaces."""
    return " ".join(unique_username(*args).split("-"))


def make_slug(title: str) -> str:
    """Return the slug an article with ``title`` is published under."""
    return title.lower().replace(" ", "-")