"""HTTP client for seeding a running API with articles, comments and follows."""

from __future__ import annotations

from typing import Any, Iterable

import requests

from goduit.generate import unique_title

DEFAULT_TAGS: tuple[str, ...] = ("categories", "housing", "technology")
DEFAULT_ARTICLE_BODY = "Article Body"
DEFAULT_ARTICLE_DESCRIPTION = "Article Description"


class ApiRequestError(Exception):
    """Raised when the API answers with an unexpected status or an unusable body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConduitClient:
    """A thin client over the articles, comments and followers endpoints."""

    def __init__(self, server_url: str, session: requests.Session | None = None) -> None:
        self.server_url = server_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

    def _post(
        self,
        path: str,
        token: str,
        expected_status: int,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.server_url}{path}"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }
        if payload is None:
            response = self.session.post(url, headers=headers)
        else:
            response = self.session.post(url, json=payload, headers=headers)
        if response.status_code != expected_status:
            raise ApiRequestError(
                f"POST {url}: expected HTTP {expected_status}, got {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ApiRequestError(
                f"POST {url}: response body is not valid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def write_article(
        self,
        token: str,
        *,
        title: str = "",
        description: str = "",
        body: str = "",
        tag_list: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """Publish an article, filling in defaults for empty fields, and return the response."""
        tags = list(tag_list or ())
        tags.extend(DEFAULT_TAGS)
        payload = {
            "article": {
                "title": title or unique_title(),
                "description": description or DEFAULT_ARTICLE_DESCRIPTION,
                "body": body or DEFAULT_ARTICLE_BODY,
                "tagList": tags,
            }
        }
        return self._post("/api/articles", token, 201, payload)

    def write_articles(
        self,
        amount: int,
        author_token: str,
        author_username: str,
        author_id: str,
    ) -> tuple[list[dict[str, Any]], list[str]]:
        """Publish ``amount`` articles tagged with the author's id.

        Returns the article responses and the collected tag list, which stays empty.
        """
        articles = [
            self.write_article(author_token, tag_list=[author_id]) for _ in range(amount)
        ]
        tags: list[str] = []
        return articles, tags

    def write_comment(self, article_slug: str, token: str, body: str = "") -> dict[str, Any]:
        """Post a comment on an article and return the response."""
        payload = {"comment": {"body": body or unique_title()}}
        return self._post(f"/api/articles/{article_slug}/comments", token, 201, payload)

    def follow_user(self, followed_username: str, follower_token: str) -> dict[str, Any]:
        """Follow a user and return the profile response, which must report following."""
        result = self._post(f"/api/profiles/{followed_username}/followers", follower_token, 200)
        profile = result.get("profile") if isinstance(result, dict) else None
        if not isinstance(profile, dict) or profile.get("following") is not True:
            raise ApiRequestError(
                f"following {followed_username!r} was not confirmed by the server",
                status_code=200,
            )
        return result