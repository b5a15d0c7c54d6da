# goduit

Building blocks for working with a Conduit-style blogging API, which serves articles, comments, profiles and followers.

## Modules

- `goduit.http_errors` holds the API's error responses as `HTTPError` exceptions. Each one has a `code` (the HTTP status), a `message` and an optional `internal` cause. `to_dict()` returns the JSON body, `{"message": ...}`.
  - Ready-made instances: `COULD_NOT_UNMARSHAL_BODY_ERROR`, `FAILED_LOGIN_ATTEMPT`, `FAILED_AUTHENTICATION`, `CONFLICT_ERROR` and `FORBIDDEN`.
  - One factory per case: `unexpected_token_signing_method`, `required_field_error`, `required_one_of_fields`, `invalid_field_error`, `invalid_image_url_error`, `unique_field_error`, `invalid_field_limit`, `user_not_found`, `follower_relationship_not_found`, `article_not_found`, `comment_not_found` and `internal_error`.
- `goduit.app_errors` holds the application-level errors. `AppError` carries an `ErrorCode` (`USER_NOT_FOUND`, `ARTICLE_NOT_FOUND`, `COMMENT_NOT_FOUND`, `WRONG_PASSWORD`, `CONFLICT`), a custom message and the original error. `add_context()` attaches a cause and returns the error itself. The factories are `user_not_found_error`, `article_not_found_error`, `comment_not_found_error`, `conflict_error` and `wrong_password_error`.
- `goduit.validation` handles failed field checks.
  - `FieldError` describes one failed rule: `tag`, `field`, `param` and `value`.
  - `to_http` maps a `FieldError` to the matching `HTTPError`:
    - `required` and `notblank` give a required-field error.
    - `min` and `max` give a limit error.
    - `email` and `http_url|base64` give an invalid-value error.
    - `unique` gives a uniqueness error.
    - Any other tag gives `None`.
  - `not_blank` reports whether a value is not blank. Blank means `None`, a whitespace-only string, an empty sized value or a numeric zero.
- `goduit.generate` builds unique test data and slugs.
  - `unique_username` returns a random UUID followed by any suffix parts.
  - `unique_email` returns the same kind of string at `example.com`.
  - `unique_title` returns a UUID with its hyphens turned into spaces.
  - `make_slug` lowercases a title and replaces spaces with hyphens.
- `goduit.client` provides `ConduitClient`, a small `requests`-based client for seeding a running API. Every call sends a Bearer token, and any unexpected status or a body that is not JSON raises `ApiRequestError`.
  - `write_article` publishes an article. It fills in empty fields: a unique title, `"Article Description"` and `"Article Body"`. It always appends the tags `categories`, `housing` and `technology`.
  - `write_articles` publishes several articles, each tagged with the author's id. It returns the article responses together with a tag list that is always empty.
  - `write_comment` posts a comment. It uses a unique body if none is given.
  - `follow_user` follows a user. It raises if the returned profile does not report `following: true`.
- `goduit.database` provides `clear_database`, which deletes every document in every collection of a MongoDB-like database (`"conduit"` by default) and returns the collection names. If listing or deleting fails it raises `DatabaseClearError`.

## Example

```python
import requests

from goduit.client import ConduitClient
from goduit.generate import make_slug, unique_title
from goduit.http_errors import article_not_found

client = ConduitClient("http://localhost:8080", requests.Session())

title = unique_title()
article = client.write_article("token", title=title, body="Article Body")
assert article["article"]["slug"] == make_slug(title)

comment = client.write_comment(article["article"]["slug"], "token", "Nice read")

error = article_not_found("missing-slug")
print(error.code, error.message)
```

## What this package does not do

The package contains no API server, routing, authentication or storage layer. `ConduitClient` only talks to a server that is already running. `clear_database` only works on a database client that you supply.

## Running the tests

From the project directory:

```
pip install ".[test]"
pytest
```