"""HTTP-level errors returned by the API, with their status codes and messages."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Iterable


def _quote(text: str) -> str:
    """Return ``text`` as a double-quoted literal with special characters escaped."""
    escapes = {
        "\\": "\\\\",
        '"': '\\"',
        "\a": "\\a",
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\v": "\\v",
    }
    parts = []
    for char in text:
        if char in escapes:
            parts.append(escapes[char])
        elif not char.isprintable():
            code = ord(char)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code <= 0xFFFF:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def _format_value(value: Any) -> str:
    """Render an arbitrary value the way it appears in error messages."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class HTTPError(Exception):
    """An error carrying an HTTP status code, a client-facing message and an optional cause."""

    def __init__(self, code: int, message: str, internal: BaseException | None = None) -> None:
        super().__init__(message)
        self.code = int(code)
        self.message = message
        self.internal = internal

    def __str__(self) -> str:
        text = f"code={self.code}, message={self.message}"
        if self.internal is not None:
            text += f", internal={self.internal}"
        return text

    def __repr__(self) -> str:
        return f"HTTPError(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, str]:
        """Return the JSON body sent to the client for this error."""
        return {"message": self.message}


COULD_NOT_UNMARSHAL_BODY_ERROR = HTTPError(HTTPStatus.BAD_REQUEST, "Could Not Unmarshall Body")
FAILED_LOGIN_ATTEMPT = HTTPError(
    HTTPStatus.UNAUTHORIZED, "Failed Login Attempt: Invalid Email or Password."
)
FAILED_AUTHENTICATION = HTTPError(HTTPStatus.UNAUTHORIZED, "Invalid, Empty or Expired Token")
CONFLICT_ERROR = HTTPError(HTTPStatus.CONFLICT, "Content Already Exists")
FORBIDDEN = HTTPError(HTTPStatus.FORBIDDEN, "Forbidden operation")


def unexpected_token_signing_method(alg_name: str) -> HTTPError:
    return HTTPError(HTTPStatus.UNAUTHORIZED, f"Unexpected signing method: {_format_value(alg_name)}")


def required_field_error(field: str) -> HTTPError:
    return HTTPError(HTTPStatus.BAD_REQUEST, f"field '{_format_value(field)}' is required")


def required_one_of_fields(fields: Iterable[str]) -> HTTPError:
    joined = ", ".join(fields)
    return HTTPError(
        HTTPStatus.BAD_REQUEST, f"At least one of {_quote(joined)} must be provided"
    )


def invalid_field_error(field: str, value: Any) -> HTTPError:
    return HTTPError(
        HTTPStatus.BAD_REQUEST, f"'{_format_value(value)}' is not valid for field '{field}'"
    )


def invalid_image_url_error(image_url: str, content_type: str) -> HTTPError:
    return HTTPError(
        HTTPStatus.BAD_REQUEST,
        f"{_quote(image_url)} is not valid as an image URL: URL Content-Type: {content_type}",
    )


def unique_field_error(field: str) -> HTTPError:
    return HTTPError(
        HTTPStatus.BAD_REQUEST, f"field '{_format_value(field)}' must have unique values"
    )


def invalid_field_limit(field: str, validation_name: str, validation_size: str) -> HTTPError:
    return HTTPError(
        HTTPStatus.BAD_REQUEST,
        f"Field '{field}' {validation_name} value/length is {validation_size}",
    )


def user_not_found(identifier: str) -> HTTPError:
    return HTTPError(HTTPStatus.NOT_FOUND, f"User with identifier {_quote(identifier)} not found")


def follower_relationship_not_found(followed: str, follower: str) -> HTTPError:
    return HTTPError(HTTPStatus.NOT_FOUND, f"{_quote(follower)} does not follow {_quote(followed)}")


def article_not_found(identifier: str) -> HTTPError:
    return HTTPError(
        HTTPStatus.NOT_FOUND, f"Article with identifier {_quote(identifier)} not found"
    )


def comment_not_found(identifier: str) -> HTTPError:
    return HTTPError(
        HTTPStatus.NOT_FOUND, f"Comment with identifier {_quote(identifier)} not found"
    )


def internal_error(internal: BaseException | None) -> HTTPError:
    return HTTPError(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error", internal)