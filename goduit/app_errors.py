"""Domain errors raised by the application services."""

from __future__ import annotations

from enum import IntEnum

from goduit.http_errors import _quote


class ErrorCode(IntEnum):
    USER_NOT_FOUND = 1
    ARTICLE_NOT_FOUND = 2
    COMMENT_NOT_FOUND = 3
    WRONG_PASSWORD = 4
    CONFLICT = 5


class AppError(Exception):
    """An application error with a code, a message and the error that caused it."""

    def __init__(
        self,
        error_code: ErrorCode,
        custom_message: str,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(custom_message)
        self.error_code = error_code
        self.custom_message = custom_message
        self.original_error = original_error

    def __str__(self) -> str:
        original = "%!s(<nil>)" if self.original_error is None else str(self.original_error)
        return (
            f"ErrorCode: {int(self.error_code)}: "
            f"ErrorMessage: {self.custom_message}: {original}"
        )

    def add_context(self, original_error: BaseException | None) -> AppError:
        """Attach the underlying error and return this error."""
        self.original_error = original_error
        return self


def user_not_found_error(identifier: str, original_error: BaseException | None) -> AppError:
    return AppError(
        ErrorCode.USER_NOT_FOUND,
        f"User with identifier {_quote(identifier)} was not found",
        original_error,
    )


def article_not_found_error(identifier: str, original_error: BaseException | None) -> AppError:
    return AppError(
        ErrorCode.ARTICLE_NOT_FOUND,
        f"Article with identifier {_quote(identifier)} was not found",
        original_error,
    )


def comment_not_found_error(identifier: str, original_error: BaseException | None) -> AppError:
    return AppError(
        ErrorCode.COMMENT_NOT_FOUND,
        f"Comment with identifier {_quote(identifier)} was not found",
        original_error,
    )


def conflict_error(resource: str) -> AppError:
    return AppError(ErrorCode.CONFLICT, f"Conflict on resource {resource}")


def wrong_password_error() -> AppError:
    return AppError(
        ErrorCode.WRONG_PASSWORD,
        "Comparison between password and stored password hash failed",
    )