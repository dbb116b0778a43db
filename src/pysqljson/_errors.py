"""Exception hierarchy for JSON path parsing and SQL rendering."""


class SQLJSONError(Exception):
    """Base exception for JSON path and predicate building errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging (CWE-209 prevention).
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidJSONPathError(SQLJSONError):
    """Raised when a JSON path expression is invalid."""


class UnterminatedQuoteError(InvalidJSONPathError):
    """Raised when a quoted path key never finds its closing quote."""


class UnterminatedIndexError(InvalidJSONPathError):
    """Raised when a ``[`` in a path is never closed with ``]``."""


class InvalidIndexError(InvalidJSONPathError):
    """Raised when an array index contains anything but decimal digits."""


class MaxPathDepthExceededError(InvalidJSONPathError):
    """Raised when a path has more segments than the configured limit."""


class InvalidCastTypeError(SQLJSONError):
    """Raised when a cast target is not a plain SQL type name."""


class InvalidFieldNameError(SQLJSONError):
    """Raised when a column name is invalid or empty."""


class InvalidOperatorError(SQLJSONError):
    """Raised when a comparison operator is not supported."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_PATH = "invalid JSON path"
ERR_MSG_UNTERMINATED_QUOTE = "unterminated quoted key in JSON path"
ERR_MSG_UNTERMINATED_INDEX = "unterminated array index in JSON path"
ERR_MSG_INVALID_INDEX = "array index must be a non-negative integer"
ERR_MSG_PATH_TOO_DEEP = "JSON path has too many segments"
ERR_MSG_INVALID_KEY = "invalid key in JSON path"
ERR_MSG_INVALID_CAST_TYPE = "invalid cast type"
ERR_MSG_INVALID_OPERATOR = "invalid operator"
