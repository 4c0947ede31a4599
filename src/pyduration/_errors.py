"""Exception hierarchy for duration parsing and coercion."""


class DurationError(Exception):
    """Base exception for duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
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


class DurationParseError(DurationError, ValueError):
    """Raised when a string is not a valid ISO-8601 duration."""


class InvalidDurationTypeError(DurationError, TypeError):
    """Raised when a value cannot be coerced to a duration."""


class NonFiniteDurationError(DurationError, ValueError):
    """Raised when a NaN or infinite duration has no string form."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_ISO_DURATION = "invalid ISO-8601 duration"
ERR_MSG_EMPTY_DURATION = "duration has no designators"
ERR_MSG_EMPTY_TIME_SECTION = "time section has no designators"
ERR_MSG_MISPLACED_FRACTION = "only the last designator may have a fraction"
ERR_MSG_UNSUPPORTED_INPUT = "unsupported duration input"
ERR_MSG_UNKNOWN_UNIT = "unknown duration unit"
ERR_MSG_INVALID_FIELD_VALUE = "duration field must be a number"
ERR_MSG_NON_FINITE = "cannot format a non-finite duration"
