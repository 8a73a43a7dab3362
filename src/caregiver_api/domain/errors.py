"""Domain error types."""


class InvalidRequestError(ValueError):
    """Raised when caller input cannot be accepted."""


class ParameterValidationError(InvalidRequestError):
    """Raised when a path or query parameter is missing or malformed."""


class RequestBodyError(InvalidRequestError):
    """Raised when a request body fails strict decoding."""


class UnsupportedEventKindError(InvalidRequestError):
    """Raised for an event type outside the catalog."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"unsupported event type: {kind}")
        self.kind = kind


class InvalidEventDataError(InvalidRequestError):
    """Raised when an event payload does not match its kind's schema."""


class ItemNotFoundError(LookupError):
    """Raised by repositories when a single-item lookup misses."""

    def __init__(self, table: str, key: dict[str, str]) -> None:
        super().__init__(f"no item in {table} for {key}")
        self.table = table
        self.key = key
