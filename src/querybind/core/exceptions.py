"""querybind exception hierarchy."""

from __future__ import annotations

BAD_REQUEST = 400


class QueryBindError(Exception):
    """Base exception for all querybind errors."""


class QueryDecodeError(QueryBindError):
    """Input could not be decoded into the target record.

    Always a client fault: ``status_code`` is what an HTTP layer should answer with.
    """

    status_code: int = BAD_REQUEST

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(message)


class UnknownParameterError(QueryDecodeError):
    """Input key not consumed by any record field."""

    def __init__(self, key: str) -> None:
        super().__init__(f"unknown query parameter: {key!r}", key=key)


class MissingValueError(QueryDecodeError):
    """Key expected exactly one value but had none."""

    def __init__(self, key: str) -> None:
        super().__init__(f"value {key!r}: missing value", key=key)


class MultipleValuesError(QueryDecodeError):
    """Key expected exactly one value but had several."""

    def __init__(self, key: str) -> None:
        super().__init__(f"value {key!r}: multiple values", key=key)


class MalformedBooleanError(QueryDecodeError):
    """Boolean flag carried a value."""

    def __init__(self, key: str) -> None:
        super().__init__(f"value {key!r}: boolean must not have value", key=key)


class ConversionError(QueryDecodeError):
    """Leaf string could not be parsed into the field's type."""

    def __init__(self, key: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"value {key!r}: {reason}", key=key)


class UnsupportedTypeError(QueryDecodeError):
    """Declared type has no decoder."""

    def __init__(self, type_name: str, key: str | None = None) -> None:
        self.type_name = type_name
        if key is None:
            message = f"unsupported decode target {type_name!r}"
        else:
            message = f"value {key!r}: unsupported type {type_name!r}"
        super().__init__(message, key=key)


class RequiredFieldsError(UnsupportedTypeError):
    """Record type cannot be allocated because some fields have no default."""

    def __init__(self, type_name: str, fields: list[str], key: str | None = None) -> None:
        self.type_name = type_name
        self.fields = fields
        names = ", ".join(repr(f) for f in fields)
        if key is None:
            message = f"decode target {type_name!r} has required fields {names}"
        else:
            message = f"value {key!r}: record {type_name!r} has required fields {names}"
        QueryDecodeError.__init__(self, message, key=key)
