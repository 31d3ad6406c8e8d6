"""Webhook decoding errors.

Every error raised by the decoder derives from :class:`EventDecodeError` and
carries a machine-readable ``reason`` plus the dotted ``path`` of the field
where the problem was detected (``""`` for the document root). List indices
appear as numeric path segments, for example ``commits.0.author.email``.
"""

from __future__ import annotations

import enum
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    import msgspec

_MISSING_FIELD_RE = re.compile(
    r"^Object missing required field `(?P<field>.+?)`(?: - at `(?P<path>.+)`)?$"
)
_TYPE_MISMATCH_RE = re.compile(
    r"^Expected `(?P<expected>.+?)`, got `(?P<found>.+?)`(?: - at `(?P<path>.+)`)?$"
)
_INVALID_ENUM_RE = re.compile(
    r"^Invalid enum value (?P<value>.+?)(?: - at `(?P<path>.+)`)?$"
)
_PATH_SEGMENT_RE = re.compile(r"\.([^.\[\]]+)|\[(\d+|\.\.\.)\]")


class DecodeErrorReason(enum.StrEnum):
    """Machine-readable reasons for webhook decoding failures."""

    MALFORMED_DOCUMENT = "malformed_document"
    AMBIGUOUS_SHAPE = "ambiguous_shape"
    UNKNOWN_EVENT_NAME = "unknown_event_name"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_ACTION_VALUE = "invalid_action_value"


class EventDecodeError(ValueError):
    """Base class for failures turning a delivery body into an event.

    Attributes
    ----------
    reason
        Machine-readable failure category.
    path
        Dotted path of the offending field, ``""`` for the document root.

    """

    reason: typ.ClassVar[DecodeErrorReason]

    def __init__(self, message: str, *, path: str = "") -> None:
        """Store the field path alongside the message."""
        super().__init__(message)
        self.path = path

    @classmethod
    def from_validation_error(
        cls, exc: msgspec.ValidationError, document: object
    ) -> EventDecodeError:
        """Translate a msgspec validation failure into a typed decode error.

        Parameters
        ----------
        exc
            The validation error raised while decoding into an event struct.
        document
            The generically decoded document, used to report the offending
            value for invalid enumerations and unrecognised failures.

        Returns
        -------
        EventDecodeError
            The most specific error type matching the msgspec message.

        """
        message = str(exc)

        if match := _MISSING_FIELD_RE.match(message):
            parent = dotted_path(match.group("path"))
            field = match.group("field")
            return MissingRequiredFieldError(
                f"{parent}.{field}" if parent else field
            )

        if match := _TYPE_MISMATCH_RE.match(message):
            return TypeMismatchError(
                dotted_path(match.group("path")),
                expected=match.group("expected"),
                found=match.group("found"),
            )

        if match := _INVALID_ENUM_RE.match(message):
            path = dotted_path(match.group("path"))
            value = lookup_path(document, path)
            return InvalidActionValueError(
                path,
                value if isinstance(value, str) else match.group("value"),
            )

        path = _trailing_path(message)
        return TypeMismatchError(
            path,
            expected=message,
            found=json_kind(lookup_path(document, path)),
        )


class MalformedDocumentError(EventDecodeError):
    """Raised when the delivery body is not a usable JSON object."""

    reason = DecodeErrorReason.MALFORMED_DOCUMENT

    @classmethod
    def invalid_json(cls, detail: str) -> MalformedDocumentError:
        """Return an error for bodies that are not valid JSON."""
        return cls(f"webhook body is not valid JSON: {detail}")

    @classmethod
    def not_an_object(cls, found: str) -> MalformedDocumentError:
        """Return an error for JSON documents whose root is not an object."""
        return cls(f"webhook body must be a JSON object, got `{found}`")

    @classmethod
    def too_large(cls, size: int, limit: int) -> MalformedDocumentError:
        """Return an error for bodies over the configured size limit."""
        return cls(f"webhook body is {size} bytes, limit is {limit} bytes")

    @classmethod
    def unsupported_input(cls, found: str) -> MalformedDocumentError:
        """Return an error for inputs that are neither text nor bytes."""
        return cls(f"webhook body must be str or bytes-like, got `{found}`")


class AmbiguousShapeError(EventDecodeError):
    """Raised when structural matching cannot pick a single event variant.

    Attributes
    ----------
    candidates
        Event names tied for the best match; empty when nothing matched.

    """

    reason = DecodeErrorReason.AMBIGUOUS_SHAPE

    def __init__(self, message: str, *, candidates: tuple[str, ...] = ()) -> None:
        """Store the tied candidate names."""
        super().__init__(message)
        self.candidates = candidates

    @classmethod
    def no_match(cls, keys: cabc.Iterable[str]) -> AmbiguousShapeError:
        """Return an error when no event variant fits the top-level keys."""
        listed = ", ".join(sorted(keys)) or "<none>"
        return cls(f"no webhook event shape matches top-level keys: {listed}")

    @classmethod
    def tied(cls, candidates: cabc.Iterable[str]) -> AmbiguousShapeError:
        """Return an error when several variants match equally well."""
        names = tuple(sorted(candidates))
        return cls(
            "webhook body matches several event shapes equally: "
            f"{', '.join(names)}; supply the event name",
            candidates=names,
        )


class UnknownEventNameError(EventDecodeError):
    """Raised when an event-name hint does not name a known event."""

    reason = DecodeErrorReason.UNKNOWN_EVENT_NAME

    def __init__(self, event_name: str) -> None:
        """Record the unrecognised event name."""
        super().__init__(f"unknown webhook event name: {event_name!r}")
        self.event_name = event_name


class MissingRequiredFieldError(EventDecodeError):
    """Raised when a required field is absent from the document."""

    reason = DecodeErrorReason.MISSING_REQUIRED_FIELD

    def __init__(self, path: str) -> None:
        """Record the path of the missing field."""
        super().__init__(f"missing required field `{path}`", path=path)


class TypeMismatchError(EventDecodeError):
    """Raised when a field holds a value of the wrong JSON kind.

    Attributes
    ----------
    expected
        The declared type, in msgspec notation (``int``, ``str | null``).
    found
        The JSON kind actually present (``str``, ``object``, ...).

    """

    reason = DecodeErrorReason.TYPE_MISMATCH

    def __init__(self, path: str, *, expected: str, found: str) -> None:
        """Record the field path and both kinds."""
        location = f"`{path}`" if path else "document root"
        super().__init__(
            f"expected `{expected}`, found `{found}` at {location}", path=path
        )
        self.expected = expected
        self.found = found


class InvalidActionValueError(EventDecodeError):
    """Raised when an action string is outside its documented value set."""

    reason = DecodeErrorReason.INVALID_ACTION_VALUE

    def __init__(
        self,
        path: str,
        value: str,
        *,
        allowed: tuple[str, ...] = (),
    ) -> None:
        """Record the offending value and, when known, the legal values."""
        message = f"invalid action value {value!r} at `{path}`"
        if allowed:
            message = f"{message}; expected one of: {', '.join(allowed)}"
        super().__init__(message, path=path)
        self.value = value
        self.allowed = allowed


def dotted_path(msgspec_path: str | None) -> str:
    """Convert a msgspec location such as ``$.commits[0].id`` to dotted form.

    >>> dotted_path("$.commits[0].id")
    'commits.0.id'
    >>> dotted_path("$")
    ''

    """
    if not msgspec_path:
        return ""
    segments = [
        name or index for name, index in _PATH_SEGMENT_RE.findall(msgspec_path)
    ]
    return ".".join(segments)


def lookup_path(document: object, path: str) -> object:
    """Return the value at a dotted path, or ``None`` if it cannot be reached."""
    current = document
    for segment in path.split(".") if path else ():
        if isinstance(current, dict):
            current = current.get(segment)
        elif isinstance(current, list) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else None
        else:
            return None
    return current


def json_kind(value: object) -> str:
    """Name the JSON kind of a decoded value using msgspec's vocabulary."""
    match value:
        case None:
            return "null"
        case bool():
            return "bool"
        case int():
            return "int"
        case float():
            return "float"
        case str():
            return "str"
        case list():
            return "array"
        case dict():
            return "object"
        case _:
            return type(value).__name__


def _trailing_path(message: str) -> str:
    """Extract the path suffix msgspec appends to most validation messages."""
    _, marker, location = message.rpartition(" - at `")
    if not marker:
        return ""
    return dotted_path(location.rstrip("`"))


__all__ = [
    "AmbiguousShapeError",
    "DecodeErrorReason",
    "EventDecodeError",
    "InvalidActionValueError",
    "MalformedDocumentError",
    "MissingRequiredFieldError",
    "TypeMismatchError",
    "UnknownEventNameError",
    "dotted_path",
    "json_kind",
    "lookup_path",
]
