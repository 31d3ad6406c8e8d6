"""Decode webhook delivery bodies into typed event variants.

GitHub does not name the event inside the delivery body; real deliveries name
it in the ``X-GitHub-Event`` header. The decoder therefore offers two paths:

* :meth:`EventDecoder.decode_with_hint` decodes directly against the variant
  named by that header. This is the authoritative path.
* :meth:`EventDecoder.decode` infers the variant from the document's
  top-level keys (see :func:`select_shape`) and refuses to guess when the
  best match is not unique.

Both parse the body once generically, then decode it into the chosen struct.
Fields the variant does not declare are ignored; missing or mistyped required
fields raise :class:`~ghwebhooks.errors.EventDecodeError` subclasses naming
the offending path.

Example:
>>> from ghwebhooks import decode_with_hint
>>> event = decode_with_hint(b'{"action": "revoked"}', "github_app_authorization")
>>> event.action.render()
'revoked'

"""

from __future__ import annotations

import functools
import typing as typ

import msgspec

from .config import DecoderConfig
from .errors import (
    AmbiguousShapeError,
    EventDecodeError,
    MalformedDocumentError,
    json_kind,
)
from .events import event_type_for, shape_of, shapes
from .observability import DecodeEventLogger, MatchMode

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .events import Event, EventShape, WebhookEvent

RawDocument: typ.TypeAlias = str | bytes | bytearray | memoryview


class EventDecoder:
    """Stateless decoder turning delivery bodies into event variants.

    Instances hold only configuration and may be shared across threads.
    """

    def __init__(
        self,
        config: DecoderConfig | None = None,
        *,
        event_logger: DecodeEventLogger | None = None,
    ) -> None:
        """Store configuration and the structured event logger."""
        self._config = config or DecoderConfig()
        self._event_logger = event_logger or DecodeEventLogger()

    @property
    def config(self) -> DecoderConfig:
        """Return the active configuration."""
        return self._config

    def decode(self, raw: RawDocument) -> Event:
        """Decode a delivery body, inferring the event variant from its shape.

        Raises
        ------
        MalformedDocumentError
            If the body is not a JSON object.
        AmbiguousShapeError
            If no variant, or more than one, best matches the top-level keys.
        MissingRequiredFieldError, TypeMismatchError, InvalidActionValueError
            If the document does not fit the selected variant.

        """
        return self._decode(raw, None)

    def decode_with_hint(self, raw: RawDocument, event_name: str) -> Event:
        """Decode a delivery body as the variant named by ``event_name``.

        ``event_name`` is the ``X-GitHub-Event`` header value; surrounding
        whitespace and letter case are ignored.

        Raises
        ------
        UnknownEventNameError
            If ``event_name`` does not name a registered variant.
        EventDecodeError
            For malformed or non-conforming documents, as for :meth:`decode`.

        """
        return self._decode(raw, event_name)

    def encode(self, event: WebhookEvent) -> bytes:
        """Encode an event back to JSON."""
        return msgspec.json.encode(event)

    def _decode(self, raw: RawDocument, hint: str | None) -> Event:
        mode = MatchMode.STRUCTURAL if hint is None else MatchMode.HINTED
        event_name = hint
        try:
            shape = (
                None if hint is None else shape_of(event_type_for(_normalise(hint)))
            )
            buffer = _as_buffer(raw)
            size = _size_of(buffer)
            limit = self._config.max_document_bytes
            if limit is not None and size > limit:
                raise MalformedDocumentError.too_large(size, limit)
            document = _parse_document(buffer)
            if shape is None:
                shape = select_shape(document)
            event_name = shape.event_name
            event = _decode_as(buffer, document, shape.event_type)
        except EventDecodeError as exc:
            self._event_logger.log_failed(exc, mode, event_name)
            raise

        if self._config.report_unknown_keys and (
            unknown := shape.undeclared(document.keys())
        ):
            self._event_logger.log_schema_drift(shape.event_name, unknown)
        self._event_logger.log_succeeded(shape.event_name, mode, size)
        return typ.cast("Event", event)


def select_shape(document: cabc.Mapping[str, object]) -> EventShape:
    """Pick the single event variant that best fits a document's top-level keys.

    A variant is a candidate when the document holds all of its required keys.
    When the document carries a string ``action``, only candidates whose action
    enumeration accepts it are kept. Variants without an action enumeration
    never accept one. If no candidate accepts the value, all candidates are
    ranked, so decoding reports the invalid action against the best fit. The
    closest superset match then wins: the variant leaving the fewest document
    keys undeclared, then the one requiring the most keys.

    Raises
    ------
    AmbiguousShapeError
        If nothing matches, or several variants tie for the best match.

    """
    keys = frozenset(document)
    candidates = [shape for shape in shapes() if shape.matches(keys)]
    if not candidates:
        raise AmbiguousShapeError.no_match(keys)

    action = document.get("action")
    if isinstance(action, str):
        candidates = [
            shape for shape in candidates if shape.accepts_action(action)
        ] or candidates

    def _rank(shape: EventShape) -> tuple[int, int]:
        return (len(shape.undeclared(keys)), -len(shape.required))

    best = min(_rank(shape) for shape in candidates)
    tied = [shape for shape in candidates if _rank(shape) == best]
    if len(tied) > 1:
        raise AmbiguousShapeError.tied(shape.event_name for shape in tied)
    return tied[0]


def _normalise(event_name: str) -> str:
    return event_name.strip().lower()


def _as_buffer(raw: object) -> bytes | bytearray | memoryview:
    if isinstance(raw, str):
        return raw.encode("utf-8")
    if isinstance(raw, bytes | bytearray | memoryview):
        return raw
    raise MalformedDocumentError.unsupported_input(type(raw).__name__)


def _size_of(buffer: bytes | bytearray | memoryview) -> int:
    return buffer.nbytes if isinstance(buffer, memoryview) else len(buffer)


def _parse_document(buffer: bytes | bytearray | memoryview) -> dict[str, object]:
    """Parse the body generically and require a JSON object at the root."""
    try:
        document = msgspec.json.decode(buffer)
    except msgspec.DecodeError as exc:
        raise MalformedDocumentError.invalid_json(str(exc)) from exc
    if not isinstance(document, dict):
        raise MalformedDocumentError.not_an_object(json_kind(document))
    return document


def _decode_as(
    buffer: bytes | bytearray | memoryview,
    document: dict[str, object],
    event_type: type[WebhookEvent],
) -> WebhookEvent:
    """Decode the body into ``event_type``, translating validation failures."""
    try:
        return msgspec.json.decode(buffer, type=event_type)
    except msgspec.ValidationError as exc:
        raise EventDecodeError.from_validation_error(exc, document) from exc


@functools.cache
def default_decoder() -> EventDecoder:
    """Return the shared decoder configured from the environment."""
    return EventDecoder(DecoderConfig.from_env())


def decode(raw: RawDocument) -> Event:
    """Decode a delivery body with the default decoder, inferring the variant."""
    return default_decoder().decode(raw)


def decode_with_hint(raw: RawDocument, event_name: str) -> Event:
    """Decode a delivery body with the default decoder as the named variant."""
    return default_decoder().decode_with_hint(raw, event_name)


def encode(event: WebhookEvent) -> bytes:
    """Encode an event back to JSON."""
    return default_decoder().encode(event)


__all__ = [
    "EventDecoder",
    "RawDocument",
    "decode",
    "decode_with_hint",
    "default_decoder",
    "encode",
    "select_shape",
]
