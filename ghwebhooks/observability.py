"""Structured logging for webhook decoding.

Decode outcomes are emitted as ``[event_type] key=value`` log lines suitable
for parsing by log aggregators. Successful decodes log at DEBUG, failures at
WARNING, and undeclared top-level keys (schema drift) at INFO.
"""

from __future__ import annotations

import enum
import logging
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .errors import EventDecodeError

logger = logging.getLogger(__name__)


class DecodeEventType(enum.StrEnum):
    """Structured log event types for decoder observability."""

    SUCCEEDED = "decode.succeeded"
    FAILED = "decode.failed"
    SCHEMA_DRIFT = "decode.schema_drift"


class MatchMode(enum.StrEnum):
    """How the event variant was chosen."""

    HINTED = "hinted"
    STRUCTURAL = "structural"


class DecodeEventLogger:
    """Emit structured decode events via Python logging."""

    def log_succeeded(
        self, event_name: str, mode: MatchMode, document_bytes: int
    ) -> None:
        """Log a successful decode."""
        logger.debug(
            "[%s] event_name=%s match_mode=%s document_bytes=%d",
            DecodeEventType.SUCCEEDED,
            event_name,
            mode,
            document_bytes,
        )

    def log_failed(
        self,
        error: EventDecodeError,
        mode: MatchMode,
        event_name: str | None,
    ) -> None:
        """Log a failed decode with its reason and field path."""
        logger.warning(
            "[%s] event_name=%s match_mode=%s reason=%s path=%s error_message=%s",
            DecodeEventType.FAILED,
            event_name or "-",
            mode,
            error.reason,
            error.path or "-",
            str(error),
        )

    def log_schema_drift(
        self, event_name: str, unknown_keys: cabc.Iterable[str]
    ) -> None:
        """Log top-level keys the decoded variant does not declare."""
        logger.info(
            "[%s] event_name=%s unknown_keys=%s",
            DecodeEventType.SCHEMA_DRIFT,
            event_name,
            ",".join(sorted(unknown_keys)),
        )


__all__ = ["DecodeEventLogger", "DecodeEventType", "MatchMode"]
