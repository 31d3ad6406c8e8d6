"""Unit tests for decoder observability logging."""

from __future__ import annotations

import logging

import pytest

from ghwebhooks import (
    AmbiguousShapeError,
    DecoderConfig,
    EventDecoder,
    MissingRequiredFieldError,
)
from ghwebhooks.observability import DecodeEventLogger, MatchMode
from tests.helpers.payloads import minimal_payload, to_json

_LOGGER_NAME = "ghwebhooks.observability"


def _messages(caplog: pytest.LogCaptureFixture, level: int) -> list[str]:
    return [
        record.getMessage()
        for record in caplog.records
        if record.name == _LOGGER_NAME and record.levelno == level
    ]


class TestDecodeEventLogger:
    """Tests for DecodeEventLogger message formatting."""

    def test_log_succeeded(self, caplog: pytest.LogCaptureFixture) -> None:
        """Successful decodes log at DEBUG with the match mode and size."""
        with caplog.at_level(logging.DEBUG, logger=_LOGGER_NAME):
            DecodeEventLogger().log_succeeded("push", MatchMode.HINTED, 512)

        assert _messages(caplog, logging.DEBUG) == [
            "[decode.succeeded] event_name=push match_mode=hinted document_bytes=512"
        ]

    def test_log_failed_without_event_or_path(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Missing event names and root paths are rendered as dashes."""
        error = AmbiguousShapeError.no_match(())

        with caplog.at_level(logging.WARNING, logger=_LOGGER_NAME):
            DecodeEventLogger().log_failed(error, MatchMode.STRUCTURAL, None)

        (message,) = _messages(caplog, logging.WARNING)
        assert message.startswith(
            "[decode.failed] event_name=- match_mode=structural "
            "reason=ambiguous_shape path=-"
        )

    def test_log_schema_drift_sorts_keys(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown keys are logged sorted and comma-separated."""
        with caplog.at_level(logging.INFO, logger=_LOGGER_NAME):
            DecodeEventLogger().log_schema_drift("watch", {"zen", "hook_id"})

        assert _messages(caplog, logging.INFO) == [
            "[decode.schema_drift] event_name=watch unknown_keys=hook_id,zen"
        ]


class TestDecoderLogging:
    """Tests for the log lines emitted by EventDecoder."""

    def test_success_is_logged(
        self, decoder: EventDecoder, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A structural decode logs the selected event at DEBUG."""
        body = to_json(minimal_payload("watch"))

        with caplog.at_level(logging.DEBUG, logger=_LOGGER_NAME):
            decoder.decode(body)

        assert _messages(caplog, logging.DEBUG) == [
            "[decode.succeeded] event_name=watch match_mode=structural "
            f"document_bytes={len(body)}"
        ]

    def test_failure_is_logged_with_reason_and_path(
        self, decoder: EventDecoder, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Failures log at WARNING and the error still propagates."""
        payload = minimal_payload("check_run")
        del payload["check_run"]

        with (
            caplog.at_level(logging.WARNING, logger=_LOGGER_NAME),
            pytest.raises(MissingRequiredFieldError),
        ):
            decoder.decode_with_hint(to_json(payload), "check_run")

        (message,) = _messages(caplog, logging.WARNING)
        assert "event_name=check_run" in message
        assert "match_mode=hinted" in message
        assert "reason=missing_required_field" in message
        assert "path=check_run" in message

    def test_schema_drift_is_reported_when_enabled(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Undeclared top-level keys are logged at INFO when configured."""
        decoder = EventDecoder(DecoderConfig(report_unknown_keys=True))
        payload = minimal_payload("watch") | {"zen": "Mind your words."}

        with caplog.at_level(logging.INFO, logger=_LOGGER_NAME):
            decoder.decode_with_hint(to_json(payload), "watch")

        assert _messages(caplog, logging.INFO) == [
            "[decode.schema_drift] event_name=watch unknown_keys=zen"
        ]

    def test_schema_drift_is_silent_by_default(
        self, decoder: EventDecoder, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Drift reporting is off unless enabled in configuration."""
        payload = minimal_payload("watch") | {"zen": "Mind your words."}

        with caplog.at_level(logging.INFO, logger=_LOGGER_NAME):
            decoder.decode_with_hint(to_json(payload), "watch")

        assert _messages(caplog, logging.INFO) == []
