"""Shared fixtures for unit tests."""

from __future__ import annotations

import typing as typ

import pytest

from ghwebhooks import DecoderConfig, EventDecoder, default_decoder

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_DECODER_ENV_VARS = (
    "GHWEBHOOKS_MAX_DOCUMENT_BYTES",
    "GHWEBHOOKS_REPORT_UNKNOWN_KEYS",
)


@pytest.fixture(autouse=True)
def _isolated_decoder_env(monkeypatch: pytest.MonkeyPatch) -> cabc.Iterator[None]:
    """Clear decoder env vars and the cached default decoder around each test."""
    for name in _DECODER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    default_decoder.cache_clear()
    yield
    default_decoder.cache_clear()


@pytest.fixture
def decoder() -> EventDecoder:
    """Return a decoder with default configuration."""
    return EventDecoder(DecoderConfig())
