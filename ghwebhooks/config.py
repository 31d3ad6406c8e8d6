"""Configuration for the webhook event decoder.

Usage
-----
Create a configuration with defaults:

>>> config = DecoderConfig()
>>> config.max_document_bytes is None
True

Or load from environment variables:

>>> import os
>>> os.environ["GHWEBHOOKS_MAX_DOCUMENT_BYTES"] = "1048576"
>>> DecoderConfig.from_env().max_document_bytes
1048576

"""

from __future__ import annotations

import dataclasses as dc
import os

_MAX_DOCUMENT_BYTES_ENV = "GHWEBHOOKS_MAX_DOCUMENT_BYTES"
_REPORT_UNKNOWN_KEYS_ENV = "GHWEBHOOKS_REPORT_UNKNOWN_KEYS"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class DecoderConfigError(ValueError):
    """Raised when decoder configuration values are invalid."""

    @classmethod
    def not_an_integer(cls, env_var: str, raw: str) -> DecoderConfigError:
        """Return an error for non-integer numeric settings."""
        return cls(f"{env_var} must be an integer, got: {raw!r}")

    @classmethod
    def not_positive(cls, env_var: str, value: int) -> DecoderConfigError:
        """Return an error for zero or negative limits."""
        return cls(f"{env_var} must be positive, got: {value}")

    @classmethod
    def not_a_boolean(cls, env_var: str, raw: str) -> DecoderConfigError:
        """Return an error for unrecognised boolean settings."""
        return cls(f"{env_var} must be a boolean flag such as true, got: {raw!r}")


@dc.dataclass(frozen=True, slots=True)
class DecoderConfig:
    """Settings applied to every decode call.

    Attributes
    ----------
    max_document_bytes
        Reject delivery bodies larger than this many bytes. ``None`` (the
        default) disables the limit.
    report_unknown_keys
        Log top-level keys the selected event variant does not declare. These
        are ignored during decoding either way; reporting them helps spot
        GitHub adding fields to a payload.

    """

    max_document_bytes: int | None = None
    report_unknown_keys: bool = False

    def __post_init__(self) -> None:
        """Validate the size limit."""
        if self.max_document_bytes is not None and self.max_document_bytes < 1:
            raise DecoderConfigError.not_positive(
                "max_document_bytes", self.max_document_bytes
            )

    @staticmethod
    def _parse_optional_positive_int(env_var: str) -> int | None:
        """Read an optional positive integer env var."""
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return None
        try:
            value = int(raw)
        except ValueError as exc:
            raise DecoderConfigError.not_an_integer(env_var, raw) from exc
        if value < 1:
            raise DecoderConfigError.not_positive(env_var, value)
        return value

    @staticmethod
    def _parse_bool(env_var: str, *, default: bool) -> bool:
        """Read a boolean env var, falling back to a default when unset."""
        raw = os.environ.get(env_var, "")
        normalized = raw.strip().lower()
        if not normalized:
            return default
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise DecoderConfigError.not_a_boolean(env_var, raw)

    @classmethod
    def from_env(cls) -> DecoderConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``GHWEBHOOKS_MAX_DOCUMENT_BYTES``: Optional body size limit. Must be
          a positive integer.
        - ``GHWEBHOOKS_REPORT_UNKNOWN_KEYS``: Whether to log undeclared
          top-level keys.

        Returns
        -------
        DecoderConfig
            Configuration instance with values from environment or defaults.

        Raises
        ------
        DecoderConfigError
            If either variable holds an invalid value.

        """
        return cls(
            max_document_bytes=cls._parse_optional_positive_int(
                _MAX_DOCUMENT_BYTES_ENV
            ),
            report_unknown_keys=cls._parse_bool(
                _REPORT_UNKNOWN_KEYS_ENV, default=False
            ),
        )
