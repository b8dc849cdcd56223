"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_CONVENTIONS_VERSION = "v1.32.0"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class MetricConvConfig:
    """Settings shared by the telemetry helpers and the CLI.

    ``telemetry_disabled`` follows the standard ``OTEL_SDK_DISABLED``
    variable: when set, :func:`metricconv.telemetry.get_meter` hands out
    no-op meters.
    """

    telemetry_disabled: bool = False
    log_level: str = "WARNING"
    conventions_version: str = DEFAULT_CONVENTIONS_VERSION

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MetricConvConfig:
        env = os.environ if environ is None else environ
        level = env.get("METRICCONV_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
        if not isinstance(logging.getLevelName(level), int):
            level = "WARNING"
        return cls(
            telemetry_disabled=env.get("OTEL_SDK_DISABLED", "").strip().lower() in _TRUTHY,
            log_level=level,
            conventions_version=env.get("METRICCONV_CONVENTIONS_VERSION", "").strip() or DEFAULT_CONVENTIONS_VERSION,
        )
