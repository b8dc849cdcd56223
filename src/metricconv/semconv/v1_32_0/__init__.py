# Code generated by metricconv from semantic convention definitions. DO NOT EDIT.
"""Semantic convention instruments generated from convention version v1.32.0.

Modules: cpuconv, dbconv, genaiconv, httpconv.
"""

VERSION = "v1.32.0"
SCHEMA_URL = "https://opentelemetry.io/schemas/1.32.0"

MODULES = (
    "cpuconv",
    "dbconv",
    "genaiconv",
    "httpconv",
)

__all__ = ["MODULES", "SCHEMA_URL", "VERSION"]
