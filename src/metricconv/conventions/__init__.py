"""Semantic convention definitions bundled with metricconv, one directory per version."""
