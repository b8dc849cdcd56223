"""Generated semantic convention instruments, one package per convention version.

Regenerate a version package with::

    metricconv generate src/metricconv/conventions/v1.32.0 --output src/metricconv/semconv/v1_32_0
"""
