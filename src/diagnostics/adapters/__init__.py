"""Adapters – integrations with third-party frameworks.

Each adapter lives in its own subpackage and needs its optional extra::

    pip install "dusted-diagnostics[fastapi]"
    pip install "dusted-diagnostics[otel]"
"""
