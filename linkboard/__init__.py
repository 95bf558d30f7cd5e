"""Linkboard - per-page link lists kept in sync with a remote store."""

__version__ = "0.1.0"
