"""Reporting module: read-only projections over the document."""
