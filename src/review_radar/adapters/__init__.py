"""Adapters for acquisition, progress reporting and reports."""
