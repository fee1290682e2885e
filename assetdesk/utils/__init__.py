"""Shared helpers (logging setup, log buffer)."""
