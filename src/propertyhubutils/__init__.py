"""Shared utilities for the PropertyHub backend (structured logging helpers)."""
