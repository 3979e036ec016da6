"""Shared utilities for envpick (file I/O, paths, text templates)."""
