"""Data access layer."""

from __future__ import annotations

from .backends import JsonFileBackend, KeyValueBackend, MemoryBackend

__all__ = ["JsonFileBackend", "KeyValueBackend", "MemoryBackend"]
