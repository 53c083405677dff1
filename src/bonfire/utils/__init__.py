"""Qt helpers."""
