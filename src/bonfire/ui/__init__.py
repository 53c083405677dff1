"""PyQt6 views over the shared event store."""
