"""Service layer wiring shared by the CLI and the desktop views."""

from __future__ import annotations

from .context import DashboardContext

__all__ = ["DashboardContext"]
