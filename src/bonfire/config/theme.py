from __future__ import annotations

from dataclasses import dataclass

from ..domain import EntryKind


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#0b0b0b"
    surface: str = "#161616"
    surface_selected: str = "#2a2a2a"
    surface_today: str = "#1e1e1e"
    text_primary: str = "#ffffff"
    text_muted: str = "#8a8a8a"
    border_subtle: str = "#333333"
    event_color: str = "#3b82f6"
    trip_color: str = "#a855f7"
    todo_color: str = "#22c55e"
    todo_done_color: str = "#14532d"

    def kind_color(self, kind: EntryKind) -> str:
        return {
            EntryKind.EVENT: self.event_color,
            EntryKind.TRIP: self.trip_color,
            EntryKind.TODO: self.todo_color,
        }[kind]

    def as_stylesheet(self) -> str:
        """Global stylesheet for the dashboard window."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QFrame#card {{
            background-color: {self.surface};
            border-radius: 16px;
        }}
        QLabel#sectionTitle {{
            font-size: 16px;
            font-weight: 600;
        }}
        QLabel#muted {{
            color: {self.text_muted};
        }}
        QPushButton {{
            background-color: {self.surface_selected};
            color: {self.text_primary};
            border: none;
            padding: 8px 14px;
            border-radius: 10px;
        }}
        QPushButton#monthChip {{
            background-color: transparent;
            border: 1px solid {self.border_subtle};
            padding: 4px 10px;
        }}
        QPushButton#monthChip:checked {{
            background-color: {self.surface_selected};
        }}
        QLineEdit, QComboBox, QSpinBox {{
            background-color: #111111;
            color: {self.text_primary};
            border: 1px solid {self.border_subtle};
            border-radius: 10px;
            padding: 8px;
        }}
        """
