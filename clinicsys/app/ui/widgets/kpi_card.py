from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout

_ACCENT_COLORS = {"blue": "#2563eb", "green": "#16a34a", "amber": "#d97706", "neutral": "#8892a0"}


class KpiCard(QFrame):
    """Tarjeta de contador del panel: título arriba, valor grande debajo."""

    def __init__(self, title: str, accent: str = "neutral", parent=None) -> None:
        super().__init__(parent)
        self._title = QLabel(title)
        self._value = QLabel("-")
        self._title.setObjectName("kpiTitle")
        self._value.setObjectName("kpiValue")
        layout = QVBoxLayout(self)
        layout.addWidget(self._title)
        layout.addWidget(self._value)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._apply_style(accent)

    def set_title(self, title: str) -> None:
        self._title.setText(title)

    def set_value(self, value: int | str) -> None:
        self._value.setText(str(value))

    def value_text(self) -> str:
        return self._value.text()

    def _apply_style(self, accent: str) -> None:
        color = _ACCENT_COLORS.get(accent, _ACCENT_COLORS["neutral"])
        self.setStyleSheet(
            "QFrame {border-left: 4px solid "
            f"{color}; border-radius: 8px; padding: 8px;}}"
            "QLabel#kpiTitle {font-size: 12px; border: none;}"
            f"QLabel#kpiValue {{font-size: 24px; font-weight: 700; border: none; color: {color};}}"
        )
