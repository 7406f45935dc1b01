from __future__ import annotations

from PySide6.QtCore import QTimer, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget


class FiltroListadoWidget(QWidget):
    """Caja de búsqueda con debounce, botón de columnas y contador de resultados."""

    filtros_cambiados = Signal()
    columnas_solicitadas = Signal()

    def __init__(self, parent: QWidget | None = None, *, debounce_ms: int = 250) -> None:
        super().__init__(parent)
        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(debounce_ms)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.txt_busqueda = QLineEdit(self)
        self.txt_busqueda.setClearButtonEnabled(True)
        self.btn_columnas = QPushButton(self)
        self.lbl_contador = QLabel(self)

        layout.addWidget(self.txt_busqueda, 1)
        layout.addWidget(self.btn_columnas)
        layout.addWidget(self.lbl_contador)

        self._debounce.timeout.connect(self.filtros_cambiados.emit)
        self.txt_busqueda.textChanged.connect(self._debounce.start)
        self.btn_columnas.clicked.connect(self.columnas_solicitadas.emit)

    def texto(self) -> str:
        return self.txt_busqueda.text()

    def set_textos(self, *, placeholder: str, columnas: str) -> None:
        self.txt_busqueda.setPlaceholderText(placeholder)
        self.btn_columnas.setText(columnas)

    def set_contador(self, texto: str) -> None:
        self.lbl_contador.setText(texto)
