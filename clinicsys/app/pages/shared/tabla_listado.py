from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QStackedWidget,
    QTableWidget,
    QTableWidgetItem,
    QWidget,
)

from clinicsys.app.application.listados import ListadoProyectado

COLUMNA_ACCIONES = "acciones"


class TablaListadoWidget(QStackedWidget):
    """
    Pinta un ListadoProyectado. Si no hay filas muestra el mensaje vacío en
    lugar de una tabla sin cuerpo. La columna "acciones" lleva botones
    Editar/Excluir por fila.
    """

    editar_solicitado = Signal(str)
    eliminar_solicitado = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.table = QTableWidget(0, 0, self)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setAlternatingRowColors(True)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)

        self.lbl_vacio = QLabel(self)
        self.lbl_vacio.setObjectName("emptyState")
        self.lbl_vacio.setAlignment(Qt.AlignCenter)

        self.addWidget(self.table)
        self.addWidget(self.lbl_vacio)
        self._textos_acciones = ("Editar", "Excluir")

    def set_textos_acciones(self, editar: str, eliminar: str) -> None:
        self._textos_acciones = (editar, eliminar)

    def esta_vacio(self) -> bool:
        return self.currentWidget() is self.lbl_vacio

    def render(self, listado: ListadoProyectado, mensaje_vacio: Optional[str] = None) -> None:
        claves = listado.claves()
        self.table.clear()
        self.table.setColumnCount(len(claves))
        self.table.setHorizontalHeaderLabels([etiqueta for _, etiqueta in listado.columnas])
        self.table.setRowCount(len(listado.filas))

        for row, fila in enumerate(listado.filas):
            for col, (clave, valor) in enumerate(zip(claves, fila.valores)):
                if clave == COLUMNA_ACCIONES and fila.id:
                    self.table.setCellWidget(row, col, self._botones_fila(fila.id))
                    continue
                item = QTableWidgetItem(valor)
                item.setData(Qt.UserRole, fila.id)
                self.table.setItem(row, col, item)

        self.lbl_vacio.setText(mensaje_vacio or listado.mensaje_vacio)
        self.setCurrentWidget(self.lbl_vacio if listado.vacio else self.table)

    def _botones_fila(self, entidad_id: str) -> QWidget:
        contenedor = QWidget(self.table)
        layout = QHBoxLayout(contenedor)
        layout.setContentsMargins(2, 0, 2, 0)
        btn_editar = QPushButton(self._textos_acciones[0], contenedor)
        btn_eliminar = QPushButton(self._textos_acciones[1], contenedor)
        btn_eliminar.setObjectName("dangerButton")
        btn_editar.clicked.connect(lambda: self.editar_solicitado.emit(entidad_id))
        btn_eliminar.clicked.connect(lambda: self.eliminar_solicitado.emit(entidad_id))
        layout.addWidget(btn_editar)
        layout.addWidget(btn_eliminar)
        return contenedor
