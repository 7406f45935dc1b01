from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from clinicsys.app.application.dashboard import ResumenDashboard, resumen_dashboard
from clinicsys.app.application.listados import (
    DefinicionListado,
    ListadoProyectado,
    listado_proximas_citas,
    proyectar,
    resolutor_para,
)
from clinicsys.app.container import AppContainer
from clinicsys.app.domain.enums import TipoEntidad
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.shared.selector_columnas_dialog import SelectorColumnasDialog
from clinicsys.app.pages.shared.tabla_listado import TablaListadoWidget
from clinicsys.app.ui.widgets.kpi_card import KpiCard


class PageDashboard(QWidget):
    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = i18n
        self._visibilidad = self._definicion().visibilidad_inicial(i18n.t)
        self.resumen: Optional[ResumenDashboard] = None
        self.listado: Optional[ListadoProyectado] = None

        self._build_ui()
        self._container.almacen.suscribir(self._on_almacen_cambiado)
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        cards = QHBoxLayout()
        self.card_pacientes = KpiCard("", accent="blue")
        self.card_medicos = KpiCard("", accent="green")
        self.card_proximas = KpiCard("", accent="amber")
        for card in (self.card_pacientes, self.card_medicos, self.card_proximas):
            cards.addWidget(card)
        root.addLayout(cards)

        header = QHBoxLayout()
        self.lbl_tabla = QLabel()
        self.lbl_tabla.setObjectName("headerTitle")
        self.btn_columnas = QPushButton()
        self.btn_columnas.clicked.connect(self._on_columnas)
        header.addWidget(self.lbl_tabla, 1)
        header.addWidget(self.btn_columnas)
        root.addLayout(header)

        self.tabla = TablaListadoWidget(self)
        root.addWidget(self.tabla, 1)

    def _definicion(self) -> DefinicionListado:
        almacen = self._container.almacen
        return listado_proximas_citas(resolutor_para(almacen.pacientes, almacen.medicos))

    def _retranslate(self) -> None:
        self.card_pacientes.set_title(self._i18n.t("dashboard.total_pacientes"))
        self.card_medicos.set_title(self._i18n.t("dashboard.total_medicos"))
        self.card_proximas.set_title(self._i18n.t("dashboard.proximas"))
        self.lbl_tabla.setText(self._i18n.t("dashboard.tabla_titulo"))
        self.btn_columnas.setText(self._i18n.t("comun.columnas"))
        etiquetas = self._definicion().visibilidad_inicial(self._i18n.t)
        self._visibilidad = etiquetas.con_visibles(self._visibilidad.visibles())
        self._refresh()

    def on_show(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        self.resumen = resumen_dashboard(self._container.almacen, self._container.ahora())
        self.card_pacientes.set_value(self.resumen.total_pacientes)
        self.card_medicos.set_value(self.resumen.total_medicos)
        self.card_proximas.set_value(self.resumen.total_citas_proximas)
        self.listado = proyectar(self._definicion(), self.resumen.citas_proximas, None, self._visibilidad)
        self.tabla.render(self.listado, self._i18n.t("dashboard.vacio"))

    def _on_almacen_cambiado(self, _tipo: TipoEntidad) -> None:
        self._refresh()

    def _on_columnas(self) -> None:
        dialog = SelectorColumnasDialog(
            self._i18n,
            self._visibilidad,
            self._definicion().visibilidad_inicial(self._i18n.t),
            self,
        )
        if dialog.exec() != QDialog.Accepted:
            return
        self._visibilidad = dialog.visibilidad_seleccionada()
        self._refresh()

    def dispose(self) -> None:
        self._container.almacen.desuscribir(self._on_almacen_cambiado)
        self._i18n.unsubscribe(self._retranslate)
