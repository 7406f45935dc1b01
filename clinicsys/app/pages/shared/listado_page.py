from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from PySide6.QtWidgets import QDialog, QHBoxLayout, QMessageBox, QPushButton, QVBoxLayout, QWidget

from clinicsys.app.application.crud import ControladorEntidad
from clinicsys.app.application.listados import DefinicionListado, ListadoProyectado, VisibilidadColumnas, proyectar
from clinicsys.app.container import AppContainer
from clinicsys.app.domain.enums import TipoEntidad
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.shared.crud_page_helpers import confirm_delete
from clinicsys.app.pages.shared.filtro_listado import FiltroListadoWidget
from clinicsys.app.pages.shared.selector_columnas_dialog import SelectorColumnasDialog
from clinicsys.app.pages.shared.tabla_listado import TablaListadoWidget
from clinicsys.app.ui.error_presenter import present_error


class PageListadoCrud(QWidget):
    """
    Pantalla de gestión de un tipo de entidad: búsqueda, tabla proyectada,
    selector de columnas y alta/edición/baja vía el controlador.

    Las subclases indican el prefijo i18n, la definición del listado y el
    formulario.
    """

    prefijo_i18n: str = ""
    tipo: TipoEntidad

    def __init__(
        self,
        container: AppContainer,
        i18n: I18nManager,
        controlador: ControladorEntidad,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = i18n
        self._controlador = controlador
        self._visibilidad = self._definicion().visibilidad_inicial(self._i18n.t)
        self._ultimo_listado: Optional[ListadoProyectado] = None

        self._build_ui()
        self._connect_signals()
        self._retranslate()
        self._refresh()

    # --- hooks de subclase -------------------------------------------------

    def _definicion(self) -> DefinicionListado:
        raise NotImplementedError

    def _registros(self) -> Sequence[Any]:
        return self._controlador.listar()

    def _abrir_formulario(self, entidad: Optional[Any]) -> Optional[Any]:
        raise NotImplementedError

    # --- UI ----------------------------------------------------------------

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        top = QHBoxLayout()
        self.filtros = FiltroListadoWidget(self)
        self.btn_nuevo = QPushButton(self)
        top.addWidget(self.filtros, 1)
        top.addWidget(self.btn_nuevo)
        self.tabla = TablaListadoWidget(self)
        root.addLayout(top)
        root.addWidget(self.tabla, 1)

    def _connect_signals(self) -> None:
        self.filtros.filtros_cambiados.connect(self._refresh)
        self.filtros.columnas_solicitadas.connect(self._on_columnas)
        self.btn_nuevo.clicked.connect(self._on_nuevo)
        self.tabla.editar_solicitado.connect(self._on_editar)
        self.tabla.eliminar_solicitado.connect(self._on_eliminar)
        self._container.almacen.suscribir(self._on_almacen_cambiado)
        self._i18n.subscribe(self._retranslate)

    def _retranslate(self) -> None:
        p = self.prefijo_i18n
        self.filtros.set_textos(placeholder=self._i18n.t(f"{p}.buscar"), columnas=self._i18n.t("comun.columnas"))
        self.btn_nuevo.setText(self._i18n.t(f"{p}.nuevo"))
        self.tabla.set_textos_acciones(self._i18n.t("comun.editar"), self._i18n.t("comun.eliminar"))
        etiquetas = self._definicion().visibilidad_inicial(self._i18n.t)
        self._visibilidad = etiquetas.con_visibles(self._visibilidad.visibles())
        self._refresh()

    def on_show(self) -> None:
        self._refresh()

    def visibilidad(self) -> VisibilidadColumnas:
        return self._visibilidad

    def set_visibilidad(self, visibilidad: VisibilidadColumnas) -> None:
        self._visibilidad = visibilidad
        self._refresh()

    def listado_actual(self) -> Optional[ListadoProyectado]:
        return self._ultimo_listado

    def _refresh(self) -> None:
        registros = self._registros()
        listado = proyectar(self._definicion(), registros, self.filtros.texto(), self._visibilidad)
        self._ultimo_listado = listado
        self.tabla.render(listado, self._i18n.t(f"{self.prefijo_i18n}.vacio"))
        self.filtros.set_contador(
            self._i18n.t("comun.contador").format(mostrados=len(listado.filas), totales=len(registros))
        )

    def _on_almacen_cambiado(self, _tipo: TipoEntidad) -> None:
        self._refresh()

    # --- acciones ------------------------------------------------------------

    def _on_columnas(self) -> None:
        dialog = SelectorColumnasDialog(
            self._i18n,
            self._visibilidad,
            self._definicion().visibilidad_inicial(self._i18n.t),
            self,
        )
        if dialog.exec() != QDialog.Accepted:
            return
        self.set_visibilidad(dialog.visibilidad_seleccionada())

    def _on_nuevo(self) -> None:
        entidad = self._abrir_formulario(None)
        if entidad is None:
            return
        self._ejecutar(lambda: self._controlador.agregar(entidad), "agregar")

    def _on_editar(self, entidad_id: str) -> None:
        actual = self._container.almacen.buscar_por_id(self.tipo, entidad_id)
        if actual is None:
            self._avisar_no_encontrado()
            return
        entidad = self._abrir_formulario(actual)
        if entidad is None:
            return
        if self._ejecutar(lambda: self._controlador.actualizar(entidad), "actualizar") is False:
            self._avisar_no_encontrado()

    def _on_eliminar(self, entidad_id: str) -> None:
        if not confirm_delete(self, self._i18n, message_key=f"{self.prefijo_i18n}.confirmar"):
            return
        if self._ejecutar(lambda: self._controlador.eliminar(entidad_id), "eliminar") is False:
            self._avisar_no_encontrado()

    def _ejecutar(self, operacion: Callable[[], Any], nombre: str) -> Any:
        try:
            return operacion()
        except Exception as exc:
            present_error(self, exc, context=f"{self.prefijo_i18n}.{nombre}", i18n=self._i18n)
            return None

    def _avisar_no_encontrado(self) -> None:
        QMessageBox.warning(self, self._i18n.t(f"nav.{self.prefijo_i18n}"), self._i18n.t("comun.no_encontrado"))

    def dispose(self) -> None:
        """Se llama al cerrar la ventana principal: corta las suscripciones."""
        self._container.almacen.desuscribir(self._on_almacen_cambiado)
        self._i18n.unsubscribe(self._retranslate)
