from __future__ import annotations

from typing import Callable, Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from clinicsys.app.container import AppContainer
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.pages_registry import get_pages
from clinicsys.app.ui.theme import load_qss

PAGINA_INICIAL = "dashboard"


class MainWindow(QMainWindow):
    def __init__(
        self,
        container: AppContainer,
        i18n: I18nManager,
        on_logout: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__()
        self.container = container
        self._i18n = i18n
        self._on_logout = on_logout

        self.resize(1200, 800)

        root = QWidget()
        self.setCentralWidget(root)

        layout = QHBoxLayout(root)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.sidebar = QListWidget()
        self.sidebar.setObjectName("sidebar")
        self.sidebar.setFixedWidth(240)
        self.sidebar.setSelectionMode(QListWidget.SingleSelection)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        header = QHBoxLayout()
        self.lbl_titulo = QLabel()
        self.lbl_titulo.setObjectName("headerTitle")
        self.lbl_saludo = QLabel()
        self.btn_logout = QPushButton()
        self.btn_logout.clicked.connect(self._logout)
        header.addWidget(self.lbl_titulo, 1)
        header.addWidget(self.lbl_saludo)
        header.addWidget(self.btn_logout)
        content_layout.addLayout(header)

        self.stack = QStackedWidget()
        self.stack.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        content_layout.addWidget(self.stack, 1)

        layout.addWidget(self.sidebar)
        layout.addWidget(content, 1)

        self._page_index_by_key: Dict[str, int] = {}
        self._factory_by_key: Dict[str, Callable[[], QWidget]] = {}
        self._title_key_by_key: Dict[str, str] = {}

        # Las páginas se crean al visitarlas por primera vez.
        for p in get_pages(container, i18n):
            self._factory_by_key[p.key] = p.factory
            self._title_key_by_key[p.key] = p.title_key
            item = QListWidgetItem()
            item.setData(Qt.UserRole, p.key)
            self.sidebar.addItem(item)

        self.sidebar.currentRowChanged.connect(self._on_sidebar_changed)
        self.container.ajustes.subscribe(self._apply_theme)
        self.container.auth.subscribe(self._update_saludo)
        self._i18n.subscribe(self._retranslate)

        self._apply_theme()
        self._retranslate()
        self.navigate(PAGINA_INICIAL)

    def current_key(self) -> Optional[str]:
        item = self.sidebar.currentItem()
        return item.data(Qt.UserRole) if item is not None else None

    def _retranslate(self) -> None:
        self.setWindowTitle(self._i18n.t("app.title"))
        for row in range(self.sidebar.count()):
            item = self.sidebar.item(row)
            item.setText(self._i18n.t(self._title_key_by_key[item.data(Qt.UserRole)]))
        self._update_saludo()
        self.btn_logout.setText(self._i18n.t("header.logout"))
        self._update_title()

    def _update_saludo(self) -> None:
        self.lbl_saludo.setText(self._i18n.t("header.saludo").format(nombre=self.container.auth.nombre_visible()))

    def _update_title(self) -> None:
        key = self.current_key()
        self.lbl_titulo.setText(self._i18n.t(self._title_key_by_key[key]) if key else "")

    def _apply_theme(self) -> None:
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(load_qss(self.container.ajustes.tema))

    def _ensure_page_created(self, key: str) -> Optional[int]:
        if key in self._page_index_by_key:
            return self._page_index_by_key[key]

        factory = self._factory_by_key.get(key)
        if factory is None:
            return None

        widget = factory()
        index = self.stack.addWidget(widget)
        self._page_index_by_key[key] = index
        return index

    def _call_on_show_index(self, index: int) -> None:
        w = self.stack.widget(index)
        if w is not None and hasattr(w, "on_show"):
            w.on_show()

    def navigate(self, key: str) -> None:
        self.sidebar.blockSignals(True)
        try:
            index = self._ensure_page_created(key)
            if index is None:
                return

            self.stack.setCurrentIndex(index)
            for row in range(self.sidebar.count()):
                if self.sidebar.item(row).data(Qt.UserRole) == key:
                    self.sidebar.setCurrentRow(row)
                    break
            self._update_title()
            self._call_on_show_index(index)
        finally:
            self.sidebar.blockSignals(False)

    def _on_sidebar_changed(self, row: int) -> None:
        if row < 0:
            return
        self.navigate(self.sidebar.item(row).data(Qt.UserRole))

    def _logout(self) -> None:
        self.container.auth.logout()
        self.hide()
        # close() sobre la última ventana visible termina la app: el login va antes.
        if self._on_logout is not None:
            self._on_logout()
        self.close()

    def _dispose_pages(self) -> None:
        for index in range(self.stack.count()):
            w = self.stack.widget(index)
            if hasattr(w, "dispose"):
                w.dispose()
        self.container.ajustes.unsubscribe(self._apply_theme)
        self.container.auth.unsubscribe(self._update_saludo)
        self._i18n.unsubscribe(self._retranslate)

    def closeEvent(self, event):
        """Evento Qt al cerrar la ventana: las páginas dejan de escuchar almacén e idioma."""
        self._dispose_pages()
        event.accept()
