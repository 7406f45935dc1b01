from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from clinicsys.app.application.sesion import validar_confirmacion_password
from clinicsys.app.container import AppContainer
from clinicsys.app.domain.exceptions import ValidationError
from clinicsys.app.i18n import I18nManager
from clinicsys.app.ui.error_presenter import present_error


class PagePerfil(QWidget):
    """Datos del usuario activo y cambio de contraseña."""

    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = i18n
        self._build_ui()
        self._i18n.subscribe(self._retranslate)
        self._retranslate()
        self.on_show()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        self.box_detalles = QGroupBox()
        detalles = QFormLayout(self.box_detalles)
        self.txt_nombre = QLineEdit()
        self.txt_email = QLineEdit()
        self.btn_guardar = QPushButton()
        self.btn_guardar.clicked.connect(self._on_guardar_perfil)
        detalles.addRow("", self.txt_nombre)
        detalles.addRow("", self.txt_email)
        detalles.addRow(self.btn_guardar)

        self.box_password = QGroupBox()
        password = QFormLayout(self.box_password)
        self.txt_actual = QLineEdit()
        self.txt_nueva = QLineEdit()
        self.txt_confirmar = QLineEdit()
        for campo in (self.txt_actual, self.txt_nueva, self.txt_confirmar):
            campo.setEchoMode(QLineEdit.Password)
            password.addRow("", campo)
        self.btn_password = QPushButton()
        self.btn_password.clicked.connect(self._on_cambiar_password)
        password.addRow(self.btn_password)

        root.addWidget(self.box_detalles)
        root.addWidget(self.box_password)
        root.addStretch(1)

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.box_detalles.setTitle(t("perfil.detalles"))
        self.btn_guardar.setText(t("perfil.guardar"))
        self.box_password.setTitle(t("perfil.cambiar_password"))
        self.btn_password.setText(t("perfil.cambiar_password"))
        _set_label(self.box_detalles, self.txt_nombre, t("login.nombre"))
        _set_label(self.box_detalles, self.txt_email, t("login.email"))
        _set_label(self.box_password, self.txt_actual, t("perfil.password_actual"))
        _set_label(self.box_password, self.txt_nueva, t("perfil.password_nueva"))
        _set_label(self.box_password, self.txt_confirmar, t("perfil.password_confirmar"))

    def on_show(self) -> None:
        usuario = self._container.auth.usuario_actual
        self.txt_nombre.setText(usuario.nombre_completo if usuario else "")
        self.txt_email.setText(usuario.email if usuario else "")

    def _on_guardar_perfil(self) -> None:
        try:
            self._container.auth.actualizar_perfil(self.txt_nombre.text(), self.txt_email.text())
        except Exception as exc:
            present_error(self, exc, context="perfil.guardar", i18n=self._i18n)
            return
        QMessageBox.information(self, self._i18n.t("perfil.detalles"), self._i18n.t("perfil.ok"))
        self.on_show()

    def _on_cambiar_password(self) -> None:
        titulo = self._i18n.t("perfil.cambiar_password")
        try:
            validar_confirmacion_password(self.txt_nueva.text(), self.txt_confirmar.text())
            cambiada = self._container.auth.cambiar_password(self.txt_actual.text(), self.txt_nueva.text())
        except ValidationError as exc:
            present_error(self, exc, context="perfil.password", i18n=self._i18n)
            return
        if not cambiada:
            QMessageBox.warning(self, titulo, self._i18n.t("perfil.password_incorrecta"))
            return
        for campo in (self.txt_actual, self.txt_nueva, self.txt_confirmar):
            campo.clear()
        QMessageBox.information(self, titulo, self._i18n.t("perfil.password_ok"))

    def dispose(self) -> None:
        self._i18n.unsubscribe(self._retranslate)


def _set_label(box: QGroupBox, campo: QWidget, texto: str) -> None:
    label = box.layout().labelForField(campo)
    if label is not None:
        label.setText(texto)
