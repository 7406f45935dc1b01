from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from clinicsys.app.application.sesion import ServicioAutenticacion
from clinicsys.app.bootstrap import IDIOMAS_SOPORTADOS
from clinicsys.app.domain.exceptions import ValidationError
from clinicsys.app.i18n import I18nManager


class LoginDialog(QDialog):
    """Acceso y alta de usuario en el mismo diálogo; sin usuarios arranca en modo alta."""

    def __init__(self, auth: ServicioAutenticacion, i18n: I18nManager, parent=None) -> None:
        super().__init__(parent)
        self._auth = auth
        self._i18n = i18n
        self.modo_alta = not auth.hay_usuarios()

        self._build_ui()
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        self.setModal(True)
        main_layout = QVBoxLayout(self)

        self.lbl_info = QLabel()
        self.lbl_info.setObjectName("headerTitle")
        main_layout.addWidget(self.lbl_info)

        lang_row = QHBoxLayout()
        self.lang_combo = QComboBox()
        for codigo in IDIOMAS_SOPORTADOS:
            self.lang_combo.addItem("", codigo)
        self.lang_combo.setCurrentIndex(max(self.lang_combo.findData(self._i18n.language), 0))
        self.lang_combo.currentIndexChanged.connect(self._on_language_changed)
        lang_row.addStretch(1)
        lang_row.addWidget(self.lang_combo)
        main_layout.addLayout(lang_row)

        form = QFormLayout()
        self.nombre_input = QLineEdit()
        self.email_input = QLineEdit()
        self.pass_input = QLineEdit()
        self.pass_input.setEchoMode(QLineEdit.Password)
        self.confirm_input = QLineEdit()
        self.confirm_input.setEchoMode(QLineEdit.Password)
        self.lbl_nombre = QLabel()
        self.lbl_email = QLabel()
        self.lbl_password = QLabel()
        self.lbl_confirm = QLabel()
        form.addRow(self.lbl_nombre, self.nombre_input)
        form.addRow(self.lbl_email, self.email_input)
        form.addRow(self.lbl_password, self.pass_input)
        form.addRow(self.lbl_confirm, self.confirm_input)
        main_layout.addLayout(form)

        self.btn_submit = QPushButton()
        self.btn_submit.setDefault(True)
        self.btn_submit.clicked.connect(self._on_submit)
        self.btn_modo = QPushButton()
        self.btn_modo.setFlat(True)
        self.btn_modo.clicked.connect(self._on_toggle_mode)
        main_layout.addWidget(self.btn_submit)
        main_layout.addWidget(self.btn_modo)

        self._refresh_mode()

    def _refresh_mode(self) -> None:
        for widget in (self.lbl_nombre, self.nombre_input, self.lbl_confirm, self.confirm_input):
            widget.setVisible(self.modo_alta)

    def _on_toggle_mode(self) -> None:
        self.modo_alta = not self.modo_alta
        self._refresh_mode()
        self._retranslate()

    def _on_language_changed(self) -> None:
        self._i18n.set_language(self.lang_combo.currentData())

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.setWindowTitle(t("login.title"))
        self.lbl_info.setText(t("login.signup_welcome" if self.modo_alta else "login.welcome"))
        self.lbl_nombre.setText(t("login.nombre"))
        self.lbl_email.setText(t("login.email"))
        self.lbl_password.setText(t("login.password"))
        self.lbl_confirm.setText(t("login.confirm_password"))
        for index in range(self.lang_combo.count()):
            self.lang_combo.setItemText(index, t(f"lang.{self.lang_combo.itemData(index)}"))
        self.btn_submit.setText(t("login.create" if self.modo_alta else "login.submit"))
        self.btn_modo.setText(t("login.go_login" if self.modo_alta else "login.go_signup"))

    def _on_submit(self) -> None:
        if self.modo_alta:
            self._on_create()
        else:
            self._on_login()

    def _on_create(self) -> None:
        nombre = self.nombre_input.text().strip()
        email = self.email_input.text().strip()
        password = self.pass_input.text()
        if not nombre or not email or not password:
            self._warn("login.error.required")
            return
        if password != self.confirm_input.text():
            self._warn("login.error.mismatch")
            return
        try:
            self._auth.registrar(nombre, email, password)
        except ValidationError as exc:
            QMessageBox.warning(self, self.windowTitle(), str(exc))
            return
        self.accept()

    def _on_login(self) -> None:
        email = self.email_input.text().strip()
        password = self.pass_input.text()
        if not email or not password:
            self._warn("login.error.required")
            return
        if not self._auth.login(email, password):
            self._warn("login.error.invalid")
            return
        self.accept()

    def _warn(self, key: str) -> None:
        QMessageBox.warning(self, self.windowTitle(), self._i18n.t(key))

    def done(self, result: int) -> None:
        self._i18n.unsubscribe(self._retranslate)
        super().done(result)
