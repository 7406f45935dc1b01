from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from clinicsys.app.i18n import I18nManager


def confirm_delete(parent: QWidget, i18n: I18nManager, *, message_key: str) -> bool:
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Warning)
    box.setWindowTitle(i18n.t("comun.confirmar_titulo"))
    box.setText(i18n.t(message_key))
    confirmar = box.addButton(i18n.t("comun.confirmar_boton"), QMessageBox.DestructiveRole)
    cancelar = box.addButton(i18n.t("comun.cancelar"), QMessageBox.RejectRole)
    box.setDefaultButton(cancelar)
    box.exec()
    return box.clickedButton() is confirmar
