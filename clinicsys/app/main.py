from __future__ import annotations

import sys
import uuid

from PySide6.QtWidgets import QApplication, QDialog

from clinicsys.app.bootstrap import cargar_configuracion, registrar_avisos
from clinicsys.app.bootstrap_logging import configure_logging, get_logger, set_run_context
from clinicsys.app.container import build_container
from clinicsys.app.crash_handler import install_global_exception_hook
from clinicsys.app.i18n import I18nManager
from clinicsys.app.ui.login_dialog import LoginDialog
from clinicsys.app.ui.main_window import MainWindow
from clinicsys.app.ui.theme import load_qss


LOGGER = get_logger(__name__)


def main() -> int:
    config = cargar_configuracion()
    configure_logging("clinicsys-ui", config.log_dir, level=config.log_level, json=config.log_json)
    set_run_context(uuid.uuid4().hex[:8])
    install_global_exception_hook(LOGGER)
    registrar_avisos(config)

    app = QApplication(sys.argv)
    container = build_container(cargar_demo=config.cargar_demo)
    app.setStyleSheet(load_qss(container.ajustes.tema))
    i18n = I18nManager(config.idioma)
    LOGGER.info("app_started", extra={"idioma": i18n.language, "demo": config.cargar_demo})

    current_window: MainWindow | None = None

    def open_authenticated_session() -> bool:
        nonlocal current_window
        login = LoginDialog(container.auth, i18n)
        if login.exec() != QDialog.Accepted:
            return False

        def _logout() -> None:
            if not open_authenticated_session():
                app.quit()

        current_window = MainWindow(container, i18n, on_logout=_logout)
        current_window.show()
        return True

    if not open_authenticated_session():
        return 0

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
