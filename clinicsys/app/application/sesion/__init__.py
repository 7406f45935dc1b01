from clinicsys.app.application.sesion.ajustes import ServicioAjustes
from clinicsys.app.application.sesion.auth import (
    ServicioAutenticacion,
    UsuarioSesion,
    validar_confirmacion_password,
)

__all__ = ["ServicioAjustes", "ServicioAutenticacion", "UsuarioSesion", "validar_confirmacion_password"]
