from __future__ import annotations

import pytest

from clinicsys.app.application.sesion import ServicioAutenticacion, validar_confirmacion_password
from clinicsys.app.domain.exceptions import BusinessRuleError, ValidationError


@pytest.fixture()
def auth() -> ServicioAutenticacion:
    servicio = ServicioAutenticacion()
    servicio.registrar("Admin Clínica", "admin@clinicsys.com", "secreto")
    servicio.logout()
    return servicio


def test_sin_usuarios_no_se_puede_entrar() -> None:
    servicio = ServicioAutenticacion()

    assert not servicio.hay_usuarios()
    assert servicio.login("admin@clinicsys.com", "secreto") is False
    assert not servicio.autenticado


def test_registrar_activa_la_sesion() -> None:
    servicio = ServicioAutenticacion()

    usuario = servicio.registrar("  Admin Clínica ", "admin@clinicsys.com", "secreto")

    assert servicio.autenticado
    assert usuario.nombre_completo == "Admin Clínica"
    assert servicio.usuario_actual == usuario
    assert servicio.nombre_visible() == "Admin Clínica"


def test_login_correcto_e_incorrecto(auth: ServicioAutenticacion) -> None:
    assert auth.login("admin@clinicsys.com", "otra") is False
    assert not auth.autenticado

    assert auth.login("admin@clinicsys.com", "secreto") is True
    assert auth.usuario_actual.email == "admin@clinicsys.com"


def test_logout_limpia_la_sesion(auth: ServicioAutenticacion) -> None:
    auth.login("admin@clinicsys.com", "secreto")

    auth.logout()

    assert not auth.autenticado
    assert auth.usuario_actual is None
    assert auth.nombre_visible() == ""


def test_registrar_email_duplicado_o_invalido(auth: ServicioAutenticacion) -> None:
    with pytest.raises(ValidationError):
        auth.registrar("Otra", "admin@clinicsys.com", "x")
    with pytest.raises(ValidationError):
        auth.registrar("Otra", "sin-arroba", "x")
    with pytest.raises(ValidationError):
        auth.registrar("", "otra@clinicsys.com", "x")
    with pytest.raises(ValidationError):
        auth.registrar("Otra", "otra@clinicsys.com", "")


def test_actualizar_perfil_requiere_sesion(auth: ServicioAutenticacion) -> None:
    with pytest.raises(BusinessRuleError):
        auth.actualizar_perfil("Nuevo", "nuevo@clinicsys.com")


def test_actualizar_perfil_cambia_el_email_de_acceso(auth: ServicioAutenticacion) -> None:
    auth.login("admin@clinicsys.com", "secreto")

    actualizado = auth.actualizar_perfil("Nuevo Nombre", "nuevo@clinicsys.com")
    auth.logout()

    assert actualizado.nombre_completo == "Nuevo Nombre"
    assert auth.login("admin@clinicsys.com", "secreto") is False
    assert auth.login("nuevo@clinicsys.com", "secreto") is True


def test_actualizar_perfil_rechaza_email_de_otro_usuario(auth: ServicioAutenticacion) -> None:
    auth.registrar("Segundo", "segundo@clinicsys.com", "clave")

    with pytest.raises(ValidationError):
        auth.actualizar_perfil("Segundo", "admin@clinicsys.com")


def test_cambiar_password(auth: ServicioAutenticacion) -> None:
    assert auth.cambiar_password("secreto", "nueva") is False

    auth.login("admin@clinicsys.com", "secreto")
    assert auth.cambiar_password("mal", "nueva") is False
    with pytest.raises(ValidationError):
        auth.cambiar_password("secreto", "")
    assert auth.cambiar_password("secreto", "nueva") is True

    auth.logout()
    assert auth.login("admin@clinicsys.com", "secreto") is False
    assert auth.login("admin@clinicsys.com", "nueva") is True


def test_confirmacion_de_password() -> None:
    validar_confirmacion_password("abc", "abc")
    with pytest.raises(ValidationError):
        validar_confirmacion_password("abc", "abd")


def test_la_sesion_publica_no_expone_credenciales(auth: ServicioAutenticacion) -> None:
    auth.login("admin@clinicsys.com", "secreto")

    assert not hasattr(auth.usuario_actual, "password_hash")


def test_avisa_a_los_suscriptores_de_cambios_de_sesion(auth: ServicioAutenticacion) -> None:
    nombres: list[str] = []
    auth.subscribe(lambda: nombres.append(auth.nombre_visible()))

    auth.login("admin@clinicsys.com", "secreto")
    auth.actualizar_perfil("Admin Renombrado", "admin@clinicsys.com")
    auth.cambiar_password("secreto", "nueva")
    auth.logout()

    assert nombres == ["Admin Clínica", "Admin Renombrado", ""]


def test_login_fallido_no_avisa(auth: ServicioAutenticacion) -> None:
    avisos: list[bool] = []

    def callback() -> None:
        avisos.append(True)

    auth.subscribe(callback)

    assert auth.login("admin@clinicsys.com", "mal") is False
    auth.unsubscribe(callback)
    auth.login("admin@clinicsys.com", "secreto")

    assert avisos == []
