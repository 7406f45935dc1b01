from __future__ import annotations

import hashlib
import hmac
import os
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from clinicsys.app.bootstrap_logging import get_logger, set_user_context
from clinicsys.app.domain.exceptions import BusinessRuleError, ValidationError
from clinicsys.app.domain.value_objects import _require_non_empty, _validate_email_basic

LOGGER = get_logger(__name__)

_PBKDF2_ITERACIONES = 310_000


@dataclass(slots=True)
class Usuario:
    id: str
    nombre_completo: str
    email: str
    password_hash: bytes = field(repr=False, default=b"")
    password_salt: bytes = field(repr=False, default=b"")


@dataclass(frozen=True, slots=True)
class UsuarioSesion:
    """Vista pública del usuario activo (sin credenciales)."""

    id: str
    nombre_completo: str
    email: str


def validar_confirmacion_password(password: str, confirmacion: str) -> None:
    if password != confirmacion:
        raise ValidationError("Las contraseñas no coinciden.")


class ServicioAutenticacion:
    """
    Autenticación contra una lista de usuarios en memoria.

    La lista empieza vacía: el primer acceso pasa por registrar().
    Los suscriptores se enteran de login, logout y cambios de perfil.
    """

    def __init__(self) -> None:
        self._usuarios: list[Usuario] = []
        self._actual_id: Optional[str] = None
        self._listeners: list[Callable[[], None]] = []

    @property
    def autenticado(self) -> bool:
        return self._actual_id is not None

    @property
    def usuario_actual(self) -> Optional[UsuarioSesion]:
        usuario = self._usuario_activo()
        if usuario is None:
            return None
        return UsuarioSesion(usuario.id, usuario.nombre_completo, usuario.email)

    def nombre_visible(self) -> str:
        usuario = self._usuario_activo()
        return usuario.nombre_completo if usuario else ""

    def hay_usuarios(self) -> bool:
        return bool(self._usuarios)

    def login(self, email: str, password: str) -> bool:
        usuario = self._por_email((email or "").strip())
        if usuario is None or not _verificar(password or "", usuario):
            LOGGER.warning("auth_login_failed", extra={"email": email})
            return False
        self._activar(usuario)
        LOGGER.info("auth_login_success", extra={"usuario_id": usuario.id})
        return True

    def registrar(self, nombre_completo: str, email: str, password: str) -> UsuarioSesion:
        nombre = _require_non_empty(nombre_completo, "nombre_completo")
        email_norm = _require_non_empty(email, "email")
        _validate_email_basic(email_norm)
        if not password:
            raise ValidationError("Campo obligatorio: password.")
        if self._por_email(email_norm) is not None:
            raise ValidationError("Ya existe un usuario con este email.")

        digest, salt = _hash_password(password)
        usuario = Usuario(f"u{time.time_ns()}", nombre, email_norm, digest, salt)
        self._usuarios.append(usuario)
        self._activar(usuario)
        LOGGER.info("auth_signup_success", extra={"usuario_id": usuario.id})
        return UsuarioSesion(usuario.id, usuario.nombre_completo, usuario.email)

    def logout(self) -> None:
        if self._actual_id is not None:
            LOGGER.info("session_logout", extra={"usuario_id": self._actual_id})
        self._actual_id = None
        set_user_context(None)
        self._notificar()

    def actualizar_perfil(self, nombre_completo: str, email: str) -> UsuarioSesion:
        usuario = self._exigir_sesion()
        nombre = _require_non_empty(nombre_completo, "nombre_completo")
        email_norm = _require_non_empty(email, "email")
        _validate_email_basic(email_norm)
        otro = self._por_email(email_norm)
        if otro is not None and otro.id != usuario.id:
            raise ValidationError("Ya existe un usuario con este email.")
        usuario.nombre_completo = nombre
        usuario.email = email_norm
        LOGGER.info("auth_profile_updated", extra={"usuario_id": usuario.id})
        self._notificar()
        return UsuarioSesion(usuario.id, usuario.nombre_completo, usuario.email)

    def cambiar_password(self, actual: str, nueva: str) -> bool:
        usuario = self._usuario_activo()
        if usuario is None or not _verificar(actual or "", usuario):
            LOGGER.warning("auth_password_change_rejected")
            return False
        if not nueva:
            raise ValidationError("Campo obligatorio: nueva contraseña.")
        usuario.password_hash, usuario.password_salt = _hash_password(nueva)
        LOGGER.info("auth_password_changed", extra={"usuario_id": usuario.id})
        return True

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notificar(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _activar(self, usuario: Usuario) -> None:
        self._actual_id = usuario.id
        set_user_context(usuario.id)
        self._notificar()

    def _usuario_activo(self) -> Optional[Usuario]:
        if self._actual_id is None:
            return None
        return next((u for u in self._usuarios if u.id == self._actual_id), None)

    def _exigir_sesion(self) -> Usuario:
        usuario = self._usuario_activo()
        if usuario is None:
            raise BusinessRuleError("No hay sesión activa.")
        return usuario

    def _por_email(self, email: str) -> Optional[Usuario]:
        return next((u for u in self._usuarios if u.email == email), None)


def _verificar(password: str, usuario: Usuario) -> bool:
    return hmac.compare_digest(usuario.password_hash, _derive_hash(password, usuario.password_salt))


def _hash_password(password: str) -> tuple[bytes, bytes]:
    salt = os.urandom(16)
    return _derive_hash(password, salt), salt


def _derive_hash(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERACIONES)
