"""
Excepciones del dominio.

Propósito:
- Distinguir errores de reglas de negocio (dominio) de errores técnicos (UI/logging).
- Permitir que la capa de aplicación/UI traduzca errores a mensajes para el usuario.
"""


class DomainError(Exception):
    """Error base del dominio."""


class ValidationError(DomainError):
    """Entidad en estado inválido o violación de invariantes (campo obligatorio, formato)."""


class BusinessRuleError(DomainError):
    """Violación de regla de negocio (p. ej., email ya registrado o sesión inexistente)."""
