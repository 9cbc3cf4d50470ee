"""Errores del lanzamiento.

Los adaptadores traducen excepciones de httpx a esta jerarquía; solo la CLI
las convierte en mensajes y códigos de salida.
"""

from __future__ import annotations


class LaunchError(RuntimeError):
    """El experimento no se pudo lanzar."""


class PayloadError(LaunchError):
    """El cuerpo de la petición no se pudo serializar."""


class LaunchTimeoutError(LaunchError):
    """El endpoint no respondió dentro del deadline configurado."""


class LaunchConnectionError(LaunchError):
    """Fallo de red (DNS, TLS, conexión rechazada, URL inválida...)."""


class LaunchHTTPError(LaunchError):
    """El endpoint respondió con un estado no 2xx."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        message = f"HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
