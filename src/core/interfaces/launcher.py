"""Contratos del lanzamiento.

Por qué Protocol:
- El endpoint real (httpx) y los dobles de test son intercambiables.
- La búsqueda del email por defecto es inyectable para no invocar `git` en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Credentials, ExperimentParams, LaunchResult


@runtime_checkable
class ExperimentLauncher(Protocol):
    """Contrato mínimo para enviar un experimento.

    Reglas de diseño:
    - `launch` es síncrono: una única petición bloqueante, sin reintentos.
    - Errores de red/HTTP se reportan como `core.errors.LaunchError`.
    """

    def launch(self, params: ExperimentParams, credentials: Credentials) -> LaunchResult:
        """Envía `params` autenticando con `credentials`."""

        ...


class EmailLookup(Protocol):
    """Devuelve el email por defecto de los destinatarios ("" si no hay)."""

    def __call__(self) -> str: ...
