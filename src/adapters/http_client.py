"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout, headers y autenticación de la petición de lanzamiento.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import Credentials


def build_client(
    settings: AppSettings | None = None,
    *,
    credentials: Credentials | None = None,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    Por qué un builder:
    - Un único sitio para timeout/headers (el POST y el doctor se comportan igual).
    - Sin reintentos: el transport por defecto de httpx no reintenta.
    - Sigue redirecciones; el estado final es el que decide éxito o fallo.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    auth = None
    if credentials is not None:
        auth = httpx.BasicAuth(credentials.username, credentials.password)

    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        auth=auth,
        follow_redirects=True,
        transport=transport,
    )
