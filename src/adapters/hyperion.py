"""Cliente del endpoint `launch_experiment/basic_test`.

Implementación:
- Un único POST síncrono con basic auth y cuerpo `{"params": {...}}`.
- Traduce errores de httpx a `core.errors` (timeout, red, URL inválida, HTTP no 2xx).

Notas:
- Sin reintentos ni backoff: cada invocación hace exactamente una petición.
- `http_timeout_seconds` es un deadline total: el timeout de httpx es por fase
  (connect/read/write), así que la respuesta se lee en streaming comprobando
  el tiempo transcurrido.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Callable

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import Credentials, ExperimentParams, LaunchResult
from core.errors import (
    LaunchConnectionError,
    LaunchHTTPError,
    LaunchTimeoutError,
    PayloadError,
)
from core.interfaces.launcher import ExperimentLauncher

logger = logging.getLogger("antithesis_launch.hyperion")

_MAX_DETAIL_CHARS = 500


def _truncate(text: str, max_chars: int = _MAX_DETAIL_CHARS) -> str:
    text = (text or "").strip()
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1].rstrip() + "…"


class HyperionLauncher(ExperimentLauncher):
    """Lanza experimentos contra la API de Hyperion."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._clock = clock

    @property
    def endpoint_url(self) -> str:
        return self._settings.endpoint_url

    def launch(self, params: ExperimentParams, credentials: Credentials) -> LaunchResult:
        payload = params.to_payload(self._settings.recipients_key)
        try:
            # Serializa antes de abrir la conexión: un fallo aquí no toca la red.
            body = json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise PayloadError(f"could not serialize parameters: {exc}") from exc

        timeout = self._settings.http_timeout_seconds
        deadline = self._clock() + timeout

        logger.debug("POST %s as %s", self.endpoint_url, credentials.username)
        try:
            with build_client(
                self._settings,
                credentials=credentials,
                transport=self._transport,
                extra_headers={"Content-Type": "application/json"},
            ) as client:
                with client.stream("POST", self.endpoint_url, content=body) as response:
                    self._check_deadline(deadline, timeout)
                    chunks: list[bytes] = []
                    for chunk in response.iter_bytes():
                        self._check_deadline(deadline, timeout)
                        chunks.append(chunk)
        except httpx.TimeoutException as exc:
            raise LaunchTimeoutError(f"request timed out after {timeout:g}s: {exc}") from exc
        except httpx.RequestError as exc:
            raise LaunchConnectionError(f"request to {self.endpoint_url} failed: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise LaunchConnectionError(f"invalid endpoint URL {self.endpoint_url!r}: {exc}") from exc

        text = b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
        logger.debug("response HTTP %s", response.status_code)
        if not response.is_success:
            raise LaunchHTTPError(response.status_code, _truncate(text))
        return LaunchResult(status_code=response.status_code, body=text)

    def _check_deadline(self, deadline: float, timeout: float) -> None:
        if self._clock() > deadline:
            raise LaunchTimeoutError(f"request exceeded the {timeout:g}s deadline")
