"""Orquestación del lanzamiento de experimentos.

La CLI reúne flags y settings en un `LaunchRequest` más los switches de
variante en `LaunchOptions` y delega en estas funciones. Los efectos
secundarios (impresión, códigos de salida) se quedan en la CLI; la búsqueda
con `git` y la llamada HTTP llegan como colaboradores inyectados.

La clave JSON de los destinatarios no vive aquí: la decide solo el launcher
(`AppSettings.recipients_key`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from core.config import REGISTRY_HOST, REGISTRY_ORG, AppSettings
from core.domain.images import qualify_image
from core.domain.models import Credentials, ExperimentParams, LaunchResult
from core.interfaces.launcher import EmailLookup, ExperimentLauncher

logger = logging.getLogger("antithesis_launch.pipeline")


@dataclass
class LaunchOptions:
    """Switches de variante (antes tres scripts casi idénticos)."""

    default_recipients_from_git: bool = True
    qualify_images: bool = True
    print_params: bool = True
    registry_host: str = REGISTRY_HOST
    registry_org: str = REGISTRY_ORG

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "LaunchOptions":
        return cls(
            default_recipients_from_git=settings.default_recipients_from_git,
            qualify_images=settings.qualify_images,
            print_params=settings.print_params,
            registry_host=settings.registry_host,
            registry_org=settings.registry_org,
        )


@dataclass
class LaunchRequest:
    """Parámetros tal cual llegan de la línea de comandos."""

    credentials: Credentials
    config_image: str
    duration: str = "15"
    description: str = "Basic test run"
    recipients: str | None = None
    images: Sequence[str] = field(default_factory=tuple)
    tenant_name: str | None = None


def resolve_recipients(
    explicit: str | None,
    *,
    lookup: EmailLookup | None,
    enabled: bool = True,
) -> str:
    """Devuelve el string de destinatarios.

    Un valor explícito siempre gana, aunque sea vacío. Si no, se consulta el
    lookup (si está habilitado); un lookup que falla devuelve "" sin error.
    """

    if explicit is not None:
        return explicit
    if not enabled or lookup is None:
        return ""
    try:
        return (lookup() or "").strip()
    except Exception as exc:
        logger.debug("recipients lookup failed: %s", exc)
        return ""


def build_params(
    request: LaunchRequest,
    options: LaunchOptions | None = None,
    email_lookup: EmailLookup | None = None,
) -> ExperimentParams:
    options = options or LaunchOptions()

    recipients = resolve_recipients(
        request.recipients,
        lookup=email_lookup,
        enabled=options.default_recipients_from_git,
    )

    config_image = request.config_image
    images = list(request.images)
    if options.qualify_images:
        config_image = _qualify(config_image, request.tenant_name, options)
        images = [_qualify(image, request.tenant_name, options) for image in images]

    return ExperimentParams(
        duration=request.duration,
        description=request.description,
        config_image=config_image,
        recipients=recipients,
        images=tuple(images),
    )


def _qualify(reference: str, tenant_name: str | None, options: LaunchOptions) -> str:
    qualified = qualify_image(
        reference,
        tenant_name,
        registry_host=options.registry_host,
        registry_org=options.registry_org,
    )
    if qualified != reference:
        logger.debug("qualified image %s -> %s", reference, qualified)
    return qualified


def launch_experiment(
    request: LaunchRequest,
    options: LaunchOptions | None = None,
    *,
    launcher: ExperimentLauncher,
    email_lookup: EmailLookup | None = None,
    on_params: Callable[[ExperimentParams], None] | None = None,
) -> tuple[ExperimentParams, LaunchResult]:
    """Construye los parámetros y los envía una sola vez.

    `on_params` se ejecuta con los parámetros ya montados, antes de enviar.
    Los errores del launcher se propagan sin cambios.
    """

    params = build_params(request, options, email_lookup)

    if on_params is not None:
        on_params(params)

    result = launcher.launch(params, request.credentials)
    logger.info("experiment launched (HTTP %s)", result.status_code)
    return params, result
