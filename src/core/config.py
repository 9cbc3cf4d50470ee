"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Credenciales, tenant y flags de variante se leen igual desde CLI y doctor.
- Solo flags y variables de entorno: las credenciales nunca se leen ni se
  escriben en disco (no hay `.env`).
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import RecipientsKey

LAUNCH_ENDPOINT_URL = "https://hyperion.antithesis.com/api/v1/launch_experiment/basic_test"
REGISTRY_HOST = "us-central1-docker.pkg.dev"
REGISTRY_ORG = "molten-verve-216720"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Los flags de la CLI sobrescriben estos valores; aquí viven los defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANTITHESIS_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    username: str | None = Field(
        default=None,
        description="Usuario de la API (ANTITHESIS_USERNAME).",
    )
    password: str | None = Field(
        default=None,
        repr=False,
        description="Password de la API (ANTITHESIS_PASSWORD).",
    )
    tenant_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TENANT_NAME", "ANTITHESIS_TENANT_NAME"),
        description="Tenant usado para cualificar nombres de imagen cortos.",
    )

    endpoint_url: str = Field(
        default=LAUNCH_ENDPOINT_URL,
        min_length=8,
        description="Endpoint `launch_experiment/basic_test`.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout del POST (segundos).",
    )
    user_agent: str = Field(
        default="antithesis-launch/0.1",
        min_length=1,
        description="User-Agent de la petición.",
    )

    registry_host: str = Field(default=REGISTRY_HOST, min_length=1)
    registry_org: str = Field(default=REGISTRY_ORG, min_length=1)

    # Flags de variante (antes tres scripts casi idénticos)
    recipients_key: RecipientsKey = Field(
        default=RecipientsKey.RECIPIENTS,
        description="Clave JSON bajo la que se envían los destinatarios.",
    )
    print_params: bool = Field(
        default=True,
        description="Imprimir los parámetros como JSON antes de enviarlos.",
    )
    qualify_images: bool = Field(
        default=True,
        description="Reescribir nombres de imagen cortos con el tenant.",
    )
    default_recipients_from_git: bool = Field(
        default=True,
        description="Usar `git config user.email` si no se pasa --recipients.",
    )
