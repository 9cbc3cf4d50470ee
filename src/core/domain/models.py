"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación y documentación autocontenida (Field) sin acoplar el Core a HTTP.
- Los parámetros se construyen una vez por invocación y son inmutables.

Nota:
- Estos modelos describen *qué* se envía, no *cómo* se envía.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RecipientsKey(str, Enum):
    """Clave JSON de los destinatarios (difiere entre versiones del script)."""

    RECIPIENTS = "antithesis.recipients"
    REPORT_RECIPIENTS = "antithesis.report.recipients"


class Credentials(BaseModel):
    """Par usuario/password para basic auth. Nunca se persiste ni se loguea."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Usuario de la API.")
    password: str = Field(..., repr=False, description="Password de la API.")


class ExperimentParams(BaseModel):
    """Parámetros de un experimento.

    Por qué `images` es una tupla:
    - El modelo es inmutable; la unión con `;` ocurre solo al serializar.
    """

    model_config = ConfigDict(frozen=True)

    duration: str = Field(
        default="15",
        description="Duración en minutos (se envía tal cual, sin validar).",
    )
    description: str = Field(
        default="Basic test run",
        description="Descripción libre del experimento.",
    )
    config_image: str = Field(
        ...,
        description="Referencia de la imagen de configuración.",
    )
    recipients: str = Field(
        default="",
        description="Emails separados por comas (puede ser vacío).",
    )
    images: tuple[str, ...] = Field(
        default=(),
        description="Imágenes a testear, en el orden de los flags.",
    )

    def to_params(self, recipients_key: RecipientsKey = RecipientsKey.RECIPIENTS) -> dict[str, Any]:
        """Mapping con las claves `antithesis.*` que espera el endpoint."""

        params: dict[str, Any] = {
            "antithesis.duration": self.duration,
            "antithesis.description": self.description,
            "antithesis.config_image": self.config_image,
            RecipientsKey(recipients_key).value: self.recipients,
        }
        if self.images:
            params["antithesis.images"] = ";".join(self.images)
        return params

    def to_payload(self, recipients_key: RecipientsKey = RecipientsKey.RECIPIENTS) -> dict[str, Any]:
        return {"params": self.to_params(recipients_key)}


class LaunchResult(BaseModel):
    """Respuesta exitosa del endpoint."""

    status_code: int = Field(..., ge=100, le=599)
    body: str = Field(default="", description="Texto de la respuesta (puede ser vacío).")
