"""Exportación JSON de los parámetros.

Por qué JSON:
- Es lo que se muestra antes de enviar y lo que recibe el endpoint.
- Permite guardar los parámetros de un lanzamiento para repetirlo.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ExperimentParams, RecipientsKey


def render_params_json(
    params: ExperimentParams,
    recipients_key: RecipientsKey = RecipientsKey.RECIPIENTS,
) -> str:
    """Serializa el mapping `antithesis.*` con indentación estable."""

    return json.dumps(params.to_params(recipients_key), ensure_ascii=False, indent=2)


def export_params_json(
    *,
    params: ExperimentParams,
    output_path: Path,
    recipients_key: RecipientsKey = RecipientsKey.RECIPIENTS,
) -> Path:
    """Exporta el cuerpo completo (`{"params": ...}`) a JSON UTF-8."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = params.to_payload(recipients_key)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
