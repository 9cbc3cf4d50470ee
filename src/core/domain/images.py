"""Referencias de imagen.

Reglas:
- Una referencia con `/` ya está cualificada y nunca se reescribe.
- Un nombre corto se expande al repositorio del tenant si hay tenant.
"""

from __future__ import annotations

from core.config import REGISTRY_HOST, REGISTRY_ORG


def is_qualified(reference: str) -> bool:
    return "/" in reference


def qualify_image(
    reference: str,
    tenant_name: str | None,
    *,
    registry_host: str = REGISTRY_HOST,
    registry_org: str = REGISTRY_ORG,
) -> str:
    """Forma cualificada de `reference` para `tenant_name`.

    Referencias ya cualificadas, o sin tenant, se devuelven tal cual.
    """

    if is_qualified(reference) or not tenant_name:
        return reference
    return f"{registry_host}/{registry_org}/{tenant_name}-repository/{reference}"
