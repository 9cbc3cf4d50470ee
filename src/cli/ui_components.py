"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `launch` y `doctor`.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from adapters.json_exporter import render_params_json
from core.domain.models import ExperimentParams, RecipientsKey


def print_params(
    console: Console,
    params: ExperimentParams,
    recipients_key: RecipientsKey = RecipientsKey.RECIPIENTS,
) -> None:
    """Imprime los parámetros que se van a enviar (JSON indentado)."""

    console.print("Launching experiment with parameters:")
    console.print_json(render_params_json(params, recipients_key), indent=2)


def build_checks_table(title: str) -> Table:
    """Tabla de diagnóstico: check / estado / detalle."""

    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
