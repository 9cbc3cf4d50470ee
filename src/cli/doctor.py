"""Comando doctor: diagnóstico del entorno.

Por qué existe:
- Muestra qué configuración usaría un lanzamiento sin lanzar nada.
- Nunca falla: cada problema aparece como una fila FAIL de la tabla.
"""

from __future__ import annotations

from urllib.parse import urlsplit

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.git_email import get_git_email
from adapters.http_client import build_client
from cli.ui_components import build_checks_table
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Contacta el host del endpoint (sin lanzar ningún experimento)."""

    parts = urlsplit(settings.endpoint_url)
    url = f"{parts.scheme}://{parts.netloc}/"
    try:
        with build_client(settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run(
    skip_network: bool = typer.Option(False, "--skip-network", help="Do not contact the endpoint host."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    table = build_checks_table("antithesis-launch doctor")

    try:
        settings = AppSettings()
        table.add_row("Configuration", "OK", "environment variables parsed")
    except ValidationError as exc:
        # Sigue con los defaults para que el resto de checks se muestre igual.
        settings = AppSettings.model_construct()
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        table.add_row("Configuration", "FAIL", errors)

    # Credenciales
    if settings.username and settings.password:
        table.add_row("Credentials", "OK", f"user {settings.username}")
    else:
        table.add_row(
            "Credentials",
            "MISSING",
            "Pass --username/--password or set ANTITHESIS_USERNAME/ANTITHESIS_PASSWORD",
        )

    email = get_git_email()
    if email:
        table.add_row("Git email", "OK", f"default recipients: {email}")
    else:
        table.add_row("Git email", "OPTIONAL", "No user.email -> recipients default to empty")

    if settings.tenant_name:
        table.add_row("Tenant", "OK", f"bare images -> {settings.tenant_name}-repository")
    else:
        table.add_row("Tenant", "OPTIONAL", "No TENANT_NAME -> bare images sent unchanged")

    table.add_row("Endpoint", "OK", settings.endpoint_url)
    table.add_row("Recipients key", "OK", settings.recipients_key.value)

    if skip_network:
        table.add_row("HTTP connectivity", "SKIPPED", "--skip-network")
    else:
        ok_http, detail_http = _check_http(settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)