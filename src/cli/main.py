"""Entry point de la CLI (Typer).

Por qué un callback y no un subcomando:
- `antithesis-launch --config-image ... [--image ...]` mantiene la interfaz
  plana de siempre; el diagnóstico vive en el grupo `doctor`.
- Aquí (y solo aquí) los errores se convierten en mensajes y códigos de salida.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.git_email import get_git_email
from adapters.hyperion import HyperionLauncher
from adapters.json_exporter import export_params_json
from cli import doctor
from cli.ui_components import print_params
from core.config import AppSettings
from core.domain.models import Credentials, ExperimentParams, RecipientsKey
from core.errors import LaunchError
from core.interfaces.launcher import ExperimentLauncher
from core.services.launch_pipeline import LaunchOptions, LaunchRequest, launch_experiment

__version__ = "0.1.0"

app = typer.Typer(
    add_completion=False,
    help="Launch an Antithesis basic_test experiment.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _configure_logging(level: LogLevel) -> None:
    logger = logging.getLogger("antithesis_launch")
    logger.setLevel(getattr(logging, level.value, logging.WARNING))
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=_err_console, show_path=False))


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"antithesis-launch {__version__}")
        raise typer.Exit()


def build_launcher(settings: AppSettings) -> ExperimentLauncher:
    return HyperionLauncher(settings)


def _load_settings(**overrides: object) -> AppSettings:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid configuration: {exc}") from exc
    updates = {k: v for k, v in overrides.items() if v is not None}
    return settings.model_copy(update=updates) if updates else settings


@app.callback(invoke_without_command=True)
def launch(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(
        None, "--username", help="API username [env: ANTITHESIS_USERNAME]."
    ),
    password: Optional[str] = typer.Option(
        None, "--password", help="API password [env: ANTITHESIS_PASSWORD]."
    ),
    duration: str = typer.Option("15", "--duration", help="Test duration in minutes."),
    description: str = typer.Option("Basic test run", "--description", help="Test description."),
    config_image: Optional[str] = typer.Option(None, "--config-image", help="Config image URL (required)."),
    recipients: Optional[str] = typer.Option(
        None,
        "--recipients",
        help="Email recipients (comma-separated). Defaults to `git config user.email`.",
    ),
    images: Optional[List[str]] = typer.Option(
        None, "--image", help="Docker image to test (can be specified multiple times)."
    ),
    tenant_name: Optional[str] = typer.Option(
        None, "--tenant-name", help="Tenant used to qualify bare image names [env: TENANT_NAME]."
    ),
    recipients_key: Optional[RecipientsKey] = typer.Option(
        None, "--recipients-key", help="JSON key the recipients are sent under."
    ),
    no_print_params: bool = typer.Option(
        False, "--no-print-params", help="Do not print the parameters before sending."
    ),
    no_qualify_images: bool = typer.Option(
        False, "--no-qualify-images", help="Send bare image names unchanged."
    ),
    no_git_recipients: bool = typer.Option(
        False, "--no-git-recipients", help="Do not default recipients to the git email."
    ),
    save_params: Optional[Path] = typer.Option(
        None, "--save-params", help="Also write the request body to this JSON file."
    ),
    log_level: LogLevel = typer.Option(LogLevel.WARNING, "--log-level", case_sensitive=False),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Submit one experiment to the launch_experiment/basic_test endpoint."""

    if ctx.invoked_subcommand is not None:
        return

    _configure_logging(log_level)

    settings = _load_settings(
        tenant_name=tenant_name,
        recipients_key=recipients_key,
        print_params=False if no_print_params else None,
        qualify_images=False if no_qualify_images else None,
        default_recipients_from_git=False if no_git_recipients else None,
    )

    username = username or settings.username
    password = password or settings.password
    if not username:
        raise typer.BadParameter("missing (or set ANTITHESIS_USERNAME)", param_hint="'--username'")
    if not password:
        raise typer.BadParameter("missing (or set ANTITHESIS_PASSWORD)", param_hint="'--password'")
    if not config_image:
        raise typer.BadParameter("missing", param_hint="'--config-image'")

    options = LaunchOptions.from_settings(settings)
    request = LaunchRequest(
        credentials=Credentials(username=username, password=password),
        config_image=config_image,
        duration=duration,
        description=description,
        recipients=recipients,
        images=tuple(images or ()),
        tenant_name=settings.tenant_name,
    )

    def _on_params(params: ExperimentParams) -> None:
        if options.print_params:
            print_params(_console, params, settings.recipients_key)
        if save_params is not None:
            export_params_json(
                params=params,
                output_path=save_params,
                recipients_key=settings.recipients_key,
            )

    try:
        launch_experiment(
            request,
            options,
            launcher=build_launcher(settings),
            email_lookup=get_git_email,
            on_params=_on_params,
        )
    except (LaunchError, OSError) as exc:
        _err_console.print(f"Failed to launch experiment: {exc}", markup=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    _console.print("Successfully launched experiment", style="green")


def run() -> None:
    app(prog_name="antithesis-launch")


if __name__ == "__main__":
    run()
