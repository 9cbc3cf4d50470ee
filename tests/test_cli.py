"""End-to-end tests for the Typer command line."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from adapters.hyperion import HyperionLauncher
from cli import doctor
from cli import main as cli_main

runner = CliRunner()

BASE_ARGS = ["--username", "alice", "--password", "s3cret", "--config-image", "cfg:1"]


@pytest.fixture
def http(monkeypatch: pytest.MonkeyPatch):
    """Route the launcher through a MockTransport; returns the captured requests."""

    state: dict[str, object] = {"status": 200, "requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)  # type: ignore[union-attr]
        return httpx.Response(state["status"], text="server says no")  # type: ignore[arg-type]

    monkeypatch.setattr(
        cli_main,
        "build_launcher",
        lambda settings: HyperionLauncher(settings, transport=httpx.MockTransport(handler)),
    )
    monkeypatch.setattr(cli_main, "get_git_email", lambda: "dev@example.com")
    return state


def _sent_params(state) -> dict:
    (request,) = state["requests"]
    return json.loads(request.content)["params"]


def test_success_prints_params_and_confirmation(http) -> None:
    result = runner.invoke(cli_main.app, BASE_ARGS + ["--image", "a", "--image", "b"])

    assert result.exit_code == 0, result.output
    assert "Launching experiment with parameters:" in result.output
    assert "Successfully launched experiment" in result.output
    params = _sent_params(http)
    assert params["antithesis.images"] == "a;b"
    assert params["antithesis.recipients"] == "dev@example.com"
    assert params["antithesis.duration"] == "15"
    assert params["antithesis.description"] == "Basic test run"


@pytest.mark.parametrize("status", [401, 500])
def test_http_failure_exits_non_zero_without_retry(http, status: int) -> None:
    http["status"] = status

    result = runner.invoke(cli_main.app, BASE_ARGS)

    assert result.exit_code == 1
    assert "Failed to launch experiment" in result.output
    assert f"HTTP {status}" in result.output
    assert len(http["requests"]) == 1


def test_missing_config_image_is_usage_error(http) -> None:
    result = runner.invoke(cli_main.app, ["--username", "alice", "--password", "s3cret"])

    assert result.exit_code == 2
    assert http["requests"] == []


def test_missing_credentials_is_usage_error(http) -> None:
    result = runner.invoke(cli_main.app, ["--config-image", "cfg"])

    assert result.exit_code == 2
    assert http["requests"] == []


def test_credentials_from_environment(http, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANTITHESIS_USERNAME", "bob")
    monkeypatch.setenv("ANTITHESIS_PASSWORD", "hunter2")

    result = runner.invoke(cli_main.app, ["--config-image", "cfg"])

    assert result.exit_code == 0, result.output
    (request,) = http["requests"]
    assert request.headers["Authorization"].startswith("Basic ")


def test_tenant_from_environment_qualifies_bare_images(http, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TENANT_NAME", "acme")

    result = runner.invoke(cli_main.app, BASE_ARGS + ["--image", "app:1", "--image", "ghcr.io/x/y:2"])

    assert result.exit_code == 0, result.output
    params = _sent_params(http)
    prefix = "us-central1-docker.pkg.dev/molten-verve-216720/acme-repository/"
    assert params["antithesis.config_image"] == prefix + "cfg:1"
    assert params["antithesis.images"] == prefix + "app:1;ghcr.io/x/y:2"


def test_variant_flags(http) -> None:
    result = runner.invoke(
        cli_main.app,
        BASE_ARGS
        + [
            "--tenant-name",
            "acme",
            "--no-qualify-images",
            "--no-git-recipients",
            "--no-print-params",
            "--recipients-key",
            "antithesis.report.recipients",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Launching experiment with parameters:" not in result.output
    params = _sent_params(http)
    assert params["antithesis.config_image"] == "cfg:1"
    assert params["antithesis.report.recipients"] == ""
    assert "antithesis.recipients" not in params
    assert "antithesis.images" not in params


def test_failed_git_lookup_gives_empty_recipients(http, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_main, "get_git_email", lambda: "")

    result = runner.invoke(cli_main.app, BASE_ARGS)

    assert result.exit_code == 0, result.output
    assert _sent_params(http)["antithesis.recipients"] == ""


def test_save_params_writes_request_body(http, tmp_path: Path) -> None:
    out = tmp_path / "out" / "params.json"

    result = runner.invoke(cli_main.app, BASE_ARGS + ["--save-params", str(out)])

    assert result.exit_code == 0, result.output
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved["params"] == _sent_params(http)


def test_version() -> None:
    result = runner.invoke(cli_main.app, ["--version"])

    assert result.exit_code == 0
    assert cli_main.__version__ in result.output


def test_doctor_run_offline(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(doctor, "get_git_email", lambda: "")

    result = runner.invoke(cli_main.app, ["doctor", "run", "--skip-network"])

    assert result.exit_code == 0, result.output
    assert "Credentials" in result.output
    assert "SKIPPED" in result.output


def test_doctor_reports_invalid_configuration_and_exits_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(doctor, "get_git_email", lambda: "")
    monkeypatch.setenv("ANTITHESIS_PRINT_PARAMS", "maybe")

    result = runner.invoke(cli_main.app, ["doctor", "run", "--skip-network"])

    assert result.exit_code == 0, result.output
    assert "Configuration" in result.output
    assert "FAIL" in result.output
    assert "Credentials" in result.output


def test_doctor_has_no_credential_storage_command(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(cli_main.app, ["doctor", "setup"], input="alice\ns3cret\n\n")

    assert result.exit_code != 0
    assert list(tmp_path.rglob("*")) == []
