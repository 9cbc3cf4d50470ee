"""Email de git como destinatario por defecto (best-effort).

Notas:
- Cualquier fallo (git ausente, sin email configurado, salida no decodificable)
  devuelve "" en vez de un error.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Callable

logger = logging.getLogger("antithesis_launch.git")

GIT_EMAIL_COMMAND = ("git", "config", "--get", "user.email")

Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]


def get_git_email(runner: Runner = subprocess.run) -> str:
    """`git config --get user.email` sin espacios, o "" si falla."""

    try:
        result = runner(list(GIT_EMAIL_COMMAND), capture_output=True, check=False)
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git email lookup failed: %s", exc)
        return ""

    if result.returncode != 0:
        logger.debug("git email lookup exited with %s", result.returncode)
        return ""

    stdout = result.stdout or b""
    try:
        text = stdout.decode("utf-8") if isinstance(stdout, bytes) else str(stdout)
    except UnicodeDecodeError:
        return ""
    return text.strip()
