"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.launcher import EmailLookup, ExperimentLauncher

__all__ = [
    "EmailLookup",
    "ExperimentLauncher",
]
