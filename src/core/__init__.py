"""Core: dominio, configuración y orquestación (sin I/O de red)."""
