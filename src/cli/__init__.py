"""Capa CLI (Typer + Rich): flags, mensajes y códigos de salida."""
