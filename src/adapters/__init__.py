"""Adaptadores de I/O: HTTP (httpx), git (subprocess), JSON."""
