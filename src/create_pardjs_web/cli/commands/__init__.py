"""CLI command modules for create-pardjs-web."""

from .create import register_create_command

__all__ = ["register_create_command"]
