"""Runtime configuration read from the environment."""

from .settings import Settings, load_settings, resolve_db_path

__all__ = ["Settings", "load_settings", "resolve_db_path"]
