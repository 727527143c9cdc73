"""
Settings Context

Responsibilities:
- Resolves user defaults from the env-style file, YAML file and environment
- Persists partial updates without clobbering other stored fields

Owns: The per-user settings files
Never: Holds settings as process-wide state (callers pass Settings explicitly)
"""

from vitae.contexts.settings.store import (
    CONFIG_PATH,
    ENV_PATH,
    Settings,
    load_settings,
    save_settings,
)

__all__ = ["CONFIG_PATH", "ENV_PATH", "Settings", "load_settings", "save_settings"]
