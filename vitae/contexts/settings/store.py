"""
Settings Store

Loads and saves the per-user settings record (name, API key, contact line and
optional structured résumé data).

Sources, lowest to highest precedence:
1. Env-style file (~/.cvrc): KEY=VALUE lines, keys with or without the CV_ prefix
2. Structured file (~/.cv.config.yaml): YAML mapping, the file `save_settings` writes
3. Process environment: variables prefixed with CV_

Missing files are not an error. Saving is read-modify-write: only the fields
passed explicitly replace the stored ones.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values, load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.layout.records import ResumeContent
from vitae.contexts.settings.logger import _log_debug, _log_info
from vitae.exceptions import SettingsParseError, SettingsWriteError

load_dotenv()
CONFIG_PATH = Path(os.getenv("CV_CONFIG_PATH", str(Path.home() / ".cv.config.yaml"))).expanduser()
ENV_PATH = Path(os.getenv("CV_ENV_PATH", str(Path.home() / ".cvrc"))).expanduser()

ENV_PREFIX = "CV_"

# Fields that may come from env-style sources (the résumé is structured-file only)
SCALAR_FIELDS = ("name", "api_key", "contact")


@dataclass(frozen=True)
class Settings:
    """
    Per-user settings record.

    Attributes:
        name: Full name printed on documents
        api_key: OpenAI API key (stored only)
        resume: Structured résumé data replacing the built-in content
        contact: Contact line for document footers
    """

    name: Optional[str] = None
    api_key: Optional[str] = None
    resume: Optional[ResumeContent] = None
    contact: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        """
        Build Settings from a plain mapping, ignoring unknown keys.

        Raises:
            ValueError: If the résumé data is malformed
        """
        resume_data = data.get("resume")
        return cls(
            name=_optional_str(data.get("name")),
            api_key=_optional_str(data.get("api_key")),
            resume=ResumeContent.from_dict(resume_data) if resume_data is not None else None,
            contact=_optional_str(data.get("contact")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "api_key": self.api_key,
            "resume": self.resume.to_dict() if self.resume is not None else None,
            "contact": self.contact,
        }


def _optional_str(value: Any) -> Optional[str]:
    # YAML may type bare values (e.g., a numeric API key)
    return None if value is None else str(value)


def _scalar_fields(values: Mapping[str, Optional[str]], require_prefix: bool) -> Dict[str, str]:
    """
    Select known scalar fields from an env-style mapping.

    Keys are matched case-insensitively after removing the CV_ prefix.
    Empty values are ignored.

    Args:
        values: Raw key-value pairs
        require_prefix: Only accept keys carrying the CV_ prefix
    """
    selected = {}
    for key, value in values.items():
        if value is None or value == "":
            continue

        upper_key = key.upper()
        if upper_key.startswith(ENV_PREFIX):
            upper_key = upper_key[len(ENV_PREFIX) :]
        elif require_prefix:
            continue

        field_name = upper_key.lower()
        if field_name in SCALAR_FIELDS:
            selected[field_name] = value
    return selected


def _read_structured_file(config_path: Path) -> Dict[str, Any]:
    """
    Read the YAML settings file, or return an empty mapping if it doesn't exist.

    Null values are dropped so that a field saved as null does not mask a
    value provided by the env-style file.

    Raises:
        SettingsParseError: If the YAML is malformed or its root is not a mapping
    """
    if not config_path.exists():
        _log_debug(f"No settings file at {config_path}")
        return {}

    try:
        loaded = OmegaConf.load(config_path)
        if not isinstance(loaded, DictConfig):
            raise SettingsParseError(
                config_path,
                ValueError(f"Expected a mapping at the top level, got {type(loaded).__name__}"),
            )
        container = OmegaConf.to_container(loaded, resolve=False)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise SettingsParseError(config_path, e) from e

    _log_debug(f"Read settings file {config_path}")
    return {key: value for key, value in container.items() if value is not None}


def load_settings(
    config_path: Path = CONFIG_PATH,
    env_path: Path = ENV_PATH,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Resolve the settings record from all sources.

    Args:
        config_path: Structured YAML settings file
        env_path: Env-style KEY=VALUE file
        environ: Environment mapping (default: os.environ)

    Returns:
        Merged Settings; fields no source provides are None

    Raises:
        SettingsParseError: If the structured file or its résumé data is malformed
    """
    if environ is None:
        environ = os.environ

    env_file_values = dotenv_values(env_path) if env_path.exists() else {}

    env_file_fields = _scalar_fields(env_file_values, require_prefix=False)
    structured_fields = _read_structured_file(config_path)
    environ_fields = _scalar_fields(environ, require_prefix=True)

    try:
        merged = OmegaConf.merge(env_file_fields, structured_fields, environ_fields)
        container = OmegaConf.to_container(merged, resolve=False)
        settings = Settings.from_dict(container)
    except (OmegaConfBaseException, ValueError) as e:
        raise SettingsParseError(config_path, e) from e

    _log_debug(
        "Resolved settings: "
        f"name={'set' if settings.name else 'unset'}, "
        f"api_key={'set' if settings.api_key else 'unset'}, "
        f"resume={'set' if settings.resume else 'unset'}"
    )
    return settings


def save_settings(
    existing: Optional[Settings],
    name: Optional[str] = None,
    api_key: Optional[str] = None,
    contact: Optional[str] = None,
    config_path: Path = CONFIG_PATH,
) -> Settings:
    """
    Merge the given fields into `existing` and write the result.

    Fields left as None are untouched. The file is truncated and rewritten;
    concurrent writers are not coordinated.

    Args:
        existing: Previously loaded settings (None = start from empty)
        name: New name, or None to keep the stored one
        api_key: New API key, or None to keep the stored one
        contact: New contact line, or None to keep the stored one
        config_path: Structured YAML settings file to write

    Returns:
        The merged Settings that were written

    Raises:
        SettingsWriteError: If the file cannot be opened or written
    """
    updates = {
        key: value
        for key, value in {"name": name, "api_key": api_key, "contact": contact}.items()
        if value is not None
    }
    merged = replace(existing or Settings(), **updates)

    config = OmegaConf.create(merged.to_dict())
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            OmegaConf.save(config, f)
    except OSError as e:
        raise SettingsWriteError(config_path, e) from e

    _log_info(f"Saved settings ({', '.join(sorted(updates)) or 'no changes'}) to {config_path}")
    return merged
