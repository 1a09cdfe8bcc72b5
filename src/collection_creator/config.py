"""Generator settings.

Settings come from an optional YAML file and are then overridden by
environment variables named ``COLLECTION_CREATOR_<SECTION>_<KEY>``::

    enabled: true
    base_url: http://localhost:8080
    output:
      directory: ./build
      filename: collection.json
    collection:
      name: API Collection
    authorization:
      header-name: Authorization
      header-value: "{{logintoken}}"

The same tree may also be nested under ``postman.collection.generator``.
"""

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from collection_creator.errors import SettingsError

ENV_PREFIX = "COLLECTION_CREATOR_"
DEFAULT_SCHEMA = "https://schema.getpostman.com/json/collection/v2.0.0/collection.json"


class OutputSettings(BaseModel):
    directory: str = "./"
    filename: str = "collection.json"

    @property
    def full_path(self) -> str:
        """Directory joined to filename with exactly one separator."""
        directory = self.directory or "./"
        stripped = directory.rstrip("/\\")
        if not stripped and directory.startswith(("/", "\\")):
            return "/" + self.filename
        return (stripped or ".") + "/" + self.filename


class CollectionSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = "API Collection"
    schema_uri: str = Field(default=DEFAULT_SCHEMA, alias="schema")


class AuthorizationSettings(BaseModel):
    enabled: bool = True
    header_name: str = "Authorization"
    header_value: str = "{{logintoken}}"
    header_type: str = "text"


class GeneratorSettings(BaseModel):
    enabled: bool = True
    base_url: str = ""
    output: OutputSettings = OutputSettings()
    collection: CollectionSettings = CollectionSettings()
    authorization: AuthorizationSettings = AuthorizationSettings()


# Environment variable suffix -> (section, key); section None means top level.
ENV_KEYS: dict[str, tuple[str | None, str]] = {
    "ENABLED": (None, "enabled"),
    "BASE_URL": (None, "base_url"),
    "OUTPUT_DIRECTORY": ("output", "directory"),
    "OUTPUT_FILENAME": ("output", "filename"),
    "COLLECTION_NAME": ("collection", "name"),
    "COLLECTION_SCHEMA": ("collection", "schema"),
    "AUTHORIZATION_ENABLED": ("authorization", "enabled"),
    "AUTHORIZATION_HEADER_NAME": ("authorization", "header_name"),
    "AUTHORIZATION_HEADER_VALUE": ("authorization", "header_value"),
    "AUTHORIZATION_HEADER_TYPE": ("authorization", "header_type"),
}


def load_settings(file_path: Path | None = None, environ: Mapping[str, str] | None = None) -> GeneratorSettings:
    """Build settings from an optional YAML file plus environment overrides."""
    data: dict[str, Any] = {}
    if file_path is not None:
        data = _read_settings_file(file_path)

    _apply_env(data, os.environ if environ is None else environ)

    try:
        return GeneratorSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"invalid settings: {e}") from e


def _read_settings_file(file_path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise SettingsError(f"cannot read settings from {file_path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SettingsError(f"{file_path}: settings must be a mapping")

    return _normalize_keys(_unwrap_property_tree(raw))


def _unwrap_property_tree(raw: dict[str, Any]) -> dict[str, Any]:
    """Return the postman.collection.generator subtree when the file uses it."""
    node: Any = raw
    for key in ("postman", "collection", "generator"):
        node = node.get(key) if isinstance(node, dict) else None
        if not isinstance(node, dict):
            return raw
    return node


def _normalize_keys(data: Any) -> Any:
    if isinstance(data, dict):
        return {str(k).replace("-", "_"): _normalize_keys(v) for k, v in data.items()}
    return data


def _apply_env(data: dict[str, Any], environ: Mapping[str, str]) -> None:
    for suffix, (section, key) in ENV_KEYS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is None:
            continue
        if section is None:
            data[key] = value
            continue
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][key] = value
