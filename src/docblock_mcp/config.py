"""Settings loaded from the environment and a YAML config file.

Sources, highest priority first:
    1. keyword arguments to Settings()
    2. DOCBLOCK_MCP_* environment variables (e.g. DOCBLOCK_MCP_NAMESPACE)
    3. the YAML file at DOCBLOCK_MCP_CONFIG_FILE, or config.yaml in the
       platformdirs user config directory
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir
from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .type_resolver import Context


def get_config_path() -> Path:
    """Return the default config file path."""
    return Path(user_config_dir("docblock-mcp")) / "config.yaml"


class Settings(BaseSettings):
    """Namespace context and logging settings for the server."""

    # YAML file to read; not itself read from the YAML file
    config_file: Path | None = None

    namespace: str = ""
    aliases: dict[str, str] = {}
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="DOCBLOCK_MCP_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_file = (
            init_settings.init_kwargs.get("config_file")
            or env_settings().get("config_file")
            or get_config_path()
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
        )

    def context(self, namespace: str | None = None) -> Context:
        """Build the type context, optionally overriding the namespace."""
        return Context(
            namespace=self.namespace if namespace is None else namespace,
            aliases=dict(self.aliases),
        )


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings; a missing config file leaves the defaults in place.

    Raises yaml.YAMLError for a malformed file and pydantic.ValidationError
    for values of the wrong type.
    """
    if path is None:
        return Settings()
    return Settings(config_file=Path(path))
