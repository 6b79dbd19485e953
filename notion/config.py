"""Configuration management for Notion using Pydantic Settings.

Loads configuration from environment variables and YAML config files.
Config file locations:
  - Linux/macOS: ~/.config/notion/config.yaml
  - Windows: %APPDATA%/notion/config.yaml

The shell integration signals (NOTION_SHELL, NOTION_POSTSCRIPT) are set by
the shell profile the installer writes, once per shell session, so they are
never persisted to the config file.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from platformdirs import user_config_dir


# Fields that describe the current shell session rather than user preferences
SESSION_FIELDS = {"shell", "postscript"}


class NotionConfig(BaseSettings):
    """Main configuration class for Notion.

    Configuration is loaded from:
    1. Values passed to the constructor (including a loaded config file)
    2. Environment variables with the NOTION_ prefix
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="NOTION_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Shell integration signals
    shell: Optional[str] = Field(
        default=None,
        description="Shell family of the running shell (NOTION_SHELL)"
    )

    postscript: Optional[Path] = Field(
        default=None,
        description="Directory the shell sources its postscript from (NOTION_POSTSCRIPT)"
    )

    # Postscript rendering
    escape_quotes: bool = Field(
        default=False,
        description="Escape single quotes inside quoted path values"
    )

    # Application Settings
    config_path: Optional[Path] = Field(
        default=None,
        description="Custom config file path"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    def __init__(self, **kwargs):
        """Initialize configuration with default paths."""
        super().__init__(**kwargs)

        if self.config_path is None:
            config_dir = Path(user_config_dir("notion", appauthor=False))
            self.config_path = config_dir / "config.yaml"

    @classmethod
    def load_from_file(cls, config_path: Optional[Path] = None) -> "NotionConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Optional custom config file path

        Returns:
            NotionConfig instance with loaded settings

        Raises:
            ValueError: If the file or an environment value is invalid.
        """
        import yaml

        if config_path is None:
            config_path = cls().config_path

        if config_path.exists():
            with open(config_path, "r") as f:
                try:
                    data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid config file {config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ValueError(f"Invalid config file {config_path}: expected a mapping")
            for key in SESSION_FIELDS | {"config_path"}:
                data.pop(key, None)
            return cls(config_path=config_path, **data)

        return cls(config_path=config_path)

    def save_to_file(self, config_path: Optional[Path] = None) -> None:
        """Save configuration to YAML file.

        Session fields are skipped; they belong to the shell that set them.

        Args:
            config_path: Optional custom config file path
        """
        import yaml

        if config_path is None:
            config_path = self.config_path

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(exclude_none=True, exclude=SESSION_FIELDS | {"config_path"})

        for key, value in data.items():
            if isinstance(value, Path):
                data[key] = str(value)

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
