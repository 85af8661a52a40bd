import json
from pathlib import Path
from typing import Dict, Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import (
    CONFIG_FILE_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPORTS_BASE_DIR,
    DEFAULT_SAMPLE_SESSION,
    DEFAULT_VISUALIZATION_SCRIPT,
    ENV_PREFIX,
    LIBRARY_LOG_LEVELS,
)


class Config(BaseSettings):
    """Global configuration settings for the benchmark reports."""

    reports_base_dir: Path = Path(DEFAULT_REPORTS_BASE_DIR)
    sample_session: str = DEFAULT_SAMPLE_SESSION
    visualization_script: Path = Path(DEFAULT_VISUALIZATION_SCRIPT)
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        protected_namespaces=('settings_',),
        env_prefix=ENV_PREFIX,
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                # Convert path settings to Path if they are strings
                for key in ("reports_base_dir", "visualization_script"):
                    if key in config:
                        config[key] = Path(config[key])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Report settings are read from, highest first:
        1. LLM_REPORTS_* environment variables
        2. Constructor keyword arguments
        3. config.json in the working directory
        4. Field defaults

        Command-line flags are applied on top of the result by the CLI.
        """
        return (env_settings, init_settings, cls.load_config_from_json)
