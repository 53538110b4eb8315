"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from recengine.models import RecommendationConfig

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data files (JSON collaborator stores)
    data_dir: Path = Path(__file__).parent.parent / "data"
    catalog_json_path: Optional[Path] = None
    learners_json_path: Optional[Path] = None
    learning_paths_json_path: Optional[Path] = None

    # Optional JSON file with engine weights/limits (see RecommendationConfig.from_dict)
    engine_config_path: Optional[Path] = None

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        if self.catalog_json_path is None:
            self.catalog_json_path = self.data_dir / "catalog.json"
        if self.learners_json_path is None:
            self.learners_json_path = self.data_dir / "learners.json"
        if self.learning_paths_json_path is None:
            self.learning_paths_json_path = self.data_dir / "learning_paths.json"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_dir=_path_env("DATA_DIR", base_dir / "data"),
            catalog_json_path=_path_env("CATALOG_JSON_PATH"),
            learners_json_path=_path_env("LEARNERS_JSON_PATH"),
            learning_paths_json_path=_path_env("LEARNING_PATHS_JSON_PATH"),
            engine_config_path=_path_env("ENGINE_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if not self.catalog_json_path.exists():
            errors.append(f"Catalog JSON not found: {self.catalog_json_path}")

        if not self.learners_json_path.exists():
            errors.append(f"Learners JSON not found: {self.learners_json_path}")

        if self.engine_config_path is not None and not self.engine_config_path.exists():
            errors.append(f"Engine config not found: {self.engine_config_path}")

        # Learning paths file is created on first write

        return len(errors) == 0, errors

    def load_engine_config(self) -> RecommendationConfig:
        """Engine config from ENGINE_CONFIG_PATH merged over defaults."""
        if self.engine_config_path is None:
            return RecommendationConfig()
        with open(self.engine_config_path) as f:
            return RecommendationConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
