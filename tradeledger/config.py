"""
Configuration loader for Trade Ledger.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv


class Config:
    """
    Configuration manager for Trade Ledger.

    Loads settings from:
    1. config/config.yaml (default settings)
    2. .env file
    3. Environment variables (override)

    Usage:
        config = Config()
        storage_dir = config.get('ledger.storage_dir', default='data')
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config.yaml (auto-detected if not provided)
        """
        self._config: Dict[str, Any] = {}
        self._env_loaded = False

        # Load .env file
        self._load_env()

        # Load YAML config
        if config_path is None:
            config_path = self._find_config_file()

        if config_path and Path(config_path).exists():
            self._load_yaml(config_path)

    def _find_config_file(self) -> Optional[str]:
        """Find config.yaml in common locations."""
        locations = [
            Path.cwd() / 'config' / 'config.yaml',
            Path.cwd() / 'config.yaml',
            Path(__file__).parent.parent / 'config' / 'config.yaml',
        ]

        for loc in locations:
            if loc.exists():
                return str(loc)
        return None

    def _load_env(self):
        """Load environment variables from .env file."""
        env_path = Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(env_path)
            self._env_loaded = True

    def _load_yaml(self, path: str):
        """Load YAML configuration file."""
        with open(path, 'r') as f:
            self._config = yaml.safe_load(f) or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Supports dot notation for nested keys: 'ledger.storage_dir'

        Priority:
        1. Environment variables ('ledger.storage_dir' -> LEDGER_STORAGE_DIR)
        2. YAML config
        3. Default value
        """
        env_key = key.upper().replace('.', '_')
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        # Navigate nested config with dot notation
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section."""
        return self._config.get(section, {})

    @property
    def storage_dir(self) -> str:
        """Directory holding the ledger blob."""
        return str(self.get('ledger.storage_dir', 'data'))

    @property
    def storage_key(self) -> str:
        """Blob key the ledger is stored under."""
        return str(self.get('ledger.storage_key', 'trades'))

    @property
    def log_level(self) -> str:
        return str(self.get('logging.level', 'INFO')).upper()

    @property
    def log_dir(self) -> str:
        return str(self.get('logging.log_dir', 'logs'))

    @property
    def log_to_file(self) -> bool:
        """Whether to write rotating log files."""
        value = self.get('logging.file_enabled', True)
        if isinstance(value, str):
            return value.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(value)

    def to_dict(self) -> Dict[str, Any]:
        """Export config as dictionary."""
        return self._config.copy()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
