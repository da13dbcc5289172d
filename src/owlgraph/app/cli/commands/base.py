"""
Base command class.

This module contains the base command class that all CLI commands inherit
from. It owns configuration loading, logging setup, and the translation of
conversion errors into exit codes.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ..helpers import get_default_config_path, load_config, setup_logging
from ....constants import ExitCode
from ....registry import RegistryConfig, RegistryError


logger = logging.getLogger(__name__)


class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides common functionality like configuration loading and logging setup.
    Subclasses implement :meth:`run`; :meth:`execute` wraps it with error
    handling.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the command.

        Args:
            config_path: Path to configuration file. When omitted, the default
                path is used only if the file exists.
        """
        self.config_path = config_path
        self._config: Optional[Dict[str, Any]] = None
        self.registry_config: Optional[RegistryConfig] = None

    @property
    def config(self) -> Dict[str, Any]:
        """Lazy-load configuration."""
        if self._config is None:
            if self.config_path:
                self._config = load_config(self.config_path)
            else:
                default_path = get_default_config_path()
                self._config = load_config(default_path) if Path(default_path).exists() else {}
        return self._config

    def get_registry_config(self) -> RegistryConfig:
        return RegistryConfig.from_dict(self.config.get('registry'))

    def setup_logging_from_config(self, level_override: Optional[str] = None) -> None:
        """Setup logging from the ``logging`` section of the config."""
        log_config = dict(self.config.get('logging', {}))
        if level_override:
            log_config['level'] = level_override
        setup_logging(config=log_config)

    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        try:
            self.setup_logging_from_config(getattr(args, 'log_level', None))
            self.registry_config = self.get_registry_config()
        except (ValueError, FileNotFoundError, PermissionError) as e:
            print(f"✗ Configuration error: {e}")
            return ExitCode.CONFIG_ERROR

        try:
            return self.run(args)
        except FileNotFoundError as e:
            logger.error(str(e))
            print(f"✗ {e}")
            return ExitCode.FILE_NOT_FOUND
        except RegistryError as e:
            logger.error(f"Conversion aborted: {e}")
            print(f"✗ Conversion aborted: {e}")
            return ExitCode.REGISTRY_ERROR
        except ValueError as e:
            logger.error(str(e))
            print(f"✗ {e}")
            return ExitCode.VALIDATION_ERROR

    @abstractmethod
    def run(self, args: argparse.Namespace) -> int:
        """Run the command body."""
