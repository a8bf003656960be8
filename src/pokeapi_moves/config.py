"""
Configuration for pokeapi_moves.

ClientConfig gathers the settings the package needs at runtime: where a
local PokéAPI data dump lives and how logging behaves. Create one instance
and hand it to configure() early in your application:

    from pathlib import Path
    from pokeapi_moves.config import ClientConfig, configure

    configure(ClientConfig(data_dir=Path("api-data/data/api/v2")))
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("text", "json")


@dataclass
class ClientConfig:
    """Runtime configuration for loading PokéAPI move records."""

    # ============================================================================
    # Data Configuration
    # ============================================================================

    # Root of a local API dump, i.e. the directory holding "move/", "move-target/", ...
    data_dir: Optional[Path] = None

    # ============================================================================
    # Logging Configuration
    # ============================================================================

    logging_level: str = "INFO"
    logging_format: str = "text"
    logging_log_dir: Optional[Path] = None  # None disables file logging
    logging_max_log_size_mb: int = 10
    logging_backup_count: int = 5
    logging_console_colors: bool = True

    def __post_init__(self):
        """Normalize path fields and validate configuration.

        Raises:
            ValueError: If configuration values are invalid
            TypeError: If configuration types are incorrect
        """
        if isinstance(self.data_dir, str):
            self.data_dir = Path(self.data_dir)
        if isinstance(self.logging_log_dir, str):
            self.logging_log_dir = Path(self.logging_log_dir)

        self._validate_configuration()

    def _validate_configuration(self) -> None:
        """Validate configuration values and ranges.

        Raises:
            ValueError: If configuration values are invalid
            TypeError: If configuration types are incorrect
        """
        if self.data_dir is not None and not isinstance(self.data_dir, Path):
            raise TypeError(
                f"data_dir must be a Path or None, got {type(self.data_dir).__name__}"
            )

        if self.logging_log_dir is not None and not isinstance(self.logging_log_dir, Path):
            raise TypeError(
                f"logging_log_dir must be a Path or None, got {type(self.logging_log_dir).__name__}"
            )

        for field_name in ("logging_level", "logging_format"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")

        # bool is an int subclass, so reject it explicitly
        for field_name in ("logging_max_log_size_mb", "logging_backup_count"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{field_name} must be an integer, got {type(value).__name__}")

        if not isinstance(self.logging_console_colors, bool):
            raise TypeError(
                f"logging_console_colors must be a bool, got {type(self.logging_console_colors).__name__}"
            )

        if self.logging_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"logging_level must be one of {list(VALID_LOG_LEVELS)}, got '{self.logging_level}'"
            )

        if self.logging_format not in VALID_LOG_FORMATS:
            raise ValueError(
                f"logging_format must be one of {list(VALID_LOG_FORMATS)}, got '{self.logging_format}'"
            )

        if self.logging_max_log_size_mb <= 0:
            raise ValueError(
                f"logging_max_log_size_mb must be positive, got {self.logging_max_log_size_mb}"
            )

        if self.logging_backup_count < 0:
            raise ValueError(
                f"logging_backup_count must be non-negative, got {self.logging_backup_count}"
            )


def configure(config: ClientConfig) -> None:
    """Register a config globally and apply its logging and data directory settings.

    Args:
        config (ClientConfig): The configuration to apply.
    """
    from pokeapi_moves.utils.core.config_registry import set_config
    from pokeapi_moves.utils.core.loader import ResourceLoader
    from pokeapi_moves.utils.core.logger import configure_logging_system

    set_config(config)
    configure_logging_system(config)
    ResourceLoader.set_data_dir(config.data_dir)
