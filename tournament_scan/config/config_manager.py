"""
Configuration Manager for the Tournament Listing Scanner
"""
import os
import json
import logging
from functools import lru_cache
from pathlib import Path
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ScannerConfig:
    """Configuration class for row reconstruction, schedule defaults and OCR access."""

    # Path configuration
    config_path: str = ""

    # Line Reconstruction parameters (fraction of page height)
    row_tolerance: float = 0.01
    debug_output: bool = False

    # Metadata parameters
    min_name_length: int = 5

    # Blind schedule defaults
    default_break_minutes: int = 15
    default_level_minutes: int = 30
    max_level_minutes: int = 120

    # OCR microservice
    ocr_url: str = "http://localhost:8001"
    ocr_timeout: int = 120

    def __post_init__(self):
        """Resolve the config path and load overrides from JSON if available."""
        if not self.config_path:
            env_path = os.getenv('TOURNAMENT_SCAN_CONFIG')
            if env_path:
                self.config_path = env_path
            else:
                project_root = Path(__file__).resolve().parent.parent.parent
                self.config_path = str(project_root / "config" / "scanner_config.json")

        self.load_config()

    def load_config(self):
        """Load configuration from JSON if file exists."""
        if not os.path.exists(self.config_path):
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not load config from {self.config_path}: {e}")
            return

        for key, value in data.items():
            if hasattr(self, key) and key != 'config_path':
                setattr(self, key, value)
            else:
                logger.debug(f"Ignoring unknown config key: {key}")


@lru_cache(maxsize=1)
def get_scanner_config() -> ScannerConfig:
    """Get the process-wide scanner configuration (loaded once)."""
    return ScannerConfig()
