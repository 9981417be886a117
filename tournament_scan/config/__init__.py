from .config_manager import ScannerConfig, get_scanner_config

__all__ = [
    'ScannerConfig',
    'get_scanner_config'
]
