"""
Centralized settings and path configuration for the benefits pricing tool.
"""
import logging
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def get_package_data_dir() -> Path:
    """Directory holding the packaged product and rate tables."""
    return Path(__file__).resolve().parent.parent / 'data'


@dataclass
class Settings:
    """Application settings with sensible defaults."""
    
    # Project paths
    project_root: Path
    data_dir: Path
    
    # Catalog files
    products_csv: Path
    rates_csv: Path
    
    log_level: str = 'INFO'
    
    @classmethod
    def load(cls, data_dir: Optional[Path] = None) -> 'Settings':
        """
        Load settings from the project structure.
        
        BENEFITS_PRICING_DATA_DIR points the catalog at another directory,
        BENEFITS_PRICING_LOG_LEVEL sets the logging level.
        """
        env_dir = os.getenv('BENEFITS_PRICING_DATA_DIR')
        root_dir = data_dir or (Path(env_dir) if env_dir else get_package_data_dir())
        
        return cls(
            project_root=get_project_root(),
            data_dir=root_dir,
            products_csv=root_dir / 'products.csv',
            rates_csv=root_dir / 'rates.csv',
            log_level=os.getenv('BENEFITS_PRICING_LOG_LEVEL', 'INFO').upper(),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def configure_logging(settings: Optional[Settings] = None):
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
