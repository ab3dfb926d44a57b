"""Application configuration"""
import os
from pydantic import ConfigDict
from pydantic_settings import BaseSettings
from functools import lru_cache

_package_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    """Application settings"""
    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=False,
    )

    # API Settings
    app_name: str = "Munsell Chart API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 3000

    # File Settings
    munsell_file: str = os.path.join(_package_root, "data", "munsell.json")
    index_file: str = os.path.join(_package_root, "templates", "index.html")

    # Palette / export Settings
    swatch_size: int = 100  # px, PNG export squares
    random_palette_size: int = 5
    anomaly_severity: float = 0.6  # *anomaly simulations, 1.0 = *opia


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
