"""Storefront Configuration"""

import os
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

DEFAULT_PRODUCTS_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "products.json")


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage
    db_path: str = "db.json"
    products_path: Optional[str] = None

    # Comma separated list, "*" allows any origin
    cors_origins: str = "*"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "STOREFRONT_"
        case_sensitive = False
        extra = "ignore"

    def get_products_path(self) -> str:
        """Catalog document path, falling back to the bundled catalog"""
        if self.products_path:
            return self.products_path
        return os.path.normpath(DEFAULT_PRODUCTS_PATH)

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
