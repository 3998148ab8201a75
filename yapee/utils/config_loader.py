"""
Application configuration loader (server, CORS, storage).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yml"


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)
    version: str = "1.0.0"


class CorsConfig(BaseModel):
    development_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )
    production_origins: List[str] = Field(
        default_factory=lambda: ["https://yapee.com", "https://www.yapee.com"]
    )
    methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    headers: List[str] = Field(default_factory=lambda: ["Content-Type", "Authorization", "X-Requested-With"])


class StorageConfig(BaseModel):
    namespace: str = "yapee"


class AppConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    cors: CorsConfig = Field(default_factory=CorsConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    def allowed_origins(self, production: bool) -> List[str]:
        return self.cors.production_origins if production else self.cors.development_origins


def load_app_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate the application configuration from YAML.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValidationError: If the config doesn't match the schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"App config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = AppConfig(**data)
        logger.info("Successfully loaded app config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("App config validation failed: %s", e)
        raise


def is_production() -> bool:
    """Production when APP_ENV=production or FORCE_PRODUCTION=true."""
    if os.getenv("APP_ENV", "").strip().lower() == "production":
        return True
    return os.getenv("FORCE_PRODUCTION", "").strip().lower() in ("1", "true", "yes")


def environment_name() -> str:
    return "production" if is_production() else os.getenv("APP_ENV", "development") or "development"


def resolve_port(cfg: AppConfig) -> int:
    return int(os.getenv("PORT", cfg.server.port))
