#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Service ==========
    app_name: str = "Catalog Builder"
    app_version: str = "1.0.0"

    # ========== Data ==========
    # Seed two sample businesses and their products on startup (dev mode)
    load_sample_data: bool = True

    # ========== Directories ==========
    public_dir: Path = BASE_DIR / "public"
    custom_templates_dir: Path = BASE_DIR / "public" / "templates" / "custom"
    generated_dir: Path = BASE_DIR / "public" / "generated"
    generated_url_prefix: str = "/generated"

    # ========== PDF Export ==========
    # Backends are tried in this order; the first success wins.
    # Comma-separated in env, e.g. PDF_BACKENDS=browser,reportlab
    pdf_backends: str = "reportlab,browser"

    # Explicit Chromium/Chrome binary. Empty = search PATH.
    browser_binary: Optional[str] = None
    browser_timeout_seconds: int = 60

    # Start a new page when less than this many points remain (reportlab backend)
    pdf_page_break_threshold: float = 200.0

    # ========== Security ==========
    # CORS origins (comma-separated in env, parsed to list)
    cors_origins: str = ""  # Empty = use default dev origins

    # ========== Logging ==========
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Create directories
        for dir_path in [
            self.public_dir,
            self.custom_templates_dir,
            self.generated_dir,
        ]:
            dir_path.mkdir(exist_ok=True, parents=True)

    def get_pdf_backends(self) -> list:
        """Get PDF backend names as an ordered list."""
        return [b.strip().lower() for b in self.pdf_backends.split(",") if b.strip()]

    def get_cors_origins(self) -> list:
        """Get CORS origins as a list. Falls back to dev defaults if empty."""
        if self.cors_origins:
            return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        # Dev defaults
        return [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]


# Global settings instance
settings = Settings()
