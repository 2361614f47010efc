# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000").rstrip("/")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_UPLOAD_TIMEOUT = int(os.getenv("UPLOAD_TIMEOUT", "300"))
_VERIFY_SSL = os.getenv("VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Console verbosity; the log file always records DEBUG
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Data directory override (session file, logs)
_DATA_DIR = os.getenv("ATICT_DATA_DIR", None)


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "AT-ICT Portal"
    APP_TITLE: str = "AT-ICT IGCSE ICT Tutoring Portal"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "AT-ICT"

    # HTTP API Backend Settings
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    UPLOAD_TIMEOUT: int = _UPLOAD_TIMEOUT  # 5 minutes for large files
    VERIFY_SSL: bool = _VERIFY_SSL

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = Path(_DATA_DIR) if _DATA_DIR else PROJECT_ROOT / "data"
    LOGS_DIR: Path = DATA_DIR / "logs"

    # Session persistence (token + user)
    SESSION_FILE: str = "session.json"
    SESSION_PATH: Path = DATA_DIR / SESSION_FILE

    # Logging
    LOG_FILE: str = "atict-portal.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL

    # Registration
    PASSWORD_MIN_LENGTH: int = 6
    DEFAULT_TECH_KNOWLEDGE: int = 5
    DEFAULT_REGISTRATION_FEE: int = 499
    YEAR_OPTIONS: Tuple[str, ...] = ("1", "2")
    SESSION_OPTIONS: Tuple[Tuple[str, str], ...] = (
        ("NOV 25", "November 2025"),
        ("JUN 26", "June 2026"),
    )

    # Materials
    MAX_MATERIAL_SIZE: int = 100 * 1024 * 1024  # 100MB
    MAX_THUMBNAIL_SIZE: int = 2 * 1024 * 1024  # 2MB
    MATERIAL_EXTENSIONS: Tuple[str, ...] = (
        ".pdf", ".doc", ".docx", ".ppt", ".pptx",
        ".xls", ".xlsx", ".txt", ".zip", ".rar",
    )
    MATERIAL_TYPES: Tuple[str, ...] = ("theory", "practical", "other")

    # UI Settings
    WINDOW_MIN_WIDTH: int = 1100
    WINDOW_MIN_HEIGHT: int = 760
    TOAST_DURATION_MS: int = 3000
    TOAST_ERROR_DURATION_MS: int = 5000

    # Branding Colors
    PRIMARY_COLOR: str = "#D91743"
    CARD_BACKGROUND: str = "#1A1A1A"
    TEXT_MUTED: str = "#9CA3AF"
    BORDER_COLOR: str = "#2A2A2A"
    SUCCESS_COLOR: str = "#16A34A"
    WARNING_COLOR: str = "#EA580C"
    ERROR_COLOR: str = "#DC2626"
    INFO_COLOR: str = "#2563EB"
