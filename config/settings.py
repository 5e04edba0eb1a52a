"""
Configuration Management for the Respire Intervention Simulator
Loads environment variables and provides centralized settings
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings and configuration"""

    # Project paths
    BASE_DIR = Path(__file__).resolve().parent.parent
    REPORTS_DIR = Path(os.getenv("REPORTS_DIR", str(BASE_DIR / "reports")))

    # API Configuration
    API_TITLE = "Respire Intervention Simulator API"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = "Explore urban policy interventions and their projected effect on air quality"
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))

    # Report export
    REPORT_TITLE = "Urban Air Quality Report"
    REPORT_FILENAME_PREFIX = "Air_Quality_Report"
    REPORT_EXTENSION = "pdf"

    # Label attached to every simulation result
    DATA_SOURCE_LABEL = "Urban Planning Simulation"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS Settings (for frontend), comma-separated in the environment
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173",
        ).split(",")
        if origin.strip()
    ]

    @classmethod
    def create_directories(cls):
        """Create necessary directories if they don't exist"""
        cls.REPORTS_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def validate_config(cls):
        """Validate configuration and return warnings about suspicious values"""
        warnings = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            warnings.append(f"LOG_LEVEL '{cls.LOG_LEVEL}' is not a logging level - falling back to INFO")

        if "*" in cls.CORS_ORIGINS:
            warnings.append("CORS_ORIGINS contains '*' - any origin may call the API")

        return warnings

    @classmethod
    def log_level(cls) -> int:
        """Numeric logging level, INFO when LOG_LEVEL is not recognised"""
        level = logging.getLevelName(cls.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


# Create singleton instance
settings = Settings()
