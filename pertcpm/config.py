"""
Configuration settings for the PERT/CPM scheduler.
Values come from environment variables, optionally loaded from a .env file.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

# Load environment variables from .env file
env_file = PROJECT_ROOT / '.env'
if env_file.exists():
    load_dotenv(env_file)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_DIR = os.getenv('PERT_LOG_DIR', '')

    # Scheduling
    STRICT_VALIDATION = _as_bool(os.getenv('PERT_STRICT_VALIDATION', 'false'))

    # Web server
    FLASK_HOST = os.getenv('FLASK_HOST', '127.0.0.1')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '5000'))
    FLASK_DEBUG = _as_bool(os.getenv('FLASK_DEBUG', 'true'))


settings = Settings()
