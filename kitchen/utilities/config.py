"""Configuration management for the Kitchen OS service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from kitchen.utilities import constants

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Suggestion window for the ingredient search endpoint
SUGGESTION_LIMIT: Final[int] = int(os.getenv('SUGGESTION_LIMIT', str(constants.SUGGESTION_LIMIT)))
