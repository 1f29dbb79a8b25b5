# backend/config.py
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the backend directory or the project root
env_path = Path(__file__).parent / '.env'
if not env_path.exists():
    env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


class Config:
    APP_NAME = os.environ.get('APP_NAME', 'QuickSplit')
    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    DEBUG = os.environ.get('DEBUG', 'false').lower() in ('1', 'true', 'yes')
    PORT = int(os.environ.get('PORT', 5000))
