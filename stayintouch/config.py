# stayintouch/config.py
import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'stay-in-touch-secret')
    MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017/stayintouch-dev')

    # Seed database on startup
    SEED_DB = os.getenv('SEED_DB', 'true').lower() == 'true'

    # Default region used to interpret phone numbers without a country code
    PHONE_REGION = os.getenv('PHONE_REGION', 'US')

    # Logging configuration
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'true').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    MONGO_URI = 'mongodb://localhost:27017/stayintouch-test'
    SEED_DB = False
    LOG_TO_FILE = False


class ScriptConfig(Config):
    """Used by maintenance scripts, which must never reseed on startup."""
    SEED_DB = False
