import os

from dotenv import load_dotenv

from deckscore.config import AnalyzerSettings

load_dotenv()

PROJECT_NAME: str = 'deckscore'

CORS_ORIGINS = [origin.strip() for origin in os.getenv('CORS_ORIGINS', '*').split(',') if origin.strip()]

SETTINGS = AnalyzerSettings.from_env(dotenv=False)
