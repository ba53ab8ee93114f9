# api/utils/config.py
import os
import logging

logger = logging.getLogger("panel_planner.api")

class Config:
    """Application configuration loaded from environment variables"""
    
    # API authentication
    API_KEY = os.environ.get("API_KEY", "dev_key")
    
    # Application settings
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    
    @classmethod
    def validate(cls):
        """Validate critical configuration values"""
        if not cls.API_KEY or cls.API_KEY == "dev_key":
            logger.warning("Using development API key - not secure for production!")
            
        if cls.ENVIRONMENT == "production" and cls.DEBUG:
            logger.warning("DEBUG is enabled in production")
