"""
Flask application configuration.
"""
import os


class Config:
    """Base configuration."""
    HOST = os.environ.get('HOST') or '0.0.0.0'
    PORT = int(os.environ.get('PORT') or 8083)
    LOG_LEVEL = (os.environ.get('LOG_LEVEL') or 'INFO').upper()
    TESTING = False


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Configuration used by the test suite."""
    DEBUG = False
    TESTING = True
