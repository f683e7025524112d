"""
Application Configuration

Flask, database and ingredient search settings, selected by FLASK_ENV.
Search limits can be overridden through environment variables.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except (ValueError, TypeError):
        return default


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'ingredients.db'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Ingredient search settings
    INGREDIENT_SEARCH_TIMEOUT = _env_int('INGREDIENT_SEARCH_TIMEOUT', 60)  # seconds
    INGREDIENT_SEARCH_BATCH_SIZE = _env_int('INGREDIENT_SEARCH_BATCH_SIZE', 5)
    INGREDIENT_MAX_CANDIDATES = _env_int('INGREDIENT_MAX_CANDIDATES', 3)

    # Empty = search routes are open; otherwise require "Authorization: Bearer <token>"
    SEARCH_API_TOKEN = os.environ.get('SEARCH_API_TOKEN', '')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SEARCH_API_TOKEN = ''
    LOG_LEVEL = 'WARNING'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
