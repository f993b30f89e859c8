"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants import RECIPES_PER_SET as DEFAULT_RECIPES_PER_SET

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///pantry_chef.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Upload settings
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'static', 'recipe-images'))
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max upload

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Search results shown per set (exact and related each)
    RECIPES_PER_SET = int(os.environ.get('RECIPES_PER_SET', DEFAULT_RECIPES_PER_SET))

    # Placeholder until real authentication exists
    DEFAULT_USER_ID = os.environ.get('DEFAULT_USER_ID', 'user123')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RECIPES_PER_SET = DEFAULT_RECIPES_PER_SET
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
