import os


class Config:
    """Base configuration"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///leagues.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Blueprint prefix for the league/team endpoints ('' mounts them at the root)
    API_PREFIX = os.environ.get('API_PREFIX', '')

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '200 per minute')
    RATELIMIT_STORAGE_URI = 'memory://'


class DevelopmentConfig(Config):
    """Local development"""
    DEBUG = True


class TestingConfig(Config):
    """Test runs use an in-memory document store"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RATELIMIT_ENABLED = False


class ProductionConfig(Config):
    """Production deployment"""
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}
