import os

from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))


def _split_origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'change-me-for-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'data', 'all_league2.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Custom config
    APP_ENV = os.environ.get('APP_ENV', 'development')
    DATA_DIR = os.environ.get('DATA_DIR') or os.path.join(basedir, 'data')
    CORS_ORIGINS = _split_origins(
        os.environ.get('CORS_ORIGINS', 'http://localhost:3000,http://localhost:3001,http://localhost:8000')
    )
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    CREATE_TABLES = os.environ.get('CREATE_TABLES', '1') not in ('0', 'false', 'False')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    APP_ENV = 'test'
    LOG_LEVEL = 'WARNING'
