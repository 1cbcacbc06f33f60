import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def _database_uri():
    uri = os.getenv('DATABASE_URI')
    if uri:
        return uri
    return URL.create(
        'mysql+pymysql',
        username=os.getenv('DB_USER', 'root'),
        password=os.getenv('DB_PASSWORD', ''),
        host=os.getenv('DB_HOST', 'localhost'),
        database=os.getenv('DB_NAME', 'scholarship_db'),
    ).render_as_string(hide_password=False)


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'supersecretkey')
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Record store timeouts (seconds), applied to MySQL connections only
    DB_CONNECT_TIMEOUT = int(os.getenv('DB_CONNECT_TIMEOUT', 5))
    DB_QUERY_TIMEOUT = int(os.getenv('DB_QUERY_TIMEOUT', 10))
    # Lookup API used by the tracking page; never derived from request headers
    TRACKING_API_URL = os.getenv('TRACKING_API_URL', 'http://127.0.0.1:5000')
    TRACKING_TIMEOUT = float(os.getenv('TRACKING_TIMEOUT', 10))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
