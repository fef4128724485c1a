import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://backend.test/api"),
    "timeout": 1.0,
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
