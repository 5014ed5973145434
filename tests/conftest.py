"""Root conftest: shared test configuration."""

import os

# Ensure tests never point at a real database
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017/user_api_test")
os.environ.setdefault("LOG_FORMAT", "text")
