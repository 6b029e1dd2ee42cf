"""Test session setup.

The environment is fixed before any application module is imported so the
configuration loaded from config.yaml is the test configuration in every
thread, including the TestClient's event loop thread.
"""

import os

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["JWT_SIGNING_KEY"] = "test-signing-key-0123456789-abcdefghijklmnop"
os.environ["JWT_ISSUER"] = "https://bookstore.test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("LOG_FILE", None)

pytest_plugins = ["tests.fixtures"]
