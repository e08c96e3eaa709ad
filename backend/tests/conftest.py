"""Shared pytest configuration.

Settings are cached on first import, so the environment is pinned here,
before any test module imports ``synctool``.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["API_URL"] = "https://sync.example.test"
os.environ["LOG_DIR"] = ""
os.environ["ADMIN_USERNAME"] = ""
os.environ["ADMIN_PASSWORD"] = ""
