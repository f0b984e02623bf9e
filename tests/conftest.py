"""Root conftest — shared test configuration."""

import os

# Pin settings so a developer's .env / config.json doesn't leak into tests
os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOGGER__LEVEL", "debug")
os.environ.setdefault("LOGGER__FORMAT", "text")
