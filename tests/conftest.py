"""Test configuration shared by the whole suite."""

import os
from pathlib import Path

# Configuration is loaded when src.catalog.runtime.context is first imported,
# so the database variables must be in place before any test module imports it.
os.environ.update(
    {
        "DIALECT": "sqlite",
        "HOST": "localhost",
        "DBPORT": "5432",
        "USER": "catalog",
        "NAME": ":memory:",
        "PASSWORD": "catalog",
        "APP_ENVIRONMENT": "test",
        "APP_CONFIG_FILE": str(Path(__file__).resolve().parent.parent / "config.yaml"),
    }
)

from tests.fixtures import *  # noqa: E402,F401,F403
