"""
pytest fixtures for the live API suites.

The config is loaded once per session from NEMLAGER_ENV_FILE (default .env at
the repository root), falling back to environment variables. Without either,
the live suites are skipped. A malformed env file is an error, not a skip.
"""

import os
from pathlib import Path

import pytest

from nemlager_api.client import ApiClient
from nemlager_api.config import DEFAULT_ENV_FILE, ApiConfig
from nemlager_api.console import log_skip
from nemlager_api.errors import EnvFileError
from nemlager_api.runner import setup_test

ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(scope="session")
def api_config() -> ApiConfig:
    env_file = Path(os.environ.get("NEMLAGER_ENV_FILE", ROOT / DEFAULT_ENV_FILE))
    # A present but malformed env file fails the run
    if env_file.exists():
        return ApiConfig.load(env_file)
    try:
        return ApiConfig.from_mapping({})
    except EnvFileError as e:
        log_skip("Live API suites", str(e))
        pytest.skip(f"Live API not configured: {e}")


@pytest.fixture
def api(api_config) -> ApiClient:
    client, teardown = setup_test(api_config)
    yield client
    teardown()
