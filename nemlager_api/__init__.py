"""
NemLager API test harness.

- config.py: env file loader and ApiConfig
- client.py: ApiClient get/post helpers, header mutators, ApiResult
- auth.py: sign-in
- models.py: envelope and payload decoders
- errors.py: error taxonomy
- checks.py: non-fatal assertions
- console.py: colored console output
- runner.py: sequential runner for the live suites in tests/api
"""

from .auth import authenticate, sign_in
from .client import ApiClient, ApiResult, cron_auth, json_content, user_auth
from .config import ApiConfig, load_env_file
from .errors import (
    ApiError,
    DecodeError,
    EnvFileError,
    HttpStatusError,
    RequestTimeoutError,
    TransportError,
)
from .models import Envelope

__version__ = "0.1.0"
