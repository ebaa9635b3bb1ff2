"""
Configuration for the NemLager API harness.

Settings come from a local env file with one key=value pair per line:

    baseUrl=https://api.example.test
    email=a@b.co
    password=x
    cronSecret=s3cr3t

Keys missing from the file are read from process environment variables of the
same name. The environment is only read, never written; the resulting
ApiConfig is passed explicitly to ApiClient.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Mapping, Optional

from .errors import EnvFileError

# ============================================
# Defaults
# ============================================

DEFAULT_ENV_FILE = ".env"

# Per-request timeout in seconds
TIMEOUT = 10.0

REQUIRED_KEYS = ("baseUrl", "email", "password", "cronSecret")


def load_env_file(path) -> Dict[str, str]:
    """
    Parse a key=value env file.

    Blank lines are skipped. Each other line is split on the first '='; the
    value keeps everything after it verbatim (no quoting, no comments).

    Raises:
        EnvFileError: if the file cannot be read or a line has no '='.
    """
    env_path = Path(path)
    try:
        data = env_path.read_text(encoding="utf-8")
    except OSError as e:
        raise EnvFileError(f"Error reading environment file {env_path}: {e}") from e

    values = {}
    for i, line in enumerate(data.splitlines()):
        if not line.strip():
            continue
        if "=" not in line:
            raise EnvFileError(f"Invalid env line at #{i + 1} in {env_path}")
        key, value = line.split("=", 1)
        values[key] = value
    return values


@dataclass(frozen=True)
class ApiConfig:
    """Everything a client needs to reach and authenticate against the API."""
    base_url: str
    email: str
    password: str
    cron_secret: str
    timeout: float = TIMEOUT

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.timeout <= 0:
            raise EnvFileError(f"Timeout must be positive, got {self.timeout}")

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def with_overrides(self, base_url: Optional[str] = None, timeout: Optional[float] = None) -> "ApiConfig":
        """Return a copy with CLI overrides applied."""
        changes = {}
        if base_url:
            changes["base_url"] = base_url.rstrip("/")
        if timeout is not None:
            changes["timeout"] = timeout
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], environ: Optional[Mapping[str, str]] = None) -> "ApiConfig":
        """
        Build a config from parsed env values.

        Keys absent from `values` fall back to `environ` (os.environ by
        default). All missing required keys are reported together.
        """
        if environ is None:
            environ = os.environ

        merged = {}
        for key in REQUIRED_KEYS + ("timeout",):
            value = values.get(key)
            if value is None:
                value = environ.get(key)
            if value is not None:
                merged[key] = value

        missing = [key for key in REQUIRED_KEYS if not merged.get(key)]
        if missing:
            raise EnvFileError(f"Missing required configuration keys: {', '.join(missing)}")

        timeout = TIMEOUT
        if merged.get("timeout"):
            try:
                timeout = float(merged["timeout"])
            except ValueError:
                raise EnvFileError(f"Invalid timeout value: {merged['timeout']!r}") from None

        return cls(
            base_url=merged["baseUrl"],
            email=merged["email"],
            password=merged["password"],
            cron_secret=merged["cronSecret"],
            timeout=timeout,
        )

    @classmethod
    def load(cls, path=DEFAULT_ENV_FILE, environ: Optional[Mapping[str, str]] = None) -> "ApiConfig":
        """Load config from an env file, falling back to the environment for absent keys."""
        return cls.from_mapping(load_env_file(path), environ=environ)

    def __repr__(self):
        # Keep credentials out of test output
        return (
            f"ApiConfig(base_url={self.base_url!r}, email={self.email!r}, "
            f"password='***', cron_secret='***', timeout={self.timeout})"
        )
