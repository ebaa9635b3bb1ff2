"""
HTTP helpers for the NemLager API.

ApiClient.get/post build a request against config.base_url + path, let the
caller mutate it (headers), send it with the configured timeout and decode
the JSON response into a caller-supplied target.

Both return an ApiResult carrying the status code and the error, so tests can
assert on each independently:

    with ApiClient(config) as api:
        result = api.get("/api/v1/settings", Envelope[V1CustomerSetting])
        assert result.status == 401
        assert result.error is not None
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Optional, Type

import requests
from pydantic import BaseModel, ValidationError

from .config import ApiConfig
from .errors import ApiError, DecodeError, HttpStatusError, RequestTimeoutError, TransportError
from .models import ErrorEnvelope

Mutator = Callable[[requests.Request], requests.Request]


# ============================================
# Header mutators
# ============================================

def unchanged(request: requests.Request) -> requests.Request:
    return request


def with_header(name: str, value: str) -> Mutator:
    """Mutator setting a single header."""
    def mutate(request):
        request.headers[name] = value
        return request
    return mutate


def json_content(request: requests.Request) -> requests.Request:
    request.headers["Content-Type"] = "application/json"
    return request


def user_auth(jwt: str) -> Mutator:
    """Authorization for user-scoped endpoints: 'bearer <jwt>'."""
    return with_header("Authorization", f"bearer {jwt}")


def cron_auth(secret: str) -> Mutator:
    """Authorization for cron endpoints: 'Bearer <secret>'. An empty secret sends just 'Bearer'."""
    return with_header("Authorization", f"Bearer {secret}" if secret else "Bearer")


def chain(*mutators: Mutator) -> Mutator:
    """Apply several mutators in order."""
    def mutate(request):
        for mutator in mutators:
            request = mutator(request)
        return request
    return mutate


# ============================================
# Results
# ============================================

@dataclass
class ApiResult:
    """
    Outcome of one API call.

    status is None when no response was received (transport failure or
    timeout); error then describes why.
    """
    status: Optional[int]
    data: Any = None
    error: Optional[ApiError] = None
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        """Return the decoded data or raise the call's error."""
        if self.error is not None:
            raise self.error
        return self.data


class ApiClient:
    """Client for the NemLager API, one HTTP session per instance."""

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self):
        self.session.close()

    def get(self, path: str, target: Optional[Type[BaseModel]] = None, mutate: Optional[Mutator] = None) -> ApiResult:
        return self.request("GET", path, target=target, mutate=mutate)

    def post(self, path: str, body: Any = None, target: Optional[Type[BaseModel]] = None,
             mutate: Optional[Mutator] = None) -> ApiResult:
        return self.request("POST", path, body=body, target=target, mutate=mutate)

    def request(self, method: str, path: str, body: Any = None, target: Optional[Type[BaseModel]] = None,
                mutate: Optional[Mutator] = None) -> ApiResult:
        """
        Send one request and decode the response.

        Args:
            method: HTTP method
            path: Path (and query) appended to the base URL
            body: None, raw bytes/str, or a JSON-serializable object
                  (pydantic models are dumped with their JSON aliases)
            target: pydantic model validated against the JSON body on success;
                    None skips decoding (e.g. 204 responses)
            mutate: Called with the request before it is sent

        Returns:
            ApiResult with status, decoded data and error
        """
        url = self.config.url(path)
        request = requests.Request(method, url, data=_encode_body(body))
        request = (mutate or unchanged)(request)

        try:
            prepared = self.session.prepare_request(request)
            response = self.session.send(prepared, timeout=self.config.timeout)
        except requests.Timeout as e:
            return ApiResult(status=None, error=RequestTimeoutError(
                f"Timed out after {self.config.timeout}s on {method} '{url}': {e}"))
        except requests.RequestException as e:
            return ApiResult(status=None, error=TransportError(f"Error during {method} '{url}': {e}"))

        status = response.status_code
        content = response.content

        if status >= 400:
            return ApiResult(status=status, error=_decode_error(response), content=content)

        if target is None:
            return ApiResult(status=status, content=content)

        try:
            payload = response.json()
        except ValueError as e:
            return ApiResult(status=status, content=content,
                             error=DecodeError(f"Invalid JSON in response from '{url}': {e}", status))

        try:
            data = target.model_validate(payload)
        except ValidationError as e:
            return ApiResult(status=status, content=content,
                             error=DecodeError(f"Unexpected response shape from '{url}': {e}", status))

        return ApiResult(status=status, data=data, content=content)


def _encode_body(body: Any):
    if body is None or isinstance(body, (bytes, str)):
        return body
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True).encode("utf-8")
    return json.dumps(body).encode("utf-8")


def _decode_error(response: requests.Response) -> ApiError:
    """Turn an error response into HttpStatusError, or DecodeError if the body isn't JSON."""
    try:
        envelope = ErrorEnvelope.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        return DecodeError(f"Could not decode error body (status {response.status_code}): {e}",
                           response.status_code)
    return HttpStatusError(response.status_code, envelope.message(default=response.reason or ""))
