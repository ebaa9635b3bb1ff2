"""
Sign-in helpers.

Every call signs in again; tokens are never cached between test cases.
"""

from .client import ApiClient, json_content
from .errors import ApiError
from .models import AuthData, Envelope

SIGN_IN_PATH = "/api/v1/auth/sign-in"


def sign_in_path(method: str = "pw") -> str:
    return f"{SIGN_IN_PATH}?method={method}"


def credentials(email: str, password: str) -> dict:
    return {"email": email, "password": password}


def authenticate(client: ApiClient, email: str, password: str) -> AuthData:
    """
    Sign in with email/password and return the issued token.

    Raises:
        ApiError: on transport failure, rejected credentials, an undecodable
                  response or an empty token.
    """
    result = client.post(
        sign_in_path("pw"),
        credentials(email, password),
        target=Envelope[AuthData],
        mutate=json_content,
    )
    envelope = result.unwrap()
    if not envelope.data.jwt:
        raise ApiError("Sign-in succeeded but returned an empty jwt", result.status)
    return envelope.data


def sign_in(client: ApiClient) -> AuthData:
    """Authenticate with the credentials from the client's config."""
    return authenticate(client, client.config.email, client.config.password)
