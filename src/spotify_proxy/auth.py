"""Client-credentials token exchange against the Spotify accounts service."""

import base64
import logging

import httpx

from spotify_proxy.constants import CLIENT_CREDENTIALS_GRANT, DEFAULT_REQUEST_TIMEOUT, SPOTIFY_TOKEN_URL
from spotify_proxy.exceptions import ApiError

logger = logging.getLogger(__name__)

TOKEN_ERROR_MESSAGE = "Failed to get access token"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """Return the ``Authorization`` value for HTTP Basic client authentication."""
    credentials = f"{client_id}:{client_secret}"
    return "Basic " + base64.b64encode(credentials.encode()).decode()


async def get_access_token(
    client_id: str,
    client_secret: str,
    *,
    token_url: str = SPOTIFY_TOKEN_URL,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> str:
    """Exchange client credentials for a short-lived bearer token.

    The token is not cached; callers request a new one when it expires.

    Raises:
        ValueError: If either credential is empty.
        ApiError: If the request fails, Spotify answers with a non-2xx status,
            or the response carries no ``access_token``.
    """
    if not client_id or not client_secret:
        raise ValueError("Spotify credentials not configured")

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(
                token_url,
                headers={
                    "Authorization": basic_auth_header(client_id, client_secret),
                    "Content-Type": "application/x-www-form-urlencoded",
                },
                data={"grant_type": CLIENT_CREDENTIALS_GRANT},
            )
    except httpx.HTTPError as exc:
        logger.warning("Token request failed: %s", exc)
        raise ApiError(TOKEN_ERROR_MESSAGE) from exc

    if not response.is_success:
        logger.warning("Token request rejected: HTTP %d", response.status_code)
        raise ApiError(TOKEN_ERROR_MESSAGE, status_code=response.status_code)

    try:
        access_token = response.json()["access_token"]
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("Token response did not contain an access_token")
        raise ApiError(TOKEN_ERROR_MESSAGE, status_code=response.status_code) from exc

    if not isinstance(access_token, str) or not access_token:
        raise ApiError(TOKEN_ERROR_MESSAGE, status_code=response.status_code)
    return access_token
