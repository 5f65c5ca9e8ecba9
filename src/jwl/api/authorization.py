"""Credential variants and how they are attached to outgoing requests."""

from dataclasses import dataclass, field
from typing import Union

import requests
from requests.auth import HTTPBasicAuth


@dataclass(frozen=True)
class ApiToken:
    """Username plus API token, sent as HTTP Basic credentials."""

    username: str
    api_token: str = field(repr=False)


@dataclass(frozen=True)
class AccessToken:
    """Personal access token, sent as a bearer token."""

    access_token: str = field(repr=False)


Authorization = Union[ApiToken, AccessToken]


def authorize(request: requests.Request, authorization: Authorization) -> requests.Request:
    """Attach the credentials of ``authorization`` to ``request``.

    Args:
        request: Unprepared request to authenticate
        authorization: Credentials to apply

    Returns:
        The same request object
    """
    if isinstance(authorization, ApiToken):
        request.auth = HTTPBasicAuth(authorization.username, authorization.api_token)
    elif isinstance(authorization, AccessToken):
        request.headers["Authorization"] = f"Bearer {authorization.access_token}"
    else:
        raise TypeError(f"Unsupported authorization: {type(authorization).__name__}")
    return request
