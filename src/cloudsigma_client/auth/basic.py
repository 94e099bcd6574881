"""Username and password (HTTP Basic) credentials."""

from __future__ import annotations

import dataclasses
from collections.abc import MutableMapping
from dataclasses import dataclass

from ..exceptions import CredentialsError
from .base import CredentialsProvider

USERNAME_PASSWORD_CREDENTIALS_NAME = "UsernamePasswordCredentials"


@dataclass(slots=True, frozen=True)
class UsernamePasswordCredentials:
    """Account email and password."""

    username: str
    password: str
    source: str = USERNAME_PASSWORD_CREDENTIALS_NAME

    def apply(self, headers: MutableMapping[str, str]) -> None:
        from requests.auth import _basic_auth_str

        headers["Authorization"] = _basic_auth_str(self.username, self.password)


class UsernamePasswordCredentialsProvider(CredentialsProvider):
    """Serve a fixed username and password."""

    def __init__(self, username: str, password: str) -> None:
        self.value = UsernamePasswordCredentials(username=username, password=password)

    def retrieve(self) -> UsernamePasswordCredentials:
        value = self.value
        if not value.username:
            raise CredentialsError("username must not be empty")
        if not value.password:
            raise CredentialsError("password must not be empty")
        if not value.source:
            value = dataclasses.replace(value, source=USERNAME_PASSWORD_CREDENTIALS_NAME)
        return value
