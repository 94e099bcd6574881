"""Bearer token credentials."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

from ..exceptions import CredentialsError
from .base import CredentialsProvider

TOKEN_CREDENTIALS_NAME = "TokenCredentials"


@dataclass(slots=True, frozen=True)
class TokenCredentials:
    """An already issued access token."""

    token: str
    source: str = TOKEN_CREDENTIALS_NAME

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = f"Bearer {self.token}"


class TokenCredentialsProvider(CredentialsProvider):
    """Serve an access token; replace it with `update_token` to rotate."""

    def __init__(self, token: str) -> None:
        self.value = TokenCredentials(token=token)

    def retrieve(self) -> TokenCredentials:
        if not self.value.token:
            raise CredentialsError("token must not be empty")
        return self.value

    def update_token(self, token: str) -> None:
        self.value = TokenCredentials(token=token)
