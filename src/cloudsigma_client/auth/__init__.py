"""Credentials and credentials providers for CloudSigma."""
from typing import Union

from .base import CredentialsProvider
from .basic import (
    USERNAME_PASSWORD_CREDENTIALS_NAME,
    UsernamePasswordCredentials,
    UsernamePasswordCredentialsProvider,
)
from .token import TOKEN_CREDENTIALS_NAME, TokenCredentials, TokenCredentialsProvider

Credentials = Union[UsernamePasswordCredentials, TokenCredentials]

__all__ = [
    "Credentials",
    "CredentialsProvider",
    "TOKEN_CREDENTIALS_NAME",
    "TokenCredentials",
    "TokenCredentialsProvider",
    "USERNAME_PASSWORD_CREDENTIALS_NAME",
    "UsernamePasswordCredentials",
    "UsernamePasswordCredentialsProvider",
]
