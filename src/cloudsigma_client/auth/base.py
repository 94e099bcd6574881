"""Base abstractions for credentials providers."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from . import Credentials


class CredentialsProvider(ABC):
    """Interface each credentials source must implement.

    ``retrieve`` is called once for every outgoing request, so a provider
    whose secret is replaced picks up the new value on the next call.
    """

    @abstractmethod
    def retrieve(self) -> Credentials:
        """Return validated credentials or raise `CredentialsError`."""
