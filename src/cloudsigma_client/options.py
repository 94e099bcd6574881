"""Query options shared by list operations."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode, urlsplit, urlunsplit


@dataclass(slots=True, frozen=True)
class ListOptions:
    """Offset pagination for list operations.

    ``limit=0`` asks the API for every object, so ``limit`` is always sent.
    ``offset`` is zero based and only sent when set.
    """

    limit: int = 0
    offset: int = 0

    def to_query_params(self) -> list[tuple[str, str]]:
        params = [("limit", str(self.limit))]
        if self.offset:
            params.append(("offset", str(self.offset)))
        return params


def add_options(path: str, options: ListOptions | None) -> str:
    """Return ``path`` with its query replaced by the encoded ``options``."""

    if options is None:
        return path
    parts = urlsplit(path)
    return urlunsplit(parts._replace(query=urlencode(options.to_query_params())))
