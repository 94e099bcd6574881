"""High-level CloudSigma client entrypoints."""
from .auth import TokenCredentialsProvider, UsernamePasswordCredentialsProvider
from .client import CloudSigmaClient
from .config import ClientConfig
from .context import Context
from .exceptions import CloudSigmaError, ResponseError
from .http import RawSink, Response
from .options import ListOptions
from .version import __version__

__all__ = [
    "CloudSigmaClient",
    "ClientConfig",
    "CloudSigmaError",
    "Context",
    "ListOptions",
    "RawSink",
    "Response",
    "ResponseError",
    "TokenCredentialsProvider",
    "UsernamePasswordCredentialsProvider",
    "__version__",
]
