from .config import EkispertConfig
from .http_ekispert_client import HttpEkispertClient

__all__ = [
    "EkispertConfig",
    "HttpEkispertClient",
]
