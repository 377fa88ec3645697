"""Domain endpoints.

Each module groups the operations of one API area. They describe path,
method, body and query only; dispatch is the gateway's job.
"""

from adapters.endpoints.auth import AuthApi
from adapters.endpoints.health import HealthApi
from adapters.endpoints.imports import ImportApi
from adapters.endpoints.sharing import SharingApi
from adapters.endpoints.twofa import TwoFactorApi
from adapters.endpoints.vault import VaultApi

__all__ = [
	"AuthApi",
	"HealthApi",
	"ImportApi",
	"SharingApi",
	"TwoFactorApi",
	"VaultApi",
]
