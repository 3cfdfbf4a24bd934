"""
Pool Tags - contract tags for Balancer V2 pools, one record per pool
"""

from .errors import (
    PoolTagsError,
    ConfigError,
    UnsupportedNetwork,
    UnsupportedAuthMode,
    TransportFailure,
    MalformedResponse,
)
from .models import ContractTag, Pool, PoolToken
from .pipelines.contract_tags import AccessMode, fetch_tags, return_tags, transform

__version__ = "0.1.0"

__all__ = [
    "AccessMode",
    "ConfigError",
    "ContractTag",
    "MalformedResponse",
    "Pool",
    "PoolToken",
    "PoolTagsError",
    "TransportFailure",
    "UnsupportedAuthMode",
    "UnsupportedNetwork",
    "fetch_tags",
    "return_tags",
    "transform",
]
