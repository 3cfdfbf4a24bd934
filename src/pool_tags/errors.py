"""
Pool Tags - error taxonomy
"""


class PoolTagsError(Exception):
    """Base class for every failure raised while building pool tags"""


class UnsupportedNetwork(PoolTagsError, ValueError):
    def __init__(self, network_id: str):
        self.network_id = network_id
        super().__init__(f"Invalid or unsupported network id: {network_id!r}")


class UnsupportedAuthMode(PoolTagsError):
    def __init__(self):
        super().__init__("Querying the decentralized network with an API key is not supported")


class TransportFailure(PoolTagsError):
    def __init__(self, url: str, status: int | None, reason: str | None):
        self.url = url
        self.status = status
        self.reason = reason
        detail = " ".join(str(p) for p in (status, reason) if p is not None)
        super().__init__(f"Request to {url} failed: {detail}")


class MalformedResponse(PoolTagsError):
    """Response body did not carry the expected data.pools shape"""


class ConfigError(PoolTagsError, ValueError):
    """Settings file or environment held an invalid value"""
