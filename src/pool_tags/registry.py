"""
Network Registry - hosted Balancer V2 subgraph endpoint per chain id
"""

from types import MappingProxyType
from typing import Mapping

from .errors import UnsupportedNetwork

HOSTED = "https://api.thegraph.com/subgraphs/name/balancer-labs"

SUBGRAPH_URLS: Mapping[str, str] = MappingProxyType({
    "1": f"{HOSTED}/balancer-v2",
    "10": f"{HOSTED}/balancer-optimism-v2",
    "100": f"{HOSTED}/balancer-gnosis-chain-v2",
    "137": f"{HOSTED}/balancer-polygon-v2",
    "1101": f"{HOSTED}/balancer-polygon-zkevm-v2",
    "8453": "https://api.studio.thegraph.com/query/24660/balancer-base-v2/version/latest",
    "42161": f"{HOSTED}/balancer-arbitrum-v2",
    "43114": f"{HOSTED}/balancer-avalanche-v2",
})


def supported_networks() -> list[str]:
    return sorted(SUBGRAPH_URLS, key=int)


def subgraph_url(network_id: str) -> str:
    """Endpoint for `network_id`; the id must be listed and decimal."""
    url = SUBGRAPH_URLS.get(network_id)
    if url is None or not network_id.isdecimal():
        raise UnsupportedNetwork(network_id)
    return url
