"""
Contract tags for every pool created on a network's Balancer V2 pool factory
"""

from enum import Enum
from typing import List, Optional

from loguru import logger

from ..errors import UnsupportedAuthMode
from ..models import ContractTag, Pool
from ..registry import subgraph_url
from ..sources.balancer_subgraph import PAGE_SIZE, fetch_pool_page

MAX_NAME_LENGTH = 45


class AccessMode(Enum):
    """How the pools subgraph is reached"""
    HOSTED = "hosted"
    DECENTRALIZED_UNSUPPORTED = "decentralized_unsupported"

    @classmethod
    def from_api_key(cls, api_key: Optional[str]) -> "AccessMode":
        return cls.HOSTED if api_key is None else cls.DECENTRALIZED_UNSUPPORTED


def truncate(text: str, limit: int = MAX_NAME_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."


def transform(network_id: str, pool: Pool) -> ContractTag:
    symbols = "/".join(t.symbol for t in pool.tokens)
    names = ", ".join(t.name for t in pool.tokens)
    return ContractTag(
        contract_address=f"eip155:{network_id}:{pool.address}",
        public_name_tag=f"{truncate(symbols)} Pool",
        public_note=f"A Balancer pool containing the tokens: {names}.",
    )


async def fetch_tags(network_id: str, mode: AccessMode = AccessMode.HOSTED,
                     timeout: Optional[float] = None) -> List[ContractTag]:
    if mode is not AccessMode.HOSTED:
        raise UnsupportedAuthMode()
    url = subgraph_url(network_id)

    tags: List[ContractTag] = []
    last_timestamp = 0
    more = True
    while more:
        pools = await fetch_pool_page(url, last_timestamp, timeout=timeout)
        logger.debug(f"network {network_id}: {len(pools)} pools after createTime {last_timestamp}")
        tags.extend(transform(network_id, p) for p in pools)
        more = len(pools) == PAGE_SIZE
        if more:
            # createTime is not unique; pools sharing the boundary timestamp are skipped
            last_timestamp = pools[-1].createTime

    logger.info(f"network {network_id}: {len(tags)} pool tags")
    return tags


async def return_tags(network_id: str, api_key: Optional[str] = None,
                      timeout: Optional[float] = None) -> List[ContractTag]:
    return await fetch_tags(network_id, AccessMode.from_api_key(api_key), timeout=timeout)
