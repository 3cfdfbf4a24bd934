from typing import List, Optional
from pydantic import ValidationError

from .thegraph import graph_query
from ..errors import MalformedResponse
from ..models import Pool, PoolsPage

PAGE_SIZE = 1000

POOLS_QUERY = """
query GetPools($lastTimestamp: Int) {
  pools(
    first: %d
    orderBy: createTime
    orderDirection: asc
    where: { createTime_gt: $lastTimestamp }
  ) {
    address
    createTime
    tokens {
      symbol
      name
    }
  }
}
"""

async def fetch_pool_page(url: str, last_timestamp: int, timeout: Optional[float] = None) -> List[Pool]:
    """One page of pools created strictly after `last_timestamp`, oldest first."""
    body = await graph_query(url, POOLS_QUERY % PAGE_SIZE, {"lastTimestamp": last_timestamp}, timeout=timeout)
    if not isinstance(body, dict) or body.get("errors") or not isinstance(body.get("data"), dict):
        raise MalformedResponse(f"Unexpected response from {url}: {str(body)[:200]}")
    try:
        return PoolsPage.model_validate(body["data"]).pools
    except ValidationError as e:
        raise MalformedResponse(f"Unexpected pools shape from {url}: {e}") from e
