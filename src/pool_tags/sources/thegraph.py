from typing import Dict, Any, Optional
from ..http_client import post_json

async def graph_query(url: str, query: str, variables: Dict[str, Any] | None = None,
                      timeout: Optional[float] = None):
    return await post_json(url, {"query": query, "variables": variables or {}}, timeout=timeout)
