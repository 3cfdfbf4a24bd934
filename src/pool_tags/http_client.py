import json
import asyncio
import aiohttp
from loguru import logger
from typing import Optional, Dict, Any
from contextlib import asynccontextmanager

from .errors import MalformedResponse, TransportFailure

DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=15)
JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

@asynccontextmanager
async def http_session(timeout: Optional[float] = None):
    client_timeout = aiohttp.ClientTimeout(total=timeout) if timeout else DEFAULT_TIMEOUT
    async with aiohttp.ClientSession(timeout=client_timeout) as s:
        yield s

async def _read_json(url: str, r: aiohttp.ClientResponse) -> Any:
    try:
        return await r.json()
    except (aiohttp.ContentTypeError, json.JSONDecodeError) as e:
        raise MalformedResponse(f"Non-JSON response from {url}: {e}") from e

async def post_json(url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None,
                    timeout: Optional[float] = None) -> Any:
    try:
        async with http_session(timeout) as s:
            async with s.post(url, json=payload, headers={**JSON_HEADERS, **(headers or {})}) as r:
                if not r.ok:
                    logger.debug(f"POST {url} -> {r.status} {r.reason}")
                    raise TransportFailure(url, r.status, r.reason)
                return await _read_json(url, r)
    except asyncio.TimeoutError as e:
        raise TransportFailure(url, None, "timed out") from e
    except aiohttp.ClientError as e:
        logger.debug(f"POST {url} -> {type(e).__name__}: {e}")
        raise TransportFailure(url, None, str(e) or type(e).__name__) from e
