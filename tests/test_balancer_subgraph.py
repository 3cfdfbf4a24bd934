"""
Balancer subgraph page fetch and transport tests
"""

import asyncio
import json

import aiohttp
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from pool_tags.errors import MalformedResponse, TransportFailure
from pool_tags.http_client import post_json
from pool_tags.sources.balancer_subgraph import fetch_pool_page

URL = "https://api.thegraph.com/subgraphs/name/balancer-labs/balancer-v2"
GRAPH_QUERY = "pool_tags.sources.balancer_subgraph.graph_query"


def mock_session(status=200, reason="OK", body=None, json_error=None, post_error=None):
    """aiohttp.ClientSession stand-in whose post() yields a single response"""
    response = MagicMock(ok=status < 400, status=status, reason=reason)
    response.json = AsyncMock(return_value=body, side_effect=json_error)

    post_ctx = MagicMock()
    post_ctx.__aenter__ = AsyncMock(return_value=response)
    post_ctx.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.post = MagicMock(return_value=post_ctx, side_effect=post_error)

    session_ctx = MagicMock()
    session_ctx.__aenter__ = AsyncMock(return_value=session)
    session_ctx.__aexit__ = AsyncMock(return_value=False)
    return session_ctx, session


class TestFetchPoolPage:

    @pytest.mark.asyncio
    async def test_parses_pools(self):
        body = {"data": {"pools": [
            {"address": "0xa", "createTime": 5, "tokens": [{"symbol": "X", "name": "Ex"}]},
        ]}}
        with patch(GRAPH_QUERY, new=AsyncMock(return_value=body)):
            pools = await fetch_pool_page(URL, 0)
        assert len(pools) == 1
        assert pools[0].address == "0xa"
        assert pools[0].createTime == 5
        assert pools[0].tokens[0].symbol == "X"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        None,
        [],
        {},
        {"data": None},
        {"data": {}},
        {"errors": [{"message": "indexing error"}]},
        {"data": {"pools": [{"address": "0xa"}]}},
        {"data": {"pools": [{"address": "0xa", "createTime": "soon", "tokens": []}]}},
    ])
    async def test_malformed_bodies(self, body):
        with patch(GRAPH_QUERY, new=AsyncMock(return_value=body)):
            with pytest.raises(MalformedResponse):
                await fetch_pool_page(URL, 0)


class TestPostJson:

    @pytest.mark.asyncio
    async def test_posts_json_with_headers(self):
        session_ctx, session = mock_session(body={"data": {"pools": []}})
        payload = {"query": "{ pools { address } }", "variables": {"lastTimestamp": 0}}
        with patch("pool_tags.http_client.aiohttp.ClientSession", return_value=session_ctx):
            result = await post_json(URL, payload)

        assert result == {"data": {"pools": []}}
        args, kwargs = session.post.call_args
        assert args[0] == URL
        assert kwargs["json"] == payload
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["headers"]["Accept"] == "application/json"
        assert "Authorization" not in kwargs["headers"]

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        session_ctx, _ = mock_session(status=500, reason="Internal Server Error")
        with patch("pool_tags.http_client.aiohttp.ClientSession", return_value=session_ctx):
            with pytest.raises(TransportFailure) as exc:
                await post_json(URL, {"query": "{}"})

        err = exc.value
        assert err.url == URL
        assert err.status == 500
        assert err.reason == "Internal Server Error"
        assert URL in str(err) and "500" in str(err) and "Internal Server Error" in str(err)

    @pytest.mark.asyncio
    async def test_timeout_override(self):
        session_ctx, _ = mock_session(body={})
        with patch("pool_tags.http_client.aiohttp.ClientSession", return_value=session_ctx) as cls:
            await post_json(URL, {"query": "{}"}, timeout=3)
        assert cls.call_args.kwargs["timeout"].total == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("json_error", [
        aiohttp.ContentTypeError(MagicMock(), (), message="Attempt to decode JSON with unexpected mimetype: text/html"),
        json.JSONDecodeError("Expecting value", "<html>", 0),
    ])
    async def test_non_json_body_is_malformed(self, json_error):
        session_ctx, _ = mock_session(json_error=json_error)
        with patch("pool_tags.http_client.aiohttp.ClientSession", return_value=session_ctx):
            with pytest.raises(MalformedResponse) as exc:
                await post_json(URL, {"query": "{}"})
        assert exc.value.__cause__ is json_error

    @pytest.mark.asyncio
    async def test_connection_error_is_transport_failure(self):
        session_ctx, _ = mock_session(post_error=aiohttp.ClientConnectionError("Cannot connect to host"))
        with patch("pool_tags.http_client.aiohttp.ClientSession", return_value=session_ctx):
            with pytest.raises(TransportFailure) as exc:
                await post_json(URL, {"query": "{}"})
        assert exc.value.url == URL
        assert exc.value.status is None
        assert "Cannot connect to host" in str(exc.value)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_failure(self):
        session_ctx, _ = mock_session(post_error=asyncio.TimeoutError())
        with patch("pool_tags.http_client.aiohttp.ClientSession", return_value=session_ctx):
            with pytest.raises(TransportFailure) as exc:
                await post_json(URL, {"query": "{}"})
        assert exc.value.status is None
        assert str(exc.value) == f"Request to {URL} failed: timed out"
