"""
HTTP Request Example
Part 5: An outbound GET issued asynchronously and waited on

Sync code calling an async aiohttp coroutine through asyncio.run(), so the
caller sees a plain blocking function. Defaults only: no retry, no custom
timeout. Network failures propagate to the caller.

Usage:
    python -m lambda_examples.network
"""

import asyncio
import logging

import aiohttp

from lambda_examples.helpers import debug_calls, timer

logger = logging.getLogger(__name__)

POSTS_URL = "https://jsonplaceholder.typicode.com/posts/1"


@debug_calls
async def fetch_body(url: str) -> str:
    """Async GET returning the response body as text"""
    async with aiohttp.ClientSession() as session:
        async with session.get(url) as response:
            logger.debug(f"GET {url} -> {response.status}")
            return await response.text()


@timer
def http_client_example(url: str = POSTS_URL) -> str:
    body = asyncio.run(fetch_body(url))
    print(body)
    return body


if __name__ == "__main__":
    http_client_example()
