import asyncio
import json

import httpx


def json_response(status_code, payload):
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json"},
    )


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def transport_returning(response, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return response
    return httpx.MockTransport(handler)


def hanging_transport(seen=None):
    async def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        await asyncio.sleep(3600)
        return httpx.Response(200)
    return httpx.MockTransport(handler)


def failing_transport(exc):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc
    return httpx.MockTransport(handler)
