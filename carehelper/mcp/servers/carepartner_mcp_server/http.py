# carehelper/mcp/servers/carepartner_mcp_server/http.py
# SPDX-License-Identifier: Apache-2.0
"""
Deadline-bounded OpenRouter calls (httpx, asyncio).

- One POST per call, no retries.
- A CancellationToken is armed by a deadline timer; the request is raced
  against it and cancelled when it fires.
- Timer and watcher are released on every exit path.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from .config.settings import BODY_EXCERPT_CHARS, CareJobsConfig
from .exceptions import MalformedResponseError, RequestTimeoutError, UpstreamHTTPError

logger = logging.getLogger(__name__)

_MISSING = object()


class CancellationToken:
    """One-shot cancellation flag that can be awaited."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()


async def post_with_deadline(
    client: httpx.AsyncClient,
    url: str,
    *,
    headers: Dict[str, str],
    json: Dict[str, Any],
    timeout_ms: int,
    token: Optional[CancellationToken] = None,
) -> httpx.Response:
    """
    POST `json` to `url`, giving up after `timeout_ms`.

    Raises RequestTimeoutError when the deadline fires first. Any other
    failure of the request itself (httpx.ConnectError, ...) propagates as-is.
    """
    token = token or CancellationToken()
    loop = asyncio.get_running_loop()
    timer = loop.call_later(timeout_ms / 1000, token.cancel)
    request = asyncio.ensure_future(client.post(url, headers=headers, json=json))
    watcher = asyncio.ensure_future(token.wait())
    try:
        await asyncio.wait({request, watcher}, return_when=asyncio.FIRST_COMPLETED)
        if request.done():
            return request.result()

        request.cancel()
        # Let httpx unwind the aborted request before we report
        await asyncio.gather(request, return_exceptions=True)
        logger.warning("OpenRouter request cancelled after %sms", timeout_ms)
        raise RequestTimeoutError(timeout_ms)
    finally:
        timer.cancel()
        watcher.cancel()
        if not request.done():
            request.cancel()


def body_excerpt(text: str, limit: int = BODY_EXCERPT_CHARS) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def raise_for_upstream_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise UpstreamHTTPError(
        response.status_code,
        response.reason_phrase,
        body_excerpt(response.text),
    )


def _lookup(node: Any, key: Any) -> Any:
    if isinstance(key, int):
        if isinstance(node, list) and 0 <= key < len(node):
            return node[key]
        return _MISSING
    if isinstance(node, dict):
        return node.get(key, _MISSING)
    return _MISSING


def extract_assistant_message(data: Any) -> str:
    """
    Return choices[0].message.content from a chat-completions body.

    Raises MalformedResponseError when the field is absent, not a string,
    or empty. `detail` says which.
    """
    node = data
    path = []
    for key in ("choices", 0, "message", "content"):
        path.append(str(key))
        node = _lookup(node, key)
        if node is _MISSING or node is None:
            raise MalformedResponseError(data, f"missing field: {'.'.join(path)}")

    if not isinstance(node, str):
        raise MalformedResponseError(
            data, f"choices.0.message.content is {type(node).__name__}, expected str"
        )
    if not node.strip():
        raise MalformedResponseError(data, "choices.0.message.content is empty")
    return node


def build_chat_payload(config: CareJobsConfig, system: str, user: str) -> Dict[str, Any]:
    return {
        "model": config.model,
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        "max_tokens": config.max_tokens,
        "temperature": config.temperature,
    }


def auth_headers(config: CareJobsConfig) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
    }


async def chat_completion(
    config: CareJobsConfig,
    system: str,
    user: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    token: Optional[CancellationToken] = None,
) -> str:
    """Run one chat completion under the configured deadline and return the assistant text."""
    payload = build_chat_payload(config, system, user)
    # httpx's own timeout is disabled; the deadline race owns the wall clock
    async with httpx.AsyncClient(transport=transport, timeout=None) as client:
        response = await post_with_deadline(
            client,
            config.url,
            headers=auth_headers(config),
            json=payload,
            timeout_ms=config.timeout_ms,
            token=token,
        )
        raise_for_upstream_status(response)

        try:
            data = response.json()
        except ValueError:
            logger.error("OpenRouter returned a non-JSON body: %s", body_excerpt(response.text))
            raise MalformedResponseError(response.text, "body is not JSON")

    try:
        return extract_assistant_message(data)
    except MalformedResponseError as e:
        logger.error(
            "OpenRouter response structure error (%s): %s",
            e.detail,
            data,
            extra={"error_type": "MalformedResponseError", "error_details": e.detail},
        )
        raise
