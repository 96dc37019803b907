from __future__ import annotations

import asyncio
import threading
from typing import Optional

import httpx

from leftronic.api.responses import DispatchResult
from leftronic.errors import ConfigError, NetworkError
from leftronic.shared.logging.logger import get_logger

log = get_logger("api.dispatcher")

ENDPOINT = "https://www.leftronic.com/customSend/"


def _limits(max_concurrency: int) -> httpx.Limits:
    if isinstance(max_concurrency, bool) or not isinstance(max_concurrency, int) or max_concurrency < 1:
        raise ConfigError(f"max_concurrency must be a positive integer (got {max_concurrency!r})")
    return httpx.Limits(
        max_connections=max_concurrency,
        max_keepalive_connections=max_concurrency,
    )


class Dispatcher:
    """
    Blocking POST executor bounded to max_concurrency in-flight requests.

    Callers beyond the limit block until a slot frees. Each body is sent
    exactly once; there is no retry.
    """

    def __init__(
        self,
        *,
        max_concurrency: int,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.max_concurrency = max_concurrency
        self.client = httpx.Client(
            timeout=timeout,
            limits=_limits(max_concurrency),
            transport=transport,
        )
        self._slots = threading.BoundedSemaphore(max_concurrency)
        self._count_lock = threading.Lock()
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        return self._in_flight

    def post(self, body: bytes) -> DispatchResult:
        with self._slots:
            self._track(1)
            try:
                return self._send(body)
            finally:
                self._track(-1)

    def _track(self, delta: int) -> None:
        with self._count_lock:
            self._in_flight += delta

    def _send(self, body: bytes) -> DispatchResult:
        try:
            # stream() scopes the response: it is closed on every exit path
            with self.client.stream("POST", ENDPOINT, content=body) as resp:
                resp.read()
                log.debug(f"POST {ENDPOINT} -> {resp.status_code} ({len(body)} bytes sent)")
                return DispatchResult(status_code=resp.status_code, body=resp.text)
        except httpx.RequestError as e:
            log.warning(f"POST {ENDPOINT} failed: {type(e).__name__}: {e}")
            raise NetworkError(f"Request to {ENDPOINT} failed: {e}", cause=e) from e

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class AsyncDispatcher:
    """asyncio counterpart of Dispatcher, bounded with an asyncio.Semaphore."""

    def __init__(
        self,
        *,
        max_concurrency: int,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.max_concurrency = max_concurrency
        self.client = httpx.AsyncClient(
            timeout=timeout,
            limits=_limits(max_concurrency),
            transport=transport,
        )
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        return self._in_flight

    async def post(self, body: bytes) -> DispatchResult:
        # created inside the running loop on first use
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self.max_concurrency)
        async with self._semaphore:
            self._in_flight += 1
            try:
                return await self._send(body)
            finally:
                self._in_flight -= 1

    async def _send(self, body: bytes) -> DispatchResult:
        try:
            async with self.client.stream("POST", ENDPOINT, content=body) as resp:
                await resp.aread()
                log.debug(f"POST {ENDPOINT} -> {resp.status_code} ({len(body)} bytes sent)")
                return DispatchResult(status_code=resp.status_code, body=resp.text)
        except httpx.RequestError as e:
            log.warning(f"POST {ENDPOINT} failed: {type(e).__name__}: {e}")
            raise NetworkError(f"Request to {ENDPOINT} failed: {e}", cause=e) from e

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "AsyncDispatcher":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
