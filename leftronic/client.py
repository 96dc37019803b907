"""
Client facade for the Leftronic customSend API.

One method per widget kind, plus a generic send_point() for widget types not
modelled here. Calls block until the request has completed; concurrency is
bounded inside the dispatcher.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple, Union

import httpx

from leftronic.api.dispatcher import AsyncDispatcher, Dispatcher
from leftronic.api.envelope import encode_command, encode_point
from leftronic.api.responses import classify
from leftronic.errors import RemoteError
from leftronic.models.points import (
    GeoPoint,
    GraphPoint,
    Leaderboard,
    LeaderboardEntry,
    ListPayload,
    Number,
    Text,
)
from leftronic.shared.config.client import LeftronicConfig
from leftronic.shared.logging.logger import get_logger

log = get_logger("client")

EntryLike = Union[LeaderboardEntry, Tuple[str, int]]


class _BaseClient:
    def __init__(self, config: LeftronicConfig):
        config.validate()
        self.config = config

    @property
    def access_key(self) -> str:
        return self.config.access_key

    def _point_body(self, stream_name: str, value: Any) -> bytes:
        return encode_point(
            self.config.access_key,
            stream_name,
            value,
            validate=self.config.validate_payloads,
        )

    def _command_body(self, stream_name: str, command: str) -> bytes:
        return encode_command(
            self.config.access_key,
            stream_name,
            command,
            validate=self.config.validate_payloads,
        )

    @staticmethod
    def _report(stream_name: str, err: RemoteError) -> None:
        log.warning(f"[{stream_name}] rejected with HTTP {err.status_code}: {err.body}")


class LeftronicClient(_BaseClient):
    """
    Blocking client, safe to share between threads.

    Raises EncodingError, NetworkError or RemoteError; nothing is retried.
    """

    def __init__(
        self,
        config: LeftronicConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(config)
        self.dispatcher = Dispatcher(
            max_concurrency=config.max_concurrency,
            timeout=config.timeout,
            transport=transport,
        )

    # ------------------------------------------------------------
    # Widget helpers
    # ------------------------------------------------------------

    def send_number(self, stream_name: str, value: int) -> None:
        self.send_point(stream_name, Number(value))

    def send_graph_point(
        self,
        stream_name: str,
        number: float,
        timestamp: Optional[int] = None,
    ) -> None:
        self.send_point(stream_name, GraphPoint(number, timestamp))

    def send_geo_point(self, stream_name: str, lat: float, lon: float) -> None:
        self.send_point(stream_name, GeoPoint(lat, lon))

    def send_text(
        self,
        stream_name: str,
        title: str,
        message: str,
        img_url: Optional[str] = None,
    ) -> None:
        self.send_point(stream_name, Text(title, message, img_url))

    def send_leaderboard(self, stream_name: str, entries: Iterable[EntryLike]) -> None:
        self.send_point(stream_name, Leaderboard.of(entries))

    def send_list(self, stream_name: str, entries: Union[str, Iterable[str]]) -> None:
        self.send_point(stream_name, ListPayload.of(entries))

    # ------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------

    def send_point(self, stream_name: str, value: Any) -> None:
        """
        Send any typed value, or an already JSON-compatible object for widget
        kinds without a dedicated helper.
        """
        self._submit(stream_name, self._point_body(stream_name, value))

    def send_command(self, stream_name: str, command: str) -> None:
        self._submit(stream_name, self._command_body(stream_name, command))

    def _submit(self, stream_name: str, body: bytes) -> None:
        result = self.dispatcher.post(body)
        try:
            classify(result)
        except RemoteError as e:
            self._report(stream_name, e)
            raise

    def close(self) -> None:
        self.dispatcher.close()

    def __enter__(self) -> "LeftronicClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class AsyncLeftronicClient(_BaseClient):
    """asyncio flavour of LeftronicClient with the same method set as coroutines."""

    def __init__(
        self,
        config: LeftronicConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(config)
        self.dispatcher = AsyncDispatcher(
            max_concurrency=config.max_concurrency,
            timeout=config.timeout,
            transport=transport,
        )

    async def send_number(self, stream_name: str, value: int) -> None:
        await self.send_point(stream_name, Number(value))

    async def send_graph_point(
        self,
        stream_name: str,
        number: float,
        timestamp: Optional[int] = None,
    ) -> None:
        await self.send_point(stream_name, GraphPoint(number, timestamp))

    async def send_geo_point(self, stream_name: str, lat: float, lon: float) -> None:
        await self.send_point(stream_name, GeoPoint(lat, lon))

    async def send_text(
        self,
        stream_name: str,
        title: str,
        message: str,
        img_url: Optional[str] = None,
    ) -> None:
        await self.send_point(stream_name, Text(title, message, img_url))

    async def send_leaderboard(self, stream_name: str, entries: Iterable[EntryLike]) -> None:
        await self.send_point(stream_name, Leaderboard.of(entries))

    async def send_list(self, stream_name: str, entries: Union[str, Iterable[str]]) -> None:
        await self.send_point(stream_name, ListPayload.of(entries))

    async def send_point(self, stream_name: str, value: Any) -> None:
        await self._submit(stream_name, self._point_body(stream_name, value))

    async def send_command(self, stream_name: str, command: str) -> None:
        await self._submit(stream_name, self._command_body(stream_name, command))

    async def _submit(self, stream_name: str, body: bytes) -> None:
        result = await self.dispatcher.post(body)
        try:
            classify(result)
        except RemoteError as e:
            self._report(stream_name, e)
            raise

    async def aclose(self) -> None:
        await self.dispatcher.aclose()

    async def __aenter__(self) -> "AsyncLeftronicClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
