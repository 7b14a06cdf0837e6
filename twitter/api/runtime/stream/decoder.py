"""Line-delimited JSON stream decoder.

Streaming endpoints keep one HTTP response open and write one JSON record per
line, each terminated by CRLF. Blank lines are keep-alive signals. Chunks
arrive with arbitrary boundaries, so records are reassembled from a buffer
before decoding.

Policy: a line that is not valid JSON is fatal. The decoder raises
ParseError, closes the source and yields nothing further.
"""

from __future__ import annotations

import inspect
import json
import logging
from collections import deque
from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import Any

from ...config import STREAM_DELIMITER
from ...core.exceptions import ParseError

logger = logging.getLogger(__name__)


class StreamDecoder:
    """Single-pass async iterator of decoded stream records.

    Args:
        chunks: Incrementally readable body (bytes or str chunks)
        on_close: Called once when the decoder closes, for releasing the
            underlying connection. May be a coroutine function.
        delimiter: Record terminator

    Iterate inside ``async with``::

        async with client.tweets.sample_stream() as stream:
            async for item in stream:
                ...

    The source is released on every exit path: end of source, decode
    failure, ``aclose()``, ``async with`` exit, and cancellation of a task
    awaiting the next item. Breaking out of a bare ``async for`` leaves the
    connection open until ``aclose()`` is called.
    """

    def __init__(
        self,
        chunks: AsyncIterable[bytes | str],
        *,
        on_close: Callable[[], Any] | None = None,
        delimiter: bytes = STREAM_DELIMITER,
    ) -> None:
        self._chunks = chunks
        self._iterator: AsyncIterator[bytes | str] | None = None
        self._on_close = on_close
        self._delimiter = delimiter
        self._buffer = b""
        self._lines: deque[bytes] = deque()
        self._closed = False
        self.items_decoded = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> StreamDecoder:
        return self

    async def __anext__(self) -> Any:
        if self._closed:
            raise StopAsyncIteration
        try:
            return await self._next_item()
        except BaseException:
            # End of source, decode failure and cancellation all release the source
            await self.aclose()
            raise

    async def _next_item(self) -> Any:
        while True:
            while self._lines:
                line = self._lines.popleft()
                if not line.strip():
                    continue  # keep-alive
                return self._decode(line)

            if self._iterator is None:
                self._iterator = aiter(self._chunks)
            try:
                chunk = await anext(self._iterator)
            except StopAsyncIteration:
                if self._buffer.strip():
                    logger.debug(
                        "Discarding incomplete record at end of stream",
                        extra={"bytes": len(self._buffer)},
                    )
                raise

            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            self._buffer += chunk
            *lines, self._buffer = self._buffer.split(self._delimiter)
            self._lines.extend(lines)

    def _decode(self, line: bytes) -> Any:
        try:
            item = json.loads(line)
        except ValueError as e:
            raise ParseError(f"Invalid JSON in stream line: {e}", raw=line) from e
        self.items_decoded += 1
        return item

    async def aclose(self) -> None:
        """Stop decoding and release the source. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._lines.clear()
        self._buffer = b""

        source = self._iterator if self._iterator is not None else self._chunks
        close_source = getattr(source, "aclose", None)
        if close_source is not None:
            await close_source()
        if self._on_close is not None:
            result = self._on_close()
            if inspect.isawaitable(result):
                await result
        logger.debug("Stream closed", extra={"items": self.items_decoded})

    async def __aenter__(self) -> StreamDecoder:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
