"""Cancellable, lazily produced streams over paginated collections.

Architecture:
    Each PageStream runs its page walk in its own asyncio task (the
    producer) and hands items to the consumer one at a time:

        seed envelope -> resolve_next -> fetch -> decode -> emit -> ...

    - Items travel over an unbuffered channel: a send completes only once
      the consumer has received the item, so the producer is never more
      than one page ahead of the consumer.
    - Errors travel over a one-slot channel that is closed, possibly empty,
      when the stream ends.
    - Cancellation is a shared asyncio.Event checked before each emission,
      never during a fetch.

Termination:
    The walk ends cleanly when there is no ``next`` link, when a page has
    ``size == 0``, or when the number of emitted items reaches the latest
    page's ``total``. A resolver, fetch or decode failure is delivered once
    on the error channel and ends the walk. Nothing is retried.

Cancellation timing:
    A consumer that cancels right after receiving item k still receives
    item k + 1 when both are on the same page: by the time item k is
    returned, the producer is already waiting to hand over item k + 1. When
    item k ends a page the producer may be fetching the next one and stops
    before emitting. No item after k + 1 is delivered.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, Generic, TypeVar

from ..config import DEFAULT_PAGE_LIMIT
from ..core import DecodeError, EndOfList, LingotekError
from ..models import PageEnvelope
from .cursor import CursorRequest, resolve_next, seed_envelope
from .rest import PageFetcher
from .telemetry import log_stream_complete, log_stream_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

EntityDecoder = Callable[[Any], Sequence[T]]

_CLOSED = object()


class StreamState(str, Enum):
    """Lifecycle of a PageStream."""

    SEEDED = "seeded"
    FETCHING = "fetching"
    EMITTING = "emitting"
    DONE = "done"


class StopReason(str, Enum):
    """Why a page walk ended."""

    END_OF_LIST = "end_of_list"
    EMPTY_PAGE = "empty_page"
    TOTAL_REACHED = "total_reached"
    CANCELLED = "cancelled"
    ERROR = "error"


class ItemChannel(Generic[T]):
    """Unbuffered single-producer/single-consumer channel.

    ``send`` returns immediately when a receiver is already waiting and
    otherwise parks until one arrives. ``receive`` takes a parked item and
    yields once so the sender can move on before the receiver resumes.
    """

    def __init__(self) -> None:
        self._receiver: asyncio.Future[Any] | None = None
        self._sender: tuple[T, asyncio.Future[None]] | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, item: T) -> None:
        if self._closed:
            raise RuntimeError("send on closed channel")

        receiver = self._receiver
        if receiver is not None and not receiver.done():
            self._receiver = None
            receiver.set_result(item)
            return

        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._sender = (item, waiter)
        try:
            await waiter
        finally:
            if self._sender is not None and self._sender[1] is waiter:
                self._sender = None

    async def receive(self) -> T:
        """Receive the next item.

        Raises:
            StopAsyncIteration: Once the channel is closed and drained
        """
        if self._sender is not None:
            item, waiter = self._sender
            self._sender = None
            if not waiter.done():
                waiter.set_result(None)
            # Let the released sender run up to its next send before the
            # caller resumes
            await asyncio.sleep(0)
            return item

        if self._closed:
            raise StopAsyncIteration

        waiter: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._receiver = waiter
        try:
            result = await waiter
        finally:
            if self._receiver is waiter:
                self._receiver = None

        if result is _CLOSED:
            raise StopAsyncIteration
        return result

    def close(self) -> None:
        self._closed = True
        receiver = self._receiver
        if receiver is not None and not receiver.done():
            self._receiver = None
            receiver.set_result(_CLOSED)


class ErrorChannel:
    """One-slot error channel.

    Holds at most one error. ``get`` waits until the channel is closed and
    then returns the error, or None if the stream ended cleanly; the error
    is handed out only once.
    """

    def __init__(self) -> None:
        self._error: BaseException | None = None
        self._closed = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def put(self, error: BaseException) -> None:
        if self._closed.is_set():
            raise RuntimeError("put on closed error channel")
        if self._error is not None:
            raise RuntimeError("error channel already holds an error")
        self._error = error

    def close(self) -> None:
        self._closed.set()

    async def get(self) -> BaseException | None:
        await self._closed.wait()
        error, self._error = self._error, None
        return error


class PageStream(Generic[T]):
    """Lazily produced, cancellable stream of decoded collection items.

    Usage:
        stream = PageStream(fetcher, "community", decode_communities).start()
        async for community in stream:
            ...
        if (error := await stream.errors.get()) is not None:
            ...

    ``start`` must be called from a running event loop. Use ``async with``
    or ``aclose`` when abandoning a stream early so its task can finish.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        path: str,
        decoder: EntityDecoder[T],
        *,
        query: Mapping[str, str] | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        done: asyncio.Event | None = None,
        endpoint_id: str | None = None,
    ) -> None:
        """Initialize a stream.

        Args:
            fetcher: Page fetcher shared with other streams
            path: Collection route, e.g. ``"community"``
            decoder: Turns one page's entity block into items
            query: Fixed filter parameters sent with every page
            limit: Page size requested by the seed cursor
            done: Cancellation signal; a fresh one is created if omitted
            endpoint_id: Name used in logs (defaults to ``path``)
        """
        self._fetcher = fetcher
        self._decoder = decoder
        self._seed = seed_envelope(path, query, limit=limit)
        self._done = done if done is not None else asyncio.Event()
        self._endpoint_id = endpoint_id or path

        self._items: ItemChannel[T] = ItemChannel()
        self._errors = ErrorChannel()
        self._task: asyncio.Task[None] | None = None
        self._state = StreamState.SEEDED
        self._reason: StopReason | None = None

        self.items_emitted = 0
        self.pages_fetched = 0

    # ----------------------
    # Lifecycle
    # ----------------------
    def start(self) -> PageStream[T]:
        """Schedule the producer task (idempotent)."""
        if self._task is None and self._state is StreamState.SEEDED:
            self._task = asyncio.create_task(
                self._run(), name=f"page-stream:{self._endpoint_id}"
            )
        return self

    def cancel(self) -> None:
        """Signal cancellation; takes effect at the next emission point."""
        self._done.set()

    async def aclose(self) -> None:
        """Cancel the stream and wait for its producer to finish.

        An in-flight fetch completes first; an item already offered by the
        producer is received and dropped.
        """
        self.cancel()
        if self._task is None:
            self._finish()
            return
        while True:
            try:
                await self._items.receive()
            except StopAsyncIteration:
                break
        await self._task

    async def __aenter__(self) -> PageStream[T]:
        return self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # ----------------------
    # Consumer side
    # ----------------------
    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def stop_reason(self) -> StopReason | None:
        return self._reason

    @property
    def cancelled(self) -> bool:
        return self._done.is_set()

    @property
    def errors(self) -> ErrorChannel:
        return self._errors

    def __aiter__(self) -> PageStream[T]:
        self.start()
        return self

    async def __anext__(self) -> T:
        return await self._items.receive()

    async def collect(self) -> list[T]:
        """Drain the stream into a list, raising the stream's error if any."""
        items = [item async for item in self]
        error = await self._errors.get()
        if error is not None:
            raise error
        return items

    # ----------------------
    # Producer side
    # ----------------------
    async def _run(self) -> None:
        reason = StopReason.ERROR
        try:
            reason = await self._walk()
        except Exception as e:
            self._errors.put(e)
            log_stream_error(
                endpoint_id=self._endpoint_id,
                error_type=type(e).__name__,
                error_message=str(e),
            )
        finally:
            self._reason = reason
            self._finish()
            log_stream_complete(
                endpoint_id=self._endpoint_id,
                reason=reason.value,
                items_emitted=self.items_emitted,
                pages_fetched=self.pages_fetched,
            )

    async def _walk(self) -> StopReason:
        current = self._seed

        while True:
            self._state = StreamState.FETCHING
            try:
                request = self._resolve(current)
            except EndOfList:
                return StopReason.END_OF_LIST

            current = await self._fetcher.fetch(request)
            self.pages_fetched += 1

            if current.summary.size == 0:
                return StopReason.EMPTY_PAGE

            items = self._decode(current)

            self._state = StreamState.EMITTING
            for item in items:
                if self._done.is_set():
                    return StopReason.CANCELLED
                await self._items.send(item)
                self.items_emitted += 1

            if self.items_emitted == current.summary.total:
                return StopReason.TOTAL_REACHED

    def _resolve(self, envelope: PageEnvelope) -> CursorRequest:
        try:
            return resolve_next(envelope)
        except LingotekError:
            raise
        except ValueError as e:
            raise DecodeError(f"Unusable page link: {e}") from e

    def _decode(self, envelope: PageEnvelope) -> Sequence[T]:
        try:
            return self._decoder(envelope.entities)
        except LingotekError:
            raise
        except Exception as e:
            raise DecodeError(f"Failed to decode {self._endpoint_id} entities: {e}") from e

    def _finish(self) -> None:
        self._state = StreamState.DONE
        self._items.close()
        self._errors.close()
