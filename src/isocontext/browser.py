"""Browser-level owner of browsing contexts."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from isocontext.backends.base import ContextBackend
from isocontext.config import IsocontextConfig
from isocontext.context import BrowsingContext
from isocontext.errors import BrowserClosedError
from isocontext.options import ContextOptions, prepare_options

logger = logging.getLogger(__name__)

ContextBackendFactory = Callable[[ContextOptions], Awaitable[ContextBackend]]


class Browser:
    """Creates isolated contexts through a backend factory and tracks them.

    Closing the browser closes every context it still owns.
    """

    def __init__(
        self,
        backend_factory: ContextBackendFactory,
        *,
        config: IsocontextConfig | None = None,
    ) -> None:
        self._backend_factory = backend_factory
        self._config = config or IsocontextConfig()
        self._contexts: list[BrowsingContext] = []
        self._closed = False
        self._lock = asyncio.Lock()

    @property
    def contexts(self) -> list[BrowsingContext]:
        """Contexts created by this browser that are still open."""
        return [context for context in self._contexts if not context.closed]

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> Browser:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def new_context(
        self, options: ContextOptions | Mapping[str, Any] | None = None
    ) -> BrowsingContext:
        """Create and initialize a new isolated context.

        Options fall back to the configured context defaults. They are
        validated before the backend is asked for anything.
        """
        if self._closed:
            raise BrowserClosedError("Browser is closed; cannot create a new context")

        prepared = prepare_options(
            options if options is not None else self._config.context
        )
        backend = await self._backend_factory(prepared.clone())
        context = BrowsingContext(backend, prepared)
        try:
            await context.initialize()
        except Exception as e:
            logger.warning(
                "browser_context_initialize_failed",
                extra={"context.id": context.id, "error.message": str(e)},
            )
            await self._discard(context)
            raise

        # close() may have run while the factory or initialize() was awaited
        async with self._lock:
            registered = not self._closed
            if registered:
                self._contexts.append(context)
        if not registered:
            await self._discard(context)
            raise BrowserClosedError(
                "Browser was closed while the context was being created"
            )

        logger.info(
            "browser_context_created",
            extra={
                "context.id": context.id,
                "context.open_count": len(self.contexts),
            },
        )
        return context

    async def _discard(self, context: BrowsingContext) -> None:
        """Close a context that never became tracked, logging close failures."""
        try:
            await context.close()
        except Exception as e:
            logger.warning(
                "browser_context_close_failed",
                extra={"context.id": context.id, "error.message": str(e)},
            )

    async def close(self) -> None:
        """Close all owned contexts. Later calls are no-ops.

        Every context gets a close attempt; the first failure is re-raised
        once all attempts have finished.
        """
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            open_contexts = self.contexts
            results = await asyncio.gather(
                *(context.close() for context in open_contexts),
                return_exceptions=True,
            )

        errors: list[BaseException] = []
        for context, result in zip(open_contexts, results, strict=True):
            if isinstance(result, BaseException):
                logger.warning(
                    "browser_context_close_failed",
                    extra={"context.id": context.id, "error.message": str(result)},
                )
                errors.append(result)
        self._contexts.clear()
        if errors:
            raise errors[0]
