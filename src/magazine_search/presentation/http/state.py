"""
Application State - Container plus the ready-once initialization guard.

The first request that needs the corpus starts one initialization task;
concurrent first callers await that same task. A failed initialization is
kept: every later call re-raises the original error, so the server never
serves an empty corpus.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from magazine_search.container import ApplicationContainer

if TYPE_CHECKING:
    from magazine_search.application.corpus import CorpusIndex
    from magazine_search.application.widgets import WidgetResolver
    from magazine_search.infrastructure import Settings

logger = logging.getLogger(__name__)


class ApplicationState:
    """
    Process-wide state shared by every session.

    Args:
        settings: Resolved settings
        container: Optional pre-built container (tests override providers)
    """

    def __init__(self, settings: Settings, container: ApplicationContainer | None = None):
        self.settings = settings
        self.container = container or ApplicationContainer()
        self.container.config.from_dict(settings.to_config())
        self._ready: asyncio.Task[None] | None = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def failed(self) -> bool:
        task = self._ready
        return task is not None and task.done() and not task.cancelled() and task.exception() is not None

    @property
    def index(self) -> CorpusIndex:
        return self.container.corpus_index()

    @property
    def widgets(self) -> WidgetResolver:
        return self.container.widget_resolver()

    def initialize(self) -> None:
        """
        Load the corpus and resolve every widget.

        Raises:
            CorpusLoadError: If the corpus file is missing or unparseable.
        """
        index = self.index
        resolved = self.widgets.resolve_all()
        available = sorted(name for name, d in resolved.items() if d is not None)
        logger.info(f"Initialized: {len(index)} articles, widgets available: {available or 'none'}")
        self._initialized = True

    async def _initialize_once(self) -> None:
        # Blocking corpus and asset reads run on the loop; there are no worker threads
        self.initialize()

    async def ensure_ready(self) -> None:
        """Initialize at most once; re-raise a cached failure."""
        if self._initialized:
            return
        if self._ready is None:
            self._ready = asyncio.get_running_loop().create_task(self._initialize_once())
        await asyncio.shield(self._ready)
