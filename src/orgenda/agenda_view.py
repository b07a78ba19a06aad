"""Host integration layer for the agenda document.

AgendaView is the single live aggregation-and-display channel. The
composition root (the CLI) constructs exactly one and hands it to whatever
delivers change notifications.
"""

import logging
from pathlib import PurePath
from typing import Callable

from .adapters.file_outline import FileOutlineSource, read_sources
from .config import Config
from .core.agenda import render
from .core.items import AgendaItem, collect_all
from .core.keywords import get_actionable_keywords
from .errors import UnknownAgendaUri
from .ports import OutlineSource

logger = logging.getLogger(__name__)

# The URI scheme used for agenda documents
AGENDA_SCHEME = "agenda"
AGENDA_URI = f"{AGENDA_SCHEME}:agenda.org"

OUTLINE_SUFFIX = ".org"

ChangeListener = Callable[[str], None]


class AgendaView:
    """Read-only agenda document, recomputed from sources on every request."""

    def __init__(self, source: OutlineSource, keywords: list[str] | None = None):
        self.source = source
        self.keywords = get_actionable_keywords(keywords)
        self._listeners: list[ChangeListener] = []

    def collect_items(self) -> list[AgendaItem]:
        """Read every readable source and collect its agenda items."""
        return collect_all(read_sources(self.source), self.keywords)

    def provide_content(self, uri: str = AGENDA_URI) -> str:
        """Render the agenda document for the given URI."""
        if uri != AGENDA_URI:
            raise UnknownAgendaUri(f"Not an agenda document: {uri}")
        items = self.collect_items()
        logger.debug(f"Rendering agenda from {len(items)} items")
        return render(items, self.keywords)

    def on_did_change(self, listener: ChangeListener) -> Callable[[], None]:
        """Subscribe to change events. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def fire_change(self) -> None:
        """Tell every listener the agenda document is stale."""
        for listener in list(self._listeners):
            try:
                listener(AGENDA_URI)
            except Exception as e:
                logger.error(f"Agenda change listener failed: {e}")

    def notify_saved(self, path: str | PurePath) -> bool:
        """
        Handle a saved file. Fires a change only for outline files.

        Returns True if listeners were notified.
        """
        if PurePath(path).suffix != OUTLINE_SUFFIX:
            return False
        logger.info(f"Outline changed: {path}")
        self.fire_change()
        return True


def build_agenda_view(config: Config) -> AgendaView:
    """Construct the agenda view over the configured workspace."""
    source = FileOutlineSource(
        config.workspace_path,
        pattern=config.file_pattern,
        recursive=config.recursive,
    )
    return AgendaView(source, config.todo_keywords)
