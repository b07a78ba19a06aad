"""Re-render the agenda when outline files change."""

import logging
from typing import Callable

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .adapters.file_outline import FileOutlineSource
from .agenda_view import AgendaView

logger = logging.getLogger(__name__)


class ChangeWatcher:
    """Detects added, modified and removed outline files by polling mtimes."""

    def __init__(self, source: FileOutlineSource, view: AgendaView):
        self.source = source
        self.view = view
        self._snapshot = source.mtimes()

    def poll(self) -> list[str]:
        """
        Compare against the last snapshot and fire one change if anything moved.

        Returns the changed source ids, sorted.
        """
        current = self.source.mtimes()
        changed = sorted(
            source_id
            for source_id in current.keys() | self._snapshot.keys()
            if current.get(source_id) != self._snapshot.get(source_id)
        )
        self._snapshot = current

        if changed:
            logger.info(f"Outline files changed: {', '.join(changed)}")
            self.view.fire_change()
        return changed


def setup_scheduler(watcher: ChangeWatcher, interval: float) -> BlockingScheduler:
    """Create a scheduler that polls the watcher every `interval` seconds."""
    scheduler = BlockingScheduler()
    scheduler.add_job(
        watcher.poll,
        IntervalTrigger(seconds=interval),
        id="poll_outlines",
        max_instances=1,
        coalesce=True,
    )
    logger.info(f"Polling outline files every {interval}s")
    return scheduler


def run_watch(
    view: AgendaView,
    source: FileOutlineSource,
    interval: float,
    on_render: Callable[[str], None],
) -> None:
    """Render once, then re-render on every change until interrupted."""

    def render_agenda(uri: str) -> None:
        on_render(view.provide_content(uri))

    view.on_did_change(render_agenda)
    view.fire_change()

    watcher = ChangeWatcher(source, view)
    scheduler = setup_scheduler(watcher, interval)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Watcher stopped")
        scheduler.shutdown(wait=False)
