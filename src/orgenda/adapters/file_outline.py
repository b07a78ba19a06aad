"""File-based outline source adapter."""

import logging
from pathlib import Path

from orgenda.errors import WorkspaceNotFound
from orgenda.ports import OutlineSource

logger = logging.getLogger(__name__)


class FileOutlineSource:
    """
    File-based outline source.

    Implements OutlineSource protocol. Source ids are POSIX paths relative
    to the workspace root, so they double as agenda location labels.
    """

    def __init__(self, root: Path | str, pattern: str = "*.org", recursive: bool = False):
        self.root = Path(root).expanduser()
        if not self.root.is_dir():
            raise WorkspaceNotFound(f"Workspace directory not found: {self.root}")
        self.pattern = pattern
        self.recursive = recursive

    def _paths(self) -> list[Path]:
        paths = self.root.rglob(self.pattern) if self.recursive else self.root.glob(self.pattern)
        return sorted(p for p in paths if p.is_file())

    def _path_for(self, source_id: str) -> Path:
        return self.root / source_id

    def list_sources(self) -> list[str]:
        """List outline files relative to the root, sorted."""
        return [p.relative_to(self.root).as_posix() for p in self._paths()]

    def read(self, source_id: str) -> str:
        """Read an outline file as UTF-8."""
        return self._path_for(source_id).read_text(encoding="utf-8")

    def mtimes(self) -> dict[str, float]:
        """Snapshot of modification times, for change detection."""
        snapshot = {}
        for path in self._paths():
            try:
                snapshot[path.relative_to(self.root).as_posix()] = path.stat().st_mtime
            except OSError:
                # Deleted between glob and stat
                continue
        return snapshot


class InMemoryOutlineSource:
    """
    Outline source backed by a dict of already-loaded buffers.

    Implements OutlineSource protocol.
    """

    def __init__(self, buffers: dict[str, str] | None = None):
        self.buffers = dict(buffers or {})

    def list_sources(self) -> list[str]:
        return list(self.buffers)

    def read(self, source_id: str) -> str:
        try:
            return self.buffers[source_id]
        except KeyError:
            raise FileNotFoundError(source_id)


def read_sources(source: OutlineSource) -> list[tuple[str, str]]:
    """
    Read every listed source, skipping the ones that cannot be read.

    An unreadable file is logged and left out; the agenda is built from the
    remaining sources.
    """
    contents = []
    for source_id in source.list_sources():
        try:
            contents.append((source_id, source.read(source_id)))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable outline {source_id}: {e}")
    return contents
