"""
Clip library for cutplay.
Holds the ordered list of clips a session is working on.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .clip import AudioFormat, Clip, ClipIdGenerator
from .editor import ClipEditor
from cutplay.utils.logger import logger


@dataclass
class ClipLibrary:
    """
    Ordered collection of clips plus the id source they share.
    Loaded clips and edit results both land here.
    """
    name: str = "Untitled Session"
    clips: list[Clip] = field(default_factory=list)
    ids: ClipIdGenerator = field(default_factory=ClipIdGenerator, repr=False)
    _editor: Optional[ClipEditor] = field(default=None, repr=False)

    @property
    def editor(self) -> ClipEditor:
        """Editor stamping results with this library's ids."""
        if self._editor is None:
            self._editor = ClipEditor(self.ids)
        return self._editor

    def ingest(self, name: str, buffer: bytes, fmt: AudioFormat) -> Clip:
        """Wrap freshly decoded audio in an unmodified clip and add it."""
        clip = Clip.create(name, buffer, fmt, self.ids)
        self.add(clip)
        logger.debug(f"Ingested {clip}")
        return clip

    def add(self, clip: Clip) -> int:
        """Append a clip and return its index."""
        self.clips.append(clip)
        return len(self.clips) - 1

    def remove(self, index: int) -> Optional[Clip]:
        """Remove the clip at index and return it."""
        if 0 <= index < len(self.clips):
            clip = self.clips.pop(index)
            logger.debug(f"Removed {clip}")
            return clip
        return None

    def get(self, index: int) -> Optional[Clip]:
        """Get clip by index safely."""
        if 0 <= index < len(self.clips):
            return self.clips[index]
        return None

    def index_of(self, clip: Clip) -> int:
        """Position of a clip (matched by id), -1 when absent."""
        for i, c in enumerate(self.clips):
            if c.id == clip.id:
                return i
        return -1

    def names(self) -> list[str]:
        """List labels, one per clip."""
        return [str(c) for c in self.clips]

    def clear(self) -> None:
        """Drop every clip. Ids keep counting."""
        self.clips.clear()
        logger.info("Clip library cleared")

    def __len__(self) -> int:
        return len(self.clips)

    def __iter__(self) -> Iterator[Clip]:
        return iter(self.clips)
