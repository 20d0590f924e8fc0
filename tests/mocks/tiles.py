"""Mock tiles that record every marker call.

Unlike MemoryTile, which only keeps the latest marker values, RecordingTile
appends each call to a shared journal so tests can assert on ordering across
tiles.
"""

from dataclasses import dataclass, field


@dataclass(eq=False)
class RecordingTile:
    """Tile that journals ``set_visible``/``set_focusable``/``focus`` calls.

    Journal entries are ``(marker, position, value)`` tuples, e.g.
    ``("visible", 3, True)``.
    """

    position: int
    journal: list[tuple[str, int, bool]] = field(default_factory=list)
    filler: bool = False

    @property
    def is_filler(self) -> bool:
        return self.filler

    def set_visible(self, visible: bool) -> None:
        self.journal.append(("visible", self.position, visible))

    def set_focusable(self, focusable: bool) -> None:
        self.journal.append(("focusable", self.position, focusable))

    def focus(self) -> None:
        self.journal.append(("focus", self.position, True))


def make_recording_tiles(count: int) -> tuple[list[RecordingTile], list[tuple[str, int, bool]]]:
    """Create ``count`` tiles sharing one journal.

    Returns:
        The tiles and the shared journal.
    """
    journal: list[tuple[str, int, bool]] = []
    return [RecordingTile(position=i, journal=journal) for i in range(count)], journal
