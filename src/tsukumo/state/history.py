"""Undo stack for calculator log text."""


class LogHistory:
    """
    Append-only stack of cumulative log snapshots.

    Each entry is the full log text at that point, not a diff. A clear
    is recorded as an empty entry so it can be undone like any other
    change.
    """

    def __init__(self):
        self._entries: list[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def latest(self) -> str:
        """Top entry, or empty string when nothing is recorded."""
        if self._entries:
            return self._entries[-1]
        return ""

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def push(self, text: str) -> None:
        self._entries.append(text)

    def pop(self) -> str:
        """Remove and return the top entry."""
        return self._entries.pop()
