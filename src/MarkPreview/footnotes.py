from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class FootnoteEntry:
    url: str
    title: Optional[str] = None


class FootnoteRegistry:
    """Deduplicated, first-seen ordered table of link URLs.

    Index ``i`` (1-based) always refers to ``entries()[i - 1]``. A URL keeps the
    index and title it was registered with; later links to the same URL only
    look it up.
    """

    def __init__(self) -> None:
        self._entries: list[FootnoteEntry] = []
        self._index: dict[str, int] = {}
        self._frozen = False

    def resolve(self, url: str, candidate_title: Optional[str] = None) -> int:
        existing = self._index.get(url)
        if existing is not None:
            return existing
        if self._frozen:
            raise RuntimeError("footnote registry is frozen")
        self._entries.append(FootnoteEntry(url=url, title=candidate_title))
        index = len(self._entries)
        self._index[url] = index
        return index

    def entries(self) -> tuple[FootnoteEntry, ...]:
        return tuple(self._entries)

    def freeze(self) -> "FootnoteRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FootnoteEntry]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"FootnoteRegistry({self._entries!r})"
