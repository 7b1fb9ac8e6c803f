# This module holds the value types shared by the engine and the report renderer.
# A MarkGroup owns both its ordered marks and the raw-key counter used to disambiguate repeats.
# Groups are mutated only by the engine while current; once closed they are treated as read-only.

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Mark:
    key: str
    timestamp_ms: int


@dataclass
class MarkGroup:
    marks: list[Mark] = field(default_factory=list)
    key_counts: dict[str, int] = field(default_factory=dict)
    stored_keys: set[str] = field(default_factory=set)

    def add(self, raw_key: str, timestamp_ms: int) -> Mark:
        """
        Append a mark, suffixing repeated keys as ``key(1)``, ``key(2)`` and so on.

        Counting is per raw key. A suffixed key already taken by a literal mark
        (``x``, ``x``, then ``x(1)``) bumps the counter until the key is free, so
        stored keys stay unique within the group.
        """

        count = self.key_counts.get(raw_key)
        if count is None:
            count = 0
            stored_key = raw_key
        else:
            count += 1
            stored_key = f"{raw_key}({count})"
        while stored_key in self.stored_keys:
            count += 1
            stored_key = f"{raw_key}({count})"

        self.key_counts[raw_key] = count
        self.stored_keys.add(stored_key)
        mark = Mark(key=stored_key, timestamp_ms=timestamp_ms)
        self.marks.append(mark)
        return mark

    @property
    def keys(self) -> list[str]:
        return [mark.key for mark in self.marks]

    def __len__(self) -> int:
        return len(self.marks)
