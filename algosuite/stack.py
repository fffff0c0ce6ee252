"""Stack problems: bracket matching, a min-tracking stack, string decoding, warmer days."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

_PAIRS = {"(": ")", "[": "]", "{": "}"}


def is_valid(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by its partner in the right order.

    Any character that does not close the bracket on top of the stack is pushed,
    so characters other than brackets make the string invalid.
    """
    pending: list[str] = []
    for char in s:
        if pending and _PAIRS.get(pending[-1]) == char:
            pending.pop()
        else:
            pending.append(char)
    return not pending


@dataclass
class MinStack:
    """A stack that also reports its smallest value in constant time."""

    _entries: list[tuple[int, int]] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self._entries)

    def _require_items(self) -> None:
        if not self._entries:
            raise IndexError("the stack is empty")

    def push(self, val: int) -> None:
        """Put ``val`` on top of the stack."""
        smallest = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, smallest))

    def pop(self) -> None:
        """Remove the value on top of the stack."""
        self._require_items()
        self._entries.pop()

    def top(self) -> int:
        """Return the value on top of the stack."""
        self._require_items()
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest value on the stack."""
        self._require_items()
        return self._entries[-1][1]


def _decode(s: str, i: int) -> tuple[str, int]:
    """Decode from ``i`` up to an unmatched ``]`` or the end; return text and stop index."""
    parts: list[str] = []
    while i < len(s) and s[i] != "]":
        if s[i].isdigit():
            j = i
            while j < len(s) and s[j].isdigit():
                j += 1
            if j >= len(s) or s[j] != "[":
                raise ValueError(f"repeat count at {i} is not followed by '['")
            inner, end = _decode(s, j + 1)
            if end >= len(s):
                raise ValueError(f"'[' at {j} is never closed")
            parts.append(inner * int(s[i:j]))
            i = end + 1
        elif s[i] == "[":
            raise ValueError(f"'[' at {i} has no repeat count")
        else:
            parts.append(s[i])
            i += 1
    return "".join(parts), i


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest, into ``text`` repeated ``k`` times."""
    decoded, end = _decode(s, 0)
    if end != len(s):
        raise ValueError(f"']' at {end} has no matching '['")
    return decoded


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one, or 0 if none comes."""
    waits = [0] * len(temperatures)
    cooler: list[int] = []
    for day, temperature in enumerate(temperatures):
        while cooler and temperature > temperatures[cooler[-1]]:
            earlier = cooler.pop()
            waits[earlier] = day - earlier
        cooler.append(day)
    return waits