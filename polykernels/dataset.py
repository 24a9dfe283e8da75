"""Dataset sizes and the textual dump format shared by all kernels."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Union


class DatasetSize(enum.Enum):
    """Named problem sizes each benchmark defines its dimensions for."""

    MINI = "mini"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRALARGE = "extralarge"

    @classmethod
    def parse(cls, text: Union[str, "DatasetSize"]) -> "DatasetSize":
        """Return the size named by ``text`` (case-insensitive, ``_DATASET`` suffix allowed)."""
        if isinstance(text, cls):
            return text
        key = str(text).strip().upper()
        if key.endswith("_DATASET"):
            key = key[: -len("_DATASET")]
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(member.name for member in cls)
            raise ValueError(
                f"unknown dataset size {text!r}; expected one of {choices}"
            ) from None


DEFAULT_DATASET = DatasetSize.LARGE

ENTRIES_PER_LINE = 20


def format_entries(entries: Iterable[tuple[int, float]]) -> str:
    """Format ``(position, value)`` pairs, starting a new line at every 20th position."""
    parts: list[str] = []
    for position, value in entries:
        if position % ENTRIES_PER_LINE == 0:
            parts.append("\n")
        parts.append(f"{float(value):.2f} ")
    return "".join(parts)