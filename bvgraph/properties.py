"""A simple key=value property file, kept sorted by key."""

from __future__ import annotations

import re
import time
from typing import Iterable, Mapping, TextIO

_COMMENT = re.compile(r"#.*")
_SPLITTER = re.compile(r"(.*?)\s*=\s*(.*)")


class Properties:
    """String properties read from and written to ``key=value`` text."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def load(self, stream: Iterable[str]) -> None:
        """Read properties from text lines; lines starting with '#' are comments.

        Raises ValueError on a line that is neither a comment nor holds '='.
        """
        for lineno, raw in enumerate(stream, start=1):
            line = raw[:-1] if raw.endswith("\n") else raw
            if _COMMENT.fullmatch(line):
                continue
            match = _SPLITTER.fullmatch(line)
            if match is None:
                raise ValueError(f"line {lineno}: not a property: {line!r}")
            self._entries[match.group(1)] = match.group(2)

    def store(self, stream: TextIO, title: str = "") -> None:
        """Write a two-line comment header, then every property in key order."""
        stamp = time.asctime(time.localtime())
        stream.write(f"# {title}\n# {stamp}\n")
        for key in sorted(self._entries):
            stream.write(f"{key}={self._entries[key]}\n")

    def set_property(self, key: str, value: str) -> None:
        self._entries[key] = value

    def has_property(self, name: str) -> bool:
        return name in self._entries

    def get_property(self, name: str) -> str:
        """Return the value of ``name``; raises KeyError if it is not set."""
        try:
            return self._entries[name]
        except KeyError:
            raise KeyError(f"no such property: {name}") from None

    def __len__(self) -> int:
        return len(self._entries)