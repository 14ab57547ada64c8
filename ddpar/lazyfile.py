"""A named output file that is only created once something asks for it."""

from __future__ import annotations

from typing import TextIO


class LazyFile:
    """Opens its file for writing on first use, so unused files never appear."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._handle: TextIO | None = None

    @property
    def is_open(self) -> bool:
        """Whether the file has been opened and not closed since."""
        return self._handle is not None

    def stream(self) -> TextIO:
        """The open file, opening (and truncating) it on first call."""
        if self._handle is None:
            if not self.name:
                raise ValueError("no file name set")
            self._handle = open(self.name, "w", encoding="utf-8")
        return self._handle

    def close(self) -> None:
        """Close the file if it is open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def reset(self) -> None:
        """Close the file and forget its name."""
        self.close()
        self.name = ""

    def __enter__(self) -> LazyFile:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()