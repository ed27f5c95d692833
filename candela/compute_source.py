"""Loading of compute shader sources with change detection by size and CRC-32."""

from __future__ import annotations

import os
import zlib

from candela.include import include_file

DEFAULT_INCLUDE_DIR = "Core/Shaders/"


class ComputeSource:
    """The text of a compute shader, with ``#include`` lines resolved.

    ``size`` is the byte length of the processed text and ``crc`` its CRC-32.
    ``textures_bound`` records whether the scene textures have been bound for
    the current program; it is cleared whenever the source is rebuilt.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        include_dir: str | os.PathLike[str] = DEFAULT_INCLUDE_DIR,
    ) -> None:
        self.path = os.fspath(path)
        self.include_dir = os.fspath(include_dir)
        self.text = ""
        self.size = 0
        self.crc = 0
        self.textures_bound = False
        self.builds = 0

    def load(self) -> str:
        """Read the file, resolve its includes and return the resulting text.

        An empty path keeps the current text. Raises
        :class:`candela.include.IncludeError` if the file or one of its
        includes cannot be read.
        """
        if self.path:
            self.text = include_file(self.path, "", self.include_dir)
        data = self.text.encode("utf-8")
        self.size = len(data)
        self.crc = zlib.crc32(data)
        return self.text

    def _rebuild(self) -> None:
        self.textures_bound = False
        self.builds += 1

    def reload(self) -> bool:
        """Load again; rebuild and return True only if the size or checksum changed."""
        previous = (self.size, self.crc)
        self.load()
        if (self.size, self.crc) != previous:
            self._rebuild()
            return True
        return False

    def force_reload(self) -> str:
        """Load again and rebuild regardless of changes; return the text."""
        self.textures_bound = False
        self.load()
        self._rebuild()
        return self.text