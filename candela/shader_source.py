"""Loading of shader program sources with change detection by size and CRC-32."""

from __future__ import annotations

import os
import zlib

from candela.include import include_file

DEFAULT_INCLUDE_DIR = "Core/Shaders/"


def _fingerprint(text: str) -> tuple[int, int]:
    data = text.encode("utf-8")
    return len(data), zlib.crc32(data)


class ShaderSource:
    """The text of one shader stage, with ``#include`` lines resolved.

    ``size`` is the byte length of the processed text and ``crc`` its CRC-32;
    both are zero until the source is loaded.
    """

    def __init__(
        self, path: str | os.PathLike[str], include_dir: str | os.PathLike[str] = DEFAULT_INCLUDE_DIR
    ) -> None:
        self.path = os.fspath(path)
        self.include_dir = os.fspath(include_dir)
        self.text = ""
        self.size = 0
        self.crc = 0

    def load(self) -> str:
        """Read the file, resolve its includes and return the resulting text.

        Raises :class:`candela.include.IncludeError` if the file or one of its
        includes cannot be read.
        """
        self.text = include_file(self.path, "", self.include_dir)
        self.size, self.crc = _fingerprint(self.text)
        return self.text

    def reload(self) -> bool:
        """Load again and report whether the size or checksum changed."""
        previous = (self.size, self.crc)
        self.load()
        return (self.size, self.crc) != previous


class ProgramSource:
    """The sources of a vertex, fragment and optional geometry shader.

    Vertex and fragment text has its includes resolved; the geometry text is
    taken from its file as it stands. An empty ``geometry_path`` means the
    program has no geometry stage.
    """

    def __init__(
        self,
        vertex_path: str | os.PathLike[str],
        fragment_path: str | os.PathLike[str],
        geometry_path: str | os.PathLike[str] = "",
        include_dir: str | os.PathLike[str] = DEFAULT_INCLUDE_DIR,
    ) -> None:
        self.vertex = ShaderSource(vertex_path, include_dir)
        self.fragment = ShaderSource(fragment_path, include_dir)
        self.geometry_path = os.fspath(geometry_path)
        self.geometry_text = ""
        self.geometry_size = 0
        self.geometry_crc = 0

    @property
    def has_geometry(self) -> bool:
        return len(self.geometry_text) > 0

    def _state(self) -> tuple[int, ...]:
        return (
            self.vertex.crc,
            self.fragment.crc,
            self.geometry_crc,
            self.vertex.size,
            self.fragment.size,
            self.geometry_size,
        )

    def load(self) -> None:
        """Read every stage.

        A missing geometry file raises :class:`OSError`; a missing vertex or
        fragment file raises :class:`candela.include.IncludeError`.
        """
        if self.geometry_path:
            with open(self.geometry_path, encoding="utf-8", newline="") as handle:
                self.geometry_text = handle.read()
        self.vertex.load()
        self.fragment.load()
        self.geometry_size, self.geometry_crc = _fingerprint(self.geometry_text)

    def reload(self) -> bool:
        """Load again and report whether any stage's size or checksum changed."""
        previous = self._state()
        self.load()
        return self._state() != previous