"""Processing of ``#include "file"`` and ``#inject`` lines in shader text."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class IncludeError(Exception):
    """Raised when a file named by an include cannot be loaded."""


class LineDirectives(Enum):
    """Which ``#line`` directives are written around included text."""

    NONE = "none"
    C = "c"
    GLSL = "glsl"


@dataclass(frozen=True)
class IncludeDirective:
    """One ``#include`` or ``#inject`` line found in a text.

    ``offset`` is the start of the line, ``end`` the position of its line
    break; ``filename`` is None for ``#inject``.
    """

    offset: int
    end: int
    filename: str | None
    next_line_after: int

    @property
    def is_inject(self) -> bool:
        return self.filename is None


_BLANKS = (" ", "\t")
_LINE_BREAKS = ("\r", "\n")
_WHITESPACE = (" ", "\t", "\r", "\n")


def find_includes(text: str) -> list[IncludeDirective]:
    """Return every include and inject directive in ``text``, in order."""
    length = len(text)

    def at(i: int) -> str:
        return text[i] if i < length else ""

    directives: list[IncludeDirective] = []
    line = 1
    pos = 0
    while pos < length:
        start = pos
        s = pos
        while at(s) in _BLANKS:
            s += 1
        if at(s) == "#":
            s += 1
            while at(s) in _BLANKS:
                s += 1
            if text.startswith("include", s) and at(s + 7) in _WHITESPACE:
                s += 7
                while at(s) in _BLANKS:
                    s += 1
                if at(s) == '"':
                    s += 1
                    t = s
                    while at(t) not in ('"', "\n", "\r", ""):
                        t += 1
                    if at(t) == '"':
                        name = text[s:t]
                        s = t
                        while at(s) not in ("\r", "\n", ""):
                            s += 1
                        directives.append(IncludeDirective(start, s, name, line + 1))
            elif text.startswith("inject", s) and (
                at(s + 6) in _WHITESPACE or at(s + 6) == ""
            ):
                while at(s) not in ("\r", "\n", ""):
                    s += 1
                directives.append(IncludeDirective(start, s, None, line + 1))
        while at(s) not in ("\r", "\n", ""):
            s += 1
        if at(s) in _LINE_BREAKS:
            s += 2 if {at(s), at(s + 1)} == {"\r", "\n"} else 1
        line += 1
        pos = s
    return directives


def _line_number(n: int) -> str:
    """Format a number right-aligned in seven columns followed by a space."""
    return str(n)[-7:].rjust(7) + " "


def include_string(
    text: str,
    inject: str | None = None,
    path_to_includes: str | os.PathLike[str] = ".",
    filename: str | None = None,
    line_directives: LineDirectives = LineDirectives.NONE,
) -> str:
    """Replace include lines with file contents and inject lines with ``inject``."""
    include_dir = os.fspath(path_to_includes)
    parts: list[str] = []
    last = 0
    for index, directive in enumerate(find_includes(text)):
        parts.append(text[last : directive.offset])

        if line_directives is LineDirectives.C:
            parts.append(f'#line {_line_number(1)} "{directive.filename or ""}"\n')
        elif line_directives is LineDirectives.GLSL and any(parts):
            parts.append(f"#line {_line_number(1)} {_line_number(index + 1)}\n")

        if directive.filename is None:
            if inject:
                parts.append(inject)
        else:
            parts.append(
                include_file(
                    f"{include_dir}/{directive.filename}",
                    inject,
                    include_dir,
                    line_directives,
                )
            )

        if line_directives is LineDirectives.C:
            parts.append(
                f"\n#line{_line_number(directive.next_line_after)} "
                f"{filename if filename is not None else 'source-file'}"
            )
        elif line_directives is LineDirectives.GLSL:
            parts.append(
                f"\n#line{_line_number(directive.next_line_after)} {_line_number(0)}"
            )
        last = directive.end
    parts.append(text[last:])
    return "".join(parts)


def include_strings(
    strings: Iterable[str],
    inject: str | None = None,
    path_to_includes: str | os.PathLike[str] = ".",
    filename: str | None = None,
    line_directives: LineDirectives = LineDirectives.NONE,
) -> str:
    """Concatenate ``strings`` and process includes in the result."""
    return include_string(
        "".join(strings), inject, path_to_includes, filename, line_directives
    )


def include_file(
    filename: str | os.PathLike[str],
    inject: str | None = None,
    path_to_includes: str | os.PathLike[str] = ".",
    line_directives: LineDirectives = LineDirectives.NONE,
) -> str:
    """Load ``filename`` and process includes in its text.

    The file itself is opened directly; ``path_to_includes`` is only used for
    the files it includes.
    """
    name = os.fspath(filename)
    try:
        with open(name, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise IncludeError(f"Error: couldn't load '{name}'") from exc
    return include_string(text, inject, path_to_includes, name, line_directives)