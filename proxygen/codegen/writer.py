"""
Indentation-aware text buffer.

Writer simplifies producing well-formatted source: the current
indentation is applied exactly once to every non-empty physical line,
whether the text arrives in one call or is split across several.
"""

from __future__ import annotations

from typing import Optional

from ..utils.exceptions import ConfigurationError


class Writer:
    """Accumulates source text under nested indent/outdent scopes."""

    def __init__(self, indent_size: Optional[int] = None):
        if indent_size is None:
            from ..utils.config import get_config
            indent_size = get_config().generation.indent_size
        self.indent_size = indent_size
        self._content = ""
        self._level = 0

    @property
    def content(self) -> str:
        return self._content

    @property
    def indentation_level(self) -> int:
        return self._level

    def indent(self) -> "Writer":
        self._level += 1
        return self

    def outdent(self) -> "Writer":
        if self._level == 0:
            raise ConfigurationError("The indentation level cannot be less than zero.")
        self._level -= 1
        return self

    def writeln(self, content: str = "") -> "Writer":
        return self.write(content + "\n")

    def write(self, content: str) -> "Writer":
        lines = content.split("\n")
        last = len(lines) - 1
        for i, line in enumerate(lines):
            if self._level > 0 and line and (not self._content or self._content.endswith("\n")):
                self._content += " " * (self._level * self.indent_size)

            self._content += line

            if i < last:
                self._content += "\n"

        return self

    def rtrim(self) -> "Writer":
        """Strip trailing whitespace, keeping one final newline if there was one."""
        add_newline = self._content.endswith("\n")
        self._content = self._content.rstrip()
        if add_newline:
            self._content += "\n"
        return self

    def reset(self) -> "Writer":
        self._content = ""
        self._level = 0
        return self
