"""Code generation helper with indentation support."""
from __future__ import annotations


class CodeGen:
    """Accumulates generated lines at the current indentation level."""

    def __init__(self, indent: str = "    ") -> None:
        self._lines: list[str] = []
        self._indent = 0
        self._indent_str = indent

    def line(self, text: str = "") -> None:
        if text:
            self._lines.append(self._indent_str * self._indent + text)
        else:
            self._lines.append("")

    def lines(self, *texts: str) -> None:
        for text in texts:
            self.line(text)

    def indent(self) -> None:
        self._indent += 1

    def dedent(self) -> None:
        if self._indent > 0:
            self._indent -= 1

    def block(self, header: str, footer: str = "") -> "_BlockContext":
        """Context manager emitting ``header``, an indented body, then ``footer``."""

        return _BlockContext(self, header, footer)

    def output(self) -> str:
        """Generated text with a trailing newline."""

        return "\n".join(self._lines) + "\n"


class _BlockContext:
    def __init__(self, gen: CodeGen, header: str, footer: str) -> None:
        self._gen = gen
        self._header = header
        self._footer = footer

    def __enter__(self) -> "_BlockContext":
        self._gen.line(self._header)
        self._gen.indent()
        return self

    def __exit__(self, *args) -> None:
        self._gen.dedent()
        if self._footer:
            self._gen.line(self._footer)
