"""Shared types for linguist-colors: LanguageInfo, Report, Format."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from linguist_colors.core.color import Color


@dataclass
class LanguageInfo:
    """One entry of Linguist's languages.yml."""

    name: str
    language_id: int
    ace_mode: str
    type: str  # programming, markup, data, prose
    color: str | None = None  # raw web colour, e.g. '#3572A5'
    extensions: list[str] | None = None
    tm_scope: str | None = None


@dataclass
class Report:
    """Both orderings plus what was dropped on the way, ready for a Format."""

    source: str = ''
    by_name: list[tuple[str, Color]] = field(default_factory=list)
    by_nearest: list[tuple[str, Color]] = field(default_factory=list)
    total: int = 0  # languages in the catalog, with or without colour
    skipped: dict[str, str] = field(default_factory=dict)  # name -> reason

    @property
    def colored(self) -> int:
        return len(self.by_name)


class Format:
    """A self-registering output format.

    Usage in a format module:

        fmt = Format(name='html', help='Render both tables as an HTML page')

        @fmt.render
        def render(report, args):
            return '<html>...'

    The render function returns the document text, or None if it wrote
    its own output (e.g. a binary file).
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._render_fn: Callable | None = None

    def render(self, fn: Callable) -> Callable:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def execute(self, report: Report, args: Any) -> str | None:
        """Execute the format's render function."""
        if self._render_fn is None:
            raise RuntimeError(f'Format {self.name} has no render function')
        return self._render_fn(report, args)
