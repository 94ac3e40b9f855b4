"""Note text to HTML conversion with interactive todo checkboxes.

Supported syntax, applied per line:

- ``**bold**``
- ``*italic*`` or ``_italic_``
- ``__underline__``
- ``~~strikethrough~~``
- ``[] task`` / ``[x] task`` todo lines rendered as checkboxes

The italic rule runs before the underline rule, so ``__x__`` is consumed by
the single-underscore italic pattern and renders as ``<em></em>x<em></em>``.
Stored notes were written against that behaviour, so it is kept as is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

UNCHECKED_TODO = re.compile(r"^\[\]\s+(.+)$")
CHECKED_TODO = re.compile(r"^\[x\]\s+(.+)$", re.IGNORECASE)
_UNCHECKED_MARKER = re.compile(r"^\[\]\s+")
_CHECKED_MARKER = re.compile(r"^\[x\]\s+", re.IGNORECASE)

# Order matters: bold must run before the single-delimiter italic rule.
_INLINE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"(\*|_)(.*?)\1"), r"<em>\2</em>"),
    (re.compile(r"__(.*?)__"), r"<u>\1</u>"),
    (re.compile(r"~~(.*?)~~"), r"<s>\1</s>"),
)

LINE_BREAK = "<br>"


@dataclass(frozen=True)
class RenderedLine:
    """One rendered note line and whether it is a todo checkbox."""

    index: int
    html: str
    is_todo: bool = False
    checked: bool = False


def escape_html(text: str) -> str:
    """Escape the five HTML-sensitive characters."""

    for raw, entity in _HTML_ESCAPES:
        text = text.replace(raw, entity)
    return text


def apply_inline_markup(line: str) -> str:
    """Apply bold, italic, underline and strikethrough to an escaped line."""

    for pattern, replacement in _INLINE_RULES:
        line = pattern.sub(replacement, line)
    return line


def _todo_html(index: int, label: str, checked: bool) -> str:
    checked_attr = " checked" if checked else ""
    text_class = "todo-text todo-checked" if checked else "todo-text"
    return (
        f'<label class="todo-item" data-line="{index}">'
        f'<input type="checkbox" class="todo-checkbox" data-line="{index}"{checked_attr} />'
        f'<span class="{text_class}">{label}</span>'
        "</label>"
    )


def render_line(index: int, line: str) -> RenderedLine:
    """Classify and render a single already-escaped line."""

    if UNCHECKED_TODO.match(line):
        label = _UNCHECKED_MARKER.sub("", line, count=1)
        return RenderedLine(index, _todo_html(index, label, False), is_todo=True)
    if CHECKED_TODO.match(line):
        label = _CHECKED_MARKER.sub("", line, count=1)
        return RenderedLine(index, _todo_html(index, label, True), is_todo=True, checked=True)
    return RenderedLine(index, apply_inline_markup(line))


def classify_lines(text: str | None) -> list[RenderedLine]:
    """Escape ``text`` once and render each line, keeping its zero-based index."""

    if not text:
        return []
    return [render_line(index, line) for index, line in enumerate(escape_html(text).split("\n"))]


def render_note(text: str | None) -> str:
    """Return sanitized HTML for a note body.

    Consecutive todo lines are stacked without a ``<br>`` between them; every
    other pair of adjacent lines is separated by one.
    """

    lines = classify_lines(text)
    parts: list[str] = []
    for position, line in enumerate(lines):
        if position:
            previous = lines[position - 1]
            if not (previous.is_todo and line.is_todo):
                parts.append(LINE_BREAK)
        parts.append(line.html)
    return "".join(parts)


def toggle_checkbox_line(text: str, line_index: int, checked: bool) -> str:
    """Return ``text`` with the todo marker on ``line_index`` set to ``checked``.

    Operates on the raw note text. Out-of-range indexes and non-todo lines
    leave the text unchanged.
    """

    if not text:
        return text
    lines = text.split("\n")
    if line_index < 0 or line_index >= len(lines):
        return text

    line = lines[line_index]
    if UNCHECKED_TODO.match(line):
        if not checked:
            return text
        lines[line_index] = "[x]" + line[2:]
    elif CHECKED_TODO.match(line):
        if checked:
            return text
        lines[line_index] = "[]" + line[3:]
    else:
        return text
    return "\n".join(lines)


__all__ = [
    "LINE_BREAK",
    "RenderedLine",
    "apply_inline_markup",
    "classify_lines",
    "escape_html",
    "render_line",
    "render_note",
    "toggle_checkbox_line",
]
