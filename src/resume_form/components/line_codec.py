"""Line-list codecs for bullet list editing surfaces.

A line list is the canonical ordered sequence of plain-text lines. Editing
widgets never see it directly; they work on one of two encodings:

- rich: one ``<div>`` paragraph per line, rendered for a content-editable
  surface and read back from the markup the surface reports;
- plain: a single text blob with an optional visible bullet marker per line,
  for surfaces whose rich editing cannot report line boundaries reliably.

Both decoders are total functions over any string.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from jinja2 import Environment, PackageLoader, select_autoescape

from ..core.config import FormConfig
from ..interfaces.codec import LineListCodec

logger = logging.getLogger(__name__)

NORMALIZED_LINE_BREAK = "\n"
PLAIN_LINE_BREAK = "\r\n"

_LINE_BREAKS = re.compile(r"\r\n|\r|\n")
_DOUBLED_BREAK = NORMALIZED_LINE_BREAK * 2

# Elements a content-editable surface turns into separate lines.
_BLOCK_TAGS = frozenset({"div", "p", "li", "ul", "ol", "section", "article", "blockquote", "pre",
                         "h1", "h2", "h3", "h4", "h5", "h6"})


def normalize_line_breaks(text: str) -> str:
    """Turn CRLF, CR and LF into a single LF. Idempotent."""
    return _LINE_BREAKS.sub(NORMALIZED_LINE_BREAK, text)


def dedupe_line_breaks(text: str) -> str:
    """Collapse doubled breaks; some editors emit two per Enter key."""
    return text.replace(_DOUBLED_BREAK, NORMALIZED_LINE_BREAK)


def split_lines(text: str) -> list[str]:
    """Split on any line break variant. The empty string is the empty list."""
    if not text:
        return []
    return normalize_line_breaks(text).split(NORMALIZED_LINE_BREAK)


def get_jinja_env() -> Environment:
    return Environment(
        loader=PackageLoader("resume_form", "templates"),
        autoescape=select_autoescape(["html", "html.j2"]),
        keep_trailing_newline=False,
    )


def _drop_trailing_breaks(soup: BeautifulSoup) -> None:
    """Remove a ``<br>`` that ends its block; it draws no extra line."""
    for br in soup.find_all("br"):
        if br.parent is not soup and br.parent.name not in _BLOCK_TAGS:
            continue
        if not any(not isinstance(s, Comment) for s in br.next_siblings):
            br.decompose()


def _loose_lines(text: str) -> list[str]:
    """Lines of text lying outside any block: breaks are the only boundaries."""
    text = dedupe_line_breaks(normalize_line_breaks(text))
    if text == NORMALIZED_LINE_BREAK:
        return []
    return split_lines(text)


def _block_lines(text: str) -> list[str]:
    """Lines of one block's own text; an empty block is one empty line."""
    return normalize_line_breaks(text).split(NORMALIZED_LINE_BREAK)


def _paragraphs(node: Tag, in_block: bool = False) -> list[str]:
    """Lines below ``node`` in document order, one or more per block element."""
    has_blocks = any(isinstance(c, Tag) and c.name in _BLOCK_TAGS for c in node.children)
    paragraphs: list[str] = []
    buffer: list[str] = []

    def flush() -> None:
        text = "".join(buffer)
        buffer.clear()
        # whitespace between block siblings is markup formatting, not content
        if has_blocks and not text.strip():
            return
        paragraphs.extend(_block_lines(text) if in_block else _loose_lines(text))

    for child in node.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, Tag) and child.name in _BLOCK_TAGS:
            if buffer:
                flush()
            paragraphs.extend(_paragraphs(child, in_block=True) or [""])
        elif isinstance(child, Tag):
            buffer.append(child.get_text())
        elif isinstance(child, NavigableString):
            buffer.append(str(child))
    if buffer:
        flush()
    return paragraphs


def _surface_lines(markup: str) -> list[str]:
    soup = BeautifulSoup(markup, "html.parser")
    _drop_trailing_breaks(soup)
    for br in soup.find_all("br"):
        br.replace_with(NORMALIZED_LINE_BREAK)
    return _paragraphs(soup)


def inner_text(markup: str) -> str:
    """Approximate what the editing surface reports as its text content.

    Block elements become separate lines and ``<br>`` becomes a line break.
    """
    return NORMALIZED_LINE_BREAK.join(_surface_lines(markup))


class RichTextCodec:
    """Paragraph-per-line encoding for content-editable surfaces.

    Encoding an empty list still yields one empty paragraph so the surface
    stays focusable; that paragraph decodes to the empty list, which makes
    ``[""]`` the one list that does not survive a round trip. Each block
    element decodes to its own line, empty blocks included. Text outside any
    block splits on line breaks, with doubled breaks collapsed since some
    editors emit two per Enter key.
    """

    TEMPLATE = "rich/paragraphs.html.j2"

    def __init__(self, env: Environment | None = None):
        self._env = env or get_jinja_env()
        self._template = self._env.get_template(self.TEMPLATE)

    def encode(self, lines: list[str]) -> str:
        return self._template.render(lines=list(lines))

    def decode(self, surface: str) -> list[str]:
        lines = _surface_lines(surface)
        if lines == [""]:
            return []
        return lines


class PlainTextCodec:
    """Text-blob encoding with an optional ``"<marker> "`` prefix per line.

    Args:
        show_bullet_points: Whether lines carry the visible marker
        marker: The single marker character

    With bullets shown, decoding drops lines that are a bare marker, strips
    ``"<marker> "`` prefixes, and merges a line that starts with the marker
    but no space into the previous line: deleting the space after a marker
    is how a user joins two bullets in a plain textarea.
    """

    def __init__(self, show_bullet_points: bool = True, marker: str = "•"):
        self.show_bullet_points = show_bullet_points
        self.marker = marker

    @property
    def prefix(self) -> str:
        return f"{self.marker} " if self.show_bullet_points else ""

    def encode(self, lines: list[str]) -> str:
        return PLAIN_LINE_BREAK.join(f"{self.prefix}{line}" for line in lines)

    def decode(self, surface: str) -> list[str]:
        lines = split_lines(surface)
        if not self.show_bullet_points:
            return lines

        decoded: list[str] = []
        for line in lines:
            if line == self.marker:
                continue
            if line.startswith(self.prefix):
                decoded.append(line[len(self.prefix):])
            elif line.startswith(self.marker):
                rest = line[len(self.marker):]
                if decoded:
                    decoded[-1] = _join_merged(decoded[-1], rest)
                else:
                    decoded.append(rest)
            else:
                decoded.append(line)
        return decoded


def _join_merged(previous: str, rest: str) -> str:
    if previous and rest and not previous[-1].isspace() and not rest[0].isspace():
        return f"{previous} {rest}"
    return previous + rest


def select_codec(
    needs_fallback: bool,
    show_bullet_points: bool | None = None,
    config: FormConfig | None = None,
) -> LineListCodec:
    """Pick the codec for one editing widget from the capability probe result.

    The rich surface draws its own bullets, so ``show_bullet_points`` only
    affects the plain-text fallback.
    """
    config = config or FormConfig()
    if show_bullet_points is None:
        show_bullet_points = config.show_bullet_points
    if needs_fallback:
        logger.debug(f"Using plain-text codec (bullets={show_bullet_points})")
        return PlainTextCodec(show_bullet_points=show_bullet_points, marker=config.bullet_marker)
    logger.debug("Using rich-text codec")
    return RichTextCodec()
