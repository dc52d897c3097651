"""HTML to line-oriented plain text."""

import logging
import re
from collections.abc import Iterator
from types import MappingProxyType

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

logger = logging.getLogger(__name__)

# Elements whose end starts a new visual line
_BLOCK_TAGS = (
    "div", "li", "h1", "h2", "h3", "h4", "h5", "h6", "tr", "ul", "ol",
    "section", "article", "header", "footer", "title",
)
_NUMERIC_ENTITY_RE = re.compile(r"&#(x[0-9a-fA-F]+|\d+);")
_HORIZONTAL_WS_RE = re.compile(r"[ \t\f\v\u00a0]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")

ENTITIES = MappingProxyType({
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#039;": "'",
    "&#39;": "'",
    "&apos;": "'",
    "&nbsp;": " ",
    "&frac12;": "½",
    "&frac14;": "¼",
    "&frac34;": "¾",
    "&frac13;": "⅓",
    "&frac23;": "⅔",
    "&ndash;": "–",
    "&mdash;": "—",
    "&hellip;": "…",
})
_NAMED_ENTITY_RE = re.compile("|".join(re.escape(e) for e in ENTITIES))

# Entity decoding can expose another entity ("&amp;lt;"), so decode to a
# fixed point but never forever.
_MAX_DECODE_PASSES = 5


def _decode_numeric(match: re.Match) -> str:
    code = match.group(1)
    try:
        value = int(code[1:], 16) if code[0] in "xX" else int(code)
        return chr(value)
    except (ValueError, OverflowError):
        return ""


def decode_entities(text: str) -> str:
    """
    Decode the fixed entity table plus numeric character references.

    Unknown named entities are left untouched.
    """
    for _ in range(_MAX_DECODE_PASSES):
        decoded = _NAMED_ENTITY_RE.sub(lambda m: ENTITIES[m.group(0)], text)
        decoded = _NUMERIC_ENTITY_RE.sub(_decode_numeric, decoded)
        if decoded == text:
            break
        text = decoded
    return text


def make_soup(html: str | bytes) -> BeautifulSoup:
    """Parse markup with html.parser; markup the parser rejects yields an empty tree."""
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        logger.warning(f"HTML parser rejected the page: {e}")
        return BeautifulSoup("", "html.parser")


def tag_text(tag: Tag | None) -> str:
    """Whitespace-collapsed, entity-decoded text of one element."""
    if tag is None:
        return ""
    return " ".join(decode_entities(tag.get_text(" ")).split())


def fragment_text(fragment: str) -> str:
    """Plain text of a short inline HTML fragment such as a schema step."""
    if "<" not in fragment:
        return " ".join(decode_entities(fragment).split())
    return tag_text(make_soup(fragment))


def normalize_html(html: str) -> str:
    """
    Turn an HTML document into clean, line-oriented text.

    - <script>/<style> bodies and comments are dropped
    - <br>, </p> and block closers become line breaks
    - remaining tags are stripped and entities decoded
    - horizontal whitespace is collapsed, each line trimmed, and runs of
      blank lines reduced to a single blank line

    Never raises. The result contains no '<' or '>' characters, and
    normalizing the result again returns it unchanged.
    """
    if not html:
        return ""
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")

    soup = make_soup(html)
    for tag in soup.find_all(["script", "style"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for paragraph in soup.find_all("p"):
        paragraph.append("\n\n")
    for block in soup.find_all(_BLOCK_TAGS):
        block.append("\n")

    # get_text() skips comments and doctypes
    text = decode_entities(soup.get_text())

    # Decoded &lt;/&gt; and stray brackets must not survive as delimiters
    text = text.replace("<", "").replace(">", "")

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WS_RE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def text_lines(text: str) -> list[str]:
    """Ordered, trimmed, non-empty lines of normalized text."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def iter_raw_lines(text: str) -> Iterator[str]:
    """Every line including blanks, trimmed; used for section scanning."""
    for line in text.splitlines():
        yield line.strip()
