"""Conversion between Markdown and HTML documents."""

from __future__ import annotations

import re
from html.parser import HTMLParser

from markdown_it import MarkdownIt

_MARKDOWN = MarkdownIt("commonmark", {"html": False})
_VOID = frozenset("area base br col embed hr img input link meta source track wbr".split())
_SKIPPED = frozenset("script style head noscript template".split())
_BLOCKS = frozenset("p div section article header footer main nav aside table tr form figure address".split())
_INLINE = {"strong": "**", "b": "**", "em": "_", "i": "_"}


def convert_markdown_to_html(markdown: bytes | str) -> str:
    """Render a Markdown document as HTML."""
    if isinstance(markdown, bytes):
        markdown = markdown.decode("utf-8", errors="replace")
    return _MARKDOWN.render(markdown)


def convert_html_to_markdown(html_content: str) -> str:
    """Convert an HTML document to Markdown, without surrounding whitespace."""
    parser = _TreeBuilder()
    parser.feed(html_content)
    parser.close()
    text = re.sub(r"^[ \t]+$", "", _render(parser.root), flags=re.MULTILINE)
    return re.sub(r"\n{3,}", "\n\n", text).strip()


class _TreeBuilder(HTMLParser):
    """Builds a tree of (tag, attrs, children) tuples; text nodes are strings."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = ("#root", {}, [])
        self._stack = [self.root]

    def handle_starttag(self, tag, attrs):
        node = (tag, {name: value or "" for name, value in attrs}, [])
        self._stack[-1][2].append(node)
        if tag not in _VOID:
            self._stack.append(node)

    def handle_startendtag(self, tag, attrs):
        self._stack[-1][2].append((tag, {name: value or "" for name, value in attrs}, []))

    def handle_endtag(self, tag):
        depths = [i for i, node in enumerate(self._stack) if i and node[0] == tag]
        if depths:
            del self._stack[depths[-1]:]

    def handle_data(self, data):
        self._stack[-1][2].append(data)


def _text(node) -> str:
    return node if isinstance(node, str) else "".join(map(_text, node[2]))


def _block(content: str) -> str:
    content = content.strip()
    return f"\n\n{content}\n\n" if content else ""


def _item(body: str, marker: str) -> str:
    first, *rest = re.sub(r"\n{2,}", "\n", body.strip()).split("\n")
    return "\n".join([marker + first] + [" " * len(marker) + line if line else "" for line in rest])


def _list(tag: str, attrs: dict, children: list) -> str:
    start = attrs.get("start", "1")
    number = int(start) if tag == "ol" and start.isdigit() else 1
    items = []
    for child in children:
        body = "" if isinstance(child, str) else "".join(map(_render, child[2])) if child[0] == "li" else _render(child)
        if body.strip():
            items.append(_item(body, f"{number}. " if tag == "ol" else "- "))
            number += 1
    return _block("\n".join(items))


def _render(node) -> str:
    if isinstance(node, str):
        return re.sub(r"([\\`*_\[\]])", r"\\\1", re.sub(r"\s+", " ", node))
    tag, attrs, children = node
    if tag in _SKIPPED:
        return ""
    inner = "".join(map(_render, children))
    title = f' "{attrs["title"]}"' if attrs.get("title") else ""
    if tag in _BLOCKS:
        return _block(inner)
    if re.fullmatch(r"h[1-6]", tag):
        content = re.sub(r"\s+", " ", inner).strip()
        return _block(f"{'#' * int(tag[1])} {content}") if content else ""
    if tag in _INLINE:
        core, mark = inner.strip(), _INLINE[tag]
        return inner.replace(core, f"{mark}{core}{mark}", 1) if core else inner
    if tag == "a":
        href = attrs.get("href", "").strip()
        return f"[{inner.strip()}]({href}{title})" if href and inner.strip() else inner.strip()
    if tag == "img":
        src = attrs.get("src", "").strip()
        return f"![{attrs.get('alt', '')}]({src}{title})" if src else ""
    if tag in ("ul", "ol"):
        return _list(tag, attrs, children)
    if tag == "li":
        return _block(_item(inner, "- "))
    if tag == "blockquote":
        return _block("\n".join(f"> {line}" if line else ">" for line in inner.strip().split("\n")))
    if tag == "br":
        return "  \n"
    if tag == "hr":
        return "\n\n* * *\n\n"
    if tag == "code":
        text = _text(node)
        fence = "`" * (max(map(len, re.findall(r"`+", text)), default=0) + 1)
        padded = f" {text} " if text.startswith("`") or text.endswith("`") else text
        return f"{fence}{padded}{fence}" if text else ""
    if tag == "pre":
        text = _text(node).removeprefix("\n").rstrip("\n")
        return _block("\n".join(f"    {line}" if line else "" for line in text.split("\n"))) if text.strip() else ""
    return inner