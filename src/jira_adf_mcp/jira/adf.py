"""Atlassian Document Format (ADF) helpers.

Jira REST API v3 returns and accepts rich text as ADF trees. These helpers
render ADF to markdown for display, extract unformatted text from it, and
build minimal ADF documents from plain text for write requests.

All functions are pure: trees are read, never mutated, and nothing here
raises on malformed input.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Literal, TypedDict, Union

logger = logging.getLogger("jira_adf_mcp")

ADF_VERSION = 1
MAX_HEADING_LEVEL = 6

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


class ADFMark(TypedDict, total=False):
    """Inline formatting mark on a text node (bold, italic, link, ...)."""

    type: str
    attrs: dict[str, Any]


class ADFNode(TypedDict, total=False):
    """A single node of an ADF tree, discriminated by ``type``."""

    type: str
    content: List["ADFNode"]
    text: str
    attrs: dict[str, Any]
    marks: List[ADFMark]


class ADFDocument(TypedDict):
    """Root of every ADF tree."""

    type: Literal["doc"]
    version: int
    content: List[ADFNode]


# Document/node, legacy plain-string field, or absent value.
ADFInput = Union[ADFNode, ADFDocument, str, None]


def _is_node(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def _is_document(value: Any) -> bool:
    return (
        _is_node(value)
        and value["type"] == "doc"
        and isinstance(value.get("version"), int)
        and not isinstance(value.get("version"), bool)
        and isinstance(value.get("content"), list)
    )


def _children(node: ADFNode) -> list[ADFNode]:
    content = node.get("content")
    return content if isinstance(content, list) else []


def _heading_level(attrs: Any) -> int:
    level = attrs.get("level") if isinstance(attrs, dict) else None
    # JSON decoders may hand back 2.0 for 2.
    if isinstance(level, float) and level.is_integer():
        level = int(level)
    if not isinstance(level, int) or isinstance(level, bool):
        return 1
    return min(max(level, 1), MAX_HEADING_LEVEL)


class ADFToMarkdownParser:
    """Converts ADF trees to markdown, preserving structure and formatting.

    The parser holds no state; one instance can be shared by any number of
    concurrent callers.
    """

    def parse(self, adf: ADFInput) -> str:
        """Render ``adf`` as markdown.

        Plain strings pass through unchanged for backward compatibility with
        string description fields, and ``None`` renders as ``""``.
        """
        if isinstance(adf, str):
            return adf
        if not isinstance(adf, dict):
            return ""
        return self._parse_node(adf)

    def _parse_node(self, node: ADFNode) -> str:
        node_type = node.get("type")

        if node_type == "doc":
            return self._parse_content(_children(node))
        if node_type == "paragraph":
            return f"{self._parse_content(_children(node))}\n\n"
        if node_type == "text":
            text = node.get("text")
            return self.format_text(text if isinstance(text, str) else "", node.get("marks"))
        if node_type == "codeBlock":
            return self._parse_code_block(node)
        if node_type == "bulletList":
            return self._parse_bullet_list(node)
        if node_type == "orderedList":
            return self._parse_ordered_list(node)
        if node_type == "listItem":
            return self._parse_list_item(node)
        if node_type == "heading":
            return self._parse_heading(node)
        if node_type == "blockquote":
            return self._parse_blockquote(node)
        if node_type == "hardBreak":
            return "\n"
        if node_type == "rule":
            return "\n---\n\n"

        # Unknown node types still contribute their children.
        logger.debug("Rendering unknown ADF node type %r as container", node_type)
        return self._parse_content(_children(node))

    def _parse_content(self, content: list[ADFNode]) -> str:
        return "".join(self._parse_node(child) for child in content if isinstance(child, dict))

    def format_text(self, text: str, marks: list[ADFMark] | None) -> str:
        """Apply ``marks`` to ``text`` in list order.

        Each mark wraps the already formatted string, so a code mark followed
        by a strong mark puts the backticks inside the asterisks.
        """
        if not marks or not isinstance(marks, list):
            return text

        formatted = text
        for mark in marks:
            mark_type = mark.get("type") if isinstance(mark, dict) else None
            if mark_type == "strong":
                formatted = f"**{formatted}**"
            elif mark_type == "em":
                formatted = f"*{formatted}*"
            elif mark_type == "code":
                formatted = f"`{formatted}`"
            elif mark_type == "strike":
                formatted = f"~~{formatted}~~"
            elif mark_type == "link":
                attrs = mark.get("attrs")
                href = attrs.get("href") if isinstance(attrs, dict) else None
                if href and isinstance(href, str):
                    formatted = f"[{formatted}]({href})"
            # Any other mark leaves the text as-is.
        return formatted

    def _parse_code_block(self, node: ADFNode) -> str:
        attrs = node.get("attrs")
        language = attrs.get("language") if isinstance(attrs, dict) else None
        content = self._parse_content(_children(node))
        return f"```{language or ''}\n{content}\n```\n\n"

    def _parse_bullet_list(self, node: ADFNode) -> str:
        items = "".join(self._parse_list_item(item, "- ") for item in _children(node))
        return f"{items}\n"

    def _parse_ordered_list(self, node: ADFNode) -> str:
        items = "".join(
            self._parse_list_item(item, f"{index}. ")
            for index, item in enumerate(_children(node), start=1)
        )
        return f"{items}\n"

    def _parse_list_item(self, node: ADFNode, prefix: str = "- ") -> str:
        if not isinstance(node, dict):
            return f"{prefix}\n\n"
        content = self._parse_content(_children(node))
        return f"{prefix}{content.strip()}\n\n"

    def _parse_heading(self, node: ADFNode) -> str:
        hashes = "#" * _heading_level(node.get("attrs"))
        content = self._parse_content(_children(node))
        return f"{hashes} {content}\n\n"

    def _parse_blockquote(self, node: ADFNode) -> str:
        content = self._parse_content(_children(node))
        # Trailing blank lines of quoted paragraphs are quoted as well.
        quoted = "\n".join(f"> {line}" for line in content.split("\n"))
        return f"{quoted}\n\n"

    def extract_plain_text(self, adf: ADFInput) -> str:
        """Extract unformatted text from ``adf``.

        Marks, paragraph breaks, list prefixes and heading markers are all
        dropped; only the text runs are concatenated.
        """
        if isinstance(adf, str):
            return adf
        if not isinstance(adf, dict):
            return ""
        return self._extract_text_from_node(adf)

    def _extract_text_from_node(self, node: ADFNode) -> str:
        if node.get("type") == "text":
            text = node.get("text")
            return text if isinstance(text, str) else ""
        return "".join(
            self._extract_text_from_node(child)
            for child in _children(node)
            if isinstance(child, dict)
        )


adf_parser = ADFToMarkdownParser()


def parse_adf(adf: ADFInput) -> str:
    """Render ADF (or a legacy string) as markdown using the shared parser."""
    return adf_parser.parse(adf)


def extract_text_from_adf(adf: ADFInput) -> str:
    """Extract plain text from ADF (or a legacy string) using the shared parser."""
    return adf_parser.extract_plain_text(adf)


def text_to_adf(text: str | None) -> ADFDocument | None:
    """Convert plain text to an ADF document, one paragraph per blank-line block.

    Returns ``None`` for missing or blank input; callers omit the field from
    the request body in that case.
    """
    if text is None or not text.strip():
        return None

    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK.split(text.strip())]
    paragraphs = [p for p in paragraphs if p]
    if not paragraphs:
        return None

    content: list[ADFNode] = [
        {"type": "paragraph", "content": [{"type": "text", "text": paragraph}]}
        for paragraph in paragraphs
    ]
    return {"type": "doc", "version": ADF_VERSION, "content": content}


def ensure_adf_format(value: ADFInput) -> ADFDocument | None:
    """Return ``value`` as an ADF document.

    Documents are returned as-is, bare nodes are wrapped in a document and
    strings go through :func:`text_to_adf`.
    """
    if value is None:
        return None
    if _is_document(value):
        return value  # type: ignore[return-value]
    if _is_node(value) and value["type"] != "doc":
        return {"type": "doc", "version": ADF_VERSION, "content": [value]}
    if isinstance(value, str):
        return text_to_adf(value)
    return None
