"""Minimal region model for splicing text-based XML-like config files.

Native config files (AndroidManifest.xml, Info.plist) are edited as text so
the generator's formatting and comments survive untouched. This module finds
the regions those edits target:

- find_element() locates an element by an attribute value and returns its
  (open tag, inner content, close tag) triple with offsets.
- last_insertion_point() returns the offset of the *last* closing-root
  sequence. The last occurrence is used on purpose: nested dict closings
  may appear earlier in the file, and the final one marks the root dict.
  This assumes the file has a single top-level <dict>.
"""
import re
from dataclasses import dataclass
from typing import Optional, Pattern

ATTRIBUTE_PATTERN = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
PLIST_ROOT_CLOSE = re.compile(r"</dict>\s*</plist>")


@dataclass
class ElementRegion:
    """An element located in a text document."""

    start: int
    open_end: int
    close_start: int
    end: int
    open_tag: str
    inner: str
    close_tag: str

    def replace_inner(self, text: str, new_inner: str) -> str:
        """Return text with this element's inner content replaced."""
        return text[:self.open_end] + new_inner + text[self.close_start:]


def _open_tag_end(text: str, start: int) -> int:
    """Index of the '>' closing the tag opened at start, honouring quotes."""
    quote = None
    for index in range(start, len(text)):
        char = text[index]
        if quote:
            if char == quote:
                quote = None
        elif char in ('"', "'"):
            quote = char
        elif char == '>':
            return index
    return -1


def parse_attributes(open_tag: str) -> dict:
    attributes = {}
    for match in ATTRIBUTE_PATTERN.finditer(open_tag):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        attributes[match.group(1)] = value
    return attributes


def find_element(text: str, tag: str, attribute: str, value: str) -> Optional[ElementRegion]:
    """Find the first <tag> whose attribute equals value.

    Self-closing tags are ignored since they have no inner content to extend.
    The element ends at the next </tag>, so nested elements of the same tag
    are not supported (activities never nest).
    """
    opener = f"<{tag}"
    closer = f"</{tag}>"
    position = 0

    while True:
        start = text.find(opener, position)
        if start == -1:
            return None

        following = text[start + len(opener):start + len(opener) + 1]
        if following and not (following.isspace() or following in ">/"):
            # e.g. <activity-alias when looking for <activity
            position = start + len(opener)
            continue

        tag_end = _open_tag_end(text, start)
        if tag_end == -1:
            return None

        open_tag = text[start:tag_end + 1]
        position = tag_end + 1

        if open_tag.rstrip('>').rstrip().endswith('/'):
            continue
        if parse_attributes(open_tag).get(attribute) != value:
            continue

        close_start = text.find(closer, position)
        if close_start == -1:
            return None

        return ElementRegion(
            start=start,
            open_end=position,
            close_start=close_start,
            end=close_start + len(closer),
            open_tag=open_tag,
            inner=text[position:close_start],
            close_tag=closer,
        )


def last_insertion_point(text: str, pattern: Pattern = PLIST_ROOT_CLOSE) -> Optional[int]:
    """Offset of the start of the last match of pattern, or None."""
    last = None
    for match in pattern.finditer(text):
        last = match.start()
    return last


def splice(text: str, offset: int, fragment: str) -> str:
    return text[:offset] + fragment + text[offset:]
