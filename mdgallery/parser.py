"""Gallery line parser — compiled regexes for the two embed shapes.

Shapes, tried in order (first match wins):
  1. Annotated embed: <![[REF]]<p1, p2, ...>>
  2. Bare embed:      ![[REF]]
"""

import re

from mdgallery.models import ParsedLineRecord

ANNOTATED_EMBED_PATTERN = re.compile(r"<!\[\[(.*?)\]\]<(.*?)>>")
BARE_EMBED_PATTERN = re.compile(r"!\[\[(.*?)\]\]")
WIKI_LINK_PATTERN = re.compile(r"\[\[(.*?)\]\]")


def split_properties(segment: str | None) -> list[str]:
    """Split a comma list, trimming each token. Empty tokens are kept ("a,,b" -> ["a", "", "b"])."""
    if not segment:
        return []
    return [p.strip() for p in segment.split(",")]


def parse_line(line: str, source_name: str) -> ParsedLineRecord | None:
    """Parse one line into a ParsedLineRecord. Returns None when no embed is present."""
    match = ANNOTATED_EMBED_PATTERN.search(line)
    if match:
        item_id, segment = match.groups()
        return ParsedLineRecord(
            item_id=item_id,
            source_name=source_name,
            properties=split_properties(segment),
        )

    match = BARE_EMBED_PATTERN.search(line)
    if match:
        return ParsedLineRecord(item_id=match.group(1), source_name=source_name)

    return None


def parse_gallery_names(source: str) -> list[str]:
    """Return every [[NAME]] link in a gallery definition block, in order."""
    return WIKI_LINK_PATTERN.findall(source)
