"""
Demo reference extraction from documentation.

Component docs embed demos with tags such as::

    <code src="./demo/basic.tsx">Basic usage</code>

Each tag becomes a DemoReference recording the exact span so it can be
substituted later without re-parsing the document.
"""

import re
from typing import List

from docmerge.schemas import DemoReference

DEMO_TAG_PATTERN = re.compile(r'<code\s+src="([^"]+)"[^>]*>(.*?)</code>')


def parse_demo_references(content: str) -> List[DemoReference]:
    """
    Extract demo references in document order.

    Args:
        content: Raw documentation text

    Returns:
        List of DemoReference objects (empty if the document has no demos)
    """
    return [
        DemoReference(
            raw_markup_span=match.group(0),
            demo_path=match.group(1),
            description=match.group(2),
            start=match.start(),
            end=match.end(),
        )
        for match in DEMO_TAG_PATTERN.finditer(content)
    ]
