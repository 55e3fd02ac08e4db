#!/usr/bin/env python3
"""
Workflow Hints - Mention Detector

Finds //name shorthand mentions in free text. Only raw names are
extracted here; resolving them is done with matcher.resolve_exact().
"""

import re
from dataclasses import dataclass
from typing import List

# // not preceded by ':', an ASCII word char or '/', so URLs and ///paths are skipped
MENTION_PATTERN = re.compile(r'(?<![:\w/])//([a-zA-Z0-9][a-zA-Z0-9_-]*)(!)?', re.ASCII)


@dataclass(frozen=True)
class Mention:
    """A raw workflow mention. force=True when written as //name!"""
    name: str
    force: bool = False


def detect_mentions(text: str) -> List[Mention]:
    """Return mentions in first-occurrence order, deduplicated by raw name."""
    mentions = []
    seen = set()

    for match in MENTION_PATTERN.finditer(text):
        name = match.group(1)
        if name in seen:
            continue
        seen.add(name)
        mentions.append(Mention(name=name, force=match.group(2) == '!'))

    return mentions
