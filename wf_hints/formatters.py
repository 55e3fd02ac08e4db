#!/usr/bin/env python3
"""
Workflow Hints - Hint Formatters

Pure functions that render hint blocks from templates.py.
These are easily unit-testable without mocking.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from .templates import (
    DESCRIPTION_TEMPLATE,
    INSTRUCTION_LINE,
    LEGACY_DESCRIPTION_TEMPLATE,
    LEGACY_REFERENCE_TEMPLATE,
    MATCHED_SUFFIX_TEMPLATE,
    REFERENCE_TEMPLATE,
    THEME_STANDARD,
    get_header,
)


@dataclass
class HintMatch:
    """One matched workflow to reference in a hint block."""
    name: str
    keywords: List[str] = field(default_factory=list)
    description: str = ""


def format_keywords(keywords: Sequence[str]) -> str:
    """Quote and join keywords: '"a", "b"'."""
    return ", ".join(f'"{kw}"' for kw in keywords)


def format_reference_line(name: str, keywords: Sequence[str] = (), legacy: bool = False) -> str:
    """Format a mention-reference line, with a matched suffix when keywords exist."""
    template = LEGACY_REFERENCE_TEMPLATE if legacy else REFERENCE_TEMPLATE
    line = template.format(name=name)
    if keywords:
        line += MATCHED_SUFFIX_TEMPLATE.format(keywords=format_keywords(keywords))
    return line


def format_description_line(description: str, legacy: bool = False) -> str:
    """Format a description line. Whitespace is collapsed to keep it on one line."""
    single_line = " ".join(description.split())
    template = LEGACY_DESCRIPTION_TEMPLATE if legacy else DESCRIPTION_TEMPLATE
    return template.format(description=single_line)


# =============================================================================
# Hint Block
# =============================================================================

def format_hint_block(matches: Sequence[HintMatch], theme: str = THEME_STANDARD) -> str:
    """Render the hint block for matched workflows (without leading newlines)."""
    lines = [get_header(theme), INSTRUCTION_LINE]

    for match in matches:
        lines.append(format_reference_line(match.name, match.keywords))
        if match.description.strip():
            lines.append(format_description_line(match.description))

    return "\n".join(lines)


def format_auto_apply_hint(
    message: str,
    matches: Sequence[HintMatch],
    theme: str = THEME_STANDARD
) -> str:
    """
    Append a hint block to a sanitized message.

    The message is returned unchanged when there is nothing to hint;
    otherwise the block follows it after one blank line.
    """
    if not matches:
        return message
    return f"{message}\n\n{format_hint_block(matches, theme)}"
