#!/usr/bin/env python3
"""
Workflow Hints - Message Sanitizer

Removes previously injected hint blocks from a message before mentions
are detected again. Hint text is re-sent on every turn and may arrive
truncated, duplicated or rejoined by upstream token-limit handling, so
classification is done line by line against fingerprint templates rather
than by locating a whole block.

Any line that matches no fingerprint is user content and is kept, even
when it sits between or directly after hint lines.

Usage:
    from wf_hints.sanitize import sanitize_user_message
    clean = sanitize_user_message(message)
"""

import re
from enum import Enum

from .templates import (
    ALL_HEADERS,
    ARROW,
    DESCRIPTION_PREFIX,
    INSTRUCTION_LINE,
)

# Shortest truncated prefix accepted for each fingerprint. Shorter fragments
# are too generic to tell apart from user text and are kept as content.
MIN_HEADER_PREFIX = 6           # "[⚡ Ord"
MIN_INSTRUCTION_PREFIX = 16     # "ACTION_REQUIRED:"
MIN_REFERENCE_PREFIX = 3        # "↳ [" / "↳ /"
MIN_DESCRIPTION_PREFIX = 4      # "↳ De"

_VARIATION_SELECTOR = '\ufe0f'

_REFERENCE_HEADS = (ARROW + " [//", ARROW + " //[")
_MATCHED_SUFFIX = " (matched: "

# Reference head in any style; name and closing bracket may be cut off.
# Bracketed names are opaque up to ']'. Bracket-less forms appear after
# highlight brackets were stripped, so only word-like names occur there.
_REFERENCE_PATTERN = re.compile(
    r'^' + ARROW + r' (?:'
    r'\[// ?[^\]]*\]?'
    r'|//\[[^\]]*\]?'
    r'|// ?(?:\w[\w./-]*)?'
    r')'
)

# Tail of a reference line that lost its head: ... (matched: "a", "b")
_ORPHAN_PATTERN = re.compile(r'\(matched: "[^"]*"(?:, "[^"]*")*\)$')

_HIGHLIGHT_PATTERN = re.compile(r'(?<!\[)\[([\w-]+(?: [\w-]+)*)\](?![\](])')


class LineKind(Enum):
    CONTENT = "content"
    BLANK = "blank"
    HEADER = "header"
    INSTRUCTION = "instruction"
    MENTION_REF = "mention_ref"
    DESCRIPTION = "description"
    ORPHAN_FRAGMENT = "orphan_fragment"


def _is_truncation_of(fragment: str, full: str, min_length: int) -> bool:
    """True if fragment equals full or is a prefix of it at least min_length long."""
    if fragment == full:
        return True
    return len(fragment) >= min_length and full.startswith(fragment)


def _is_header(line: str) -> bool:
    lowered = line.replace(_VARIATION_SELECTOR, '').lower()
    return any(
        _is_truncation_of(lowered, header.lower(), MIN_HEADER_PREFIX)
        for header in ALL_HEADERS
    )


def _is_instruction(line: str) -> bool:
    return _is_truncation_of(line, INSTRUCTION_LINE, MIN_INSTRUCTION_PREFIX)


def _is_mention_ref(line: str) -> bool:
    if any(_is_truncation_of(line, head, MIN_REFERENCE_PREFIX) for head in _REFERENCE_HEADS):
        return True

    match = _REFERENCE_PATTERN.match(line)
    if not match:
        return False

    # Whatever follows the name must be (part of) the matched suffix
    rest = line[match.end():]
    return (
        not rest
        or rest.startswith(_MATCHED_SUFFIX)
        or _MATCHED_SUFFIX.startswith(rest)
    )


def _is_description(line: str) -> bool:
    if line.startswith(DESCRIPTION_PREFIX + '"') or line.startswith(DESCRIPTION_PREFIX + '`'):
        return True
    return _is_truncation_of(line, DESCRIPTION_PREFIX.rstrip(), MIN_DESCRIPTION_PREFIX)


def classify_line(line: str) -> LineKind:
    """Classify one line of a message against the hint fingerprints."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if _is_header(stripped):
        return LineKind.HEADER
    if _is_instruction(stripped):
        return LineKind.INSTRUCTION
    if _is_description(stripped):
        return LineKind.DESCRIPTION
    if _is_mention_ref(stripped):
        return LineKind.MENTION_REF
    if _ORPHAN_PATTERN.search(stripped):
        return LineKind.ORPHAN_FRAGMENT
    return LineKind.CONTENT


def strip_existing_hints(text: str) -> str:
    """
    Remove every hint-block line, well-formed or corrupted.

    Content lines keep their order and the blank lines between them.
    Blank lines left behind by removed hint lines are collapsed so at most
    one separates two surviving blocks. The result is trimmed.
    """
    kept = []
    removed_since_content = False

    for line in text.split('\n'):
        kind = classify_line(line)
        if kind is LineKind.CONTENT:
            kept.append(line)
            removed_since_content = False
        elif kind is LineKind.BLANK:
            if removed_since_content and kept and not kept[-1].strip():
                continue
            kept.append(line)
        else:
            removed_since_content = True

    return '\n'.join(kept).strip()


def strip_highlight_brackets(text: str) -> str:
    """
    Unwrap highlight brackets around plain words: '[5] approaches' -> '5 approaches'.

    Bracketed tokens with a colon or other punctuation, such as
    [use_workflow:id], are structured references and are left alone.
    """
    return _HIGHLIGHT_PATTERN.sub(r'\1', text)


def sanitize_user_message(text: str) -> str:
    """Strip highlight brackets and hint blocks. Idempotent."""
    return strip_existing_hints(strip_highlight_brackets(text)).strip()
