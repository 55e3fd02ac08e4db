#!/usr/bin/env python3
"""
Workflow Hints - Name Matcher

Canonicalization and fuzzy matching of user-typed workflow names.

Two lookups with different guarantees:
- resolve_exact() is for execution: exact or canonical match only,
  a partially typed name never resolves.
- fuzzy_match() is for suggestions: prefix matches are returned,
  ranked shortest-first.

Usage:
    from wf_hints.matcher import resolve_exact, fuzzy_match
    resolve_exact("5Approaches", ["5-approaches"])   # "5-approaches"
    fuzzy_match("5app", ["5-approaches"])            # ["5-approaches"]
"""

import re
from typing import List, Optional, Sequence

_DELIMITERS = re.compile(r'[-_]')

DEFAULT_SUGGESTION_LIMIT = 3
DEFAULT_MAX_ALIASES = 3


def canonicalize(name: str) -> str:
    """Comparison key for a name: lower-cased, hyphens and underscores removed."""
    return _DELIMITERS.sub('', name.lower())


def resolve_exact(name: str, candidates: Sequence[str]) -> Optional[str]:
    """
    Resolve a name against candidates without guessing.

    Args:
        name: User-typed workflow name
        candidates: Known names and aliases, in catalog order

    Returns:
        The literal candidate on a byte-for-byte match, else the earliest
        candidate with the same canonical form, else None.
    """
    for candidate in candidates:
        if candidate == name:
            return candidate

    key = canonicalize(name)
    if not key:
        return None

    for candidate in candidates:
        if canonicalize(candidate) == key:
            return candidate
    return None


def fuzzy_match(
    typo: str,
    candidates: Sequence[str],
    limit: int = DEFAULT_SUGGESTION_LIMIT
) -> List[str]:
    """
    Rank candidates for a possibly mistyped name.

    Exact canonical matches win outright. Otherwise candidates whose
    canonical form starts with the query are returned, shortest first.
    """
    query = canonicalize(typo)
    if not query:
        return []

    exact = [c for c in candidates if canonicalize(c) == query]
    if exact:
        return exact[:limit]

    prefixed = [c for c in candidates if canonicalize(c).startswith(query)]
    prefixed.sort(key=lambda c: len(canonicalize(c)))
    return prefixed[:limit]


def best_suggestion(typo: str, candidates: Sequence[str]) -> Optional[str]:
    """Top-ranked fuzzy match, or None."""
    matches = fuzzy_match(typo, candidates)
    return matches[0] if matches else None


def format_suggestion(
    name: str,
    aliases: Sequence[str],
    max_aliases: int = DEFAULT_MAX_ALIASES
) -> str:
    """Format a name with its aliases for display: 'name (a | b | c)'."""
    if not aliases:
        return name
    shown = " | ".join(aliases[:max_aliases])
    return f"{name} ({shown})"
