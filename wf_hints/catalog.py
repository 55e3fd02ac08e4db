#!/usr/bin/env python3
"""
Workflow Hints - Workflow Catalog

In-memory set of known workflows and their aliases. Loading workflow
files is left to the caller; the catalog only expands names and aliases
into the candidate list the matcher works on and maps matches back to
their workflow.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .matcher import (
    DEFAULT_MAX_ALIASES,
    DEFAULT_SUGGESTION_LIMIT,
    format_suggestion,
    fuzzy_match,
    resolve_exact,
)


@dataclass
class Workflow:
    """A named workflow as provided by the loader."""
    name: str
    aliases: List[str] = field(default_factory=list)
    description: str = ""
    tags: List[str] = field(default_factory=list)


class WorkflowCatalog:
    """Name and alias index over workflows, in insertion order."""

    def __init__(self, workflows: Iterable[Workflow] = ()):
        self._workflows: Dict[str, Workflow] = {}
        self._by_key: Dict[str, Workflow] = {}
        for workflow in workflows:
            self.add(workflow)

    def add(self, workflow: Workflow) -> None:
        """
        Register a workflow. The first workflow to claim a name or alias keeps it.
        """
        if workflow.name in self._workflows:
            return
        self._workflows[workflow.name] = workflow
        for key in [workflow.name] + list(workflow.aliases):
            self._by_key.setdefault(key, workflow)

    def __len__(self) -> int:
        return len(self._workflows)

    def __contains__(self, name: str) -> bool:
        return name in self._by_key

    @property
    def workflows(self) -> List[Workflow]:
        return list(self._workflows.values())

    def candidates(self) -> List[str]:
        """Names and aliases, each workflow's name before its aliases."""
        return list(self._by_key.keys())

    def get(self, key: str) -> Optional[Workflow]:
        """Workflow owning an exact name or alias."""
        return self._by_key.get(key)

    def resolve(self, text: str) -> Optional[Workflow]:
        """Resolve a typed name or alias; prefixes never resolve."""
        key = resolve_exact(text, self.candidates())
        return self._by_key[key] if key is not None else None

    def suggest(self, typo: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[Workflow]:
        """Workflows ranked for a mistyped name, one entry per workflow."""
        # Several aliases of one workflow can match, so rank over all keys first
        keys = fuzzy_match(typo, self.candidates(), limit=len(self._by_key))

        result = []
        for key in keys:
            workflow = self._by_key[key]
            if workflow not in result:
                result.append(workflow)
        return result[:limit]

    def format_suggestions(
        self,
        typo: str,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
        max_aliases: int = DEFAULT_MAX_ALIASES
    ) -> List[str]:
        """Display strings for suggest()."""
        return [
            format_suggestion(w.name, w.aliases, max_aliases)
            for w in self.suggest(typo, limit)
        ]
