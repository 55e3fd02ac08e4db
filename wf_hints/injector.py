#!/usr/bin/env python3
"""
Workflow Hints - Hint Injector

Per-turn processing of an inbound user message:
  1. Sanitize: strip highlight brackets and any previous hint block
  2. Detect //name mentions
  3. Resolve each mention against the catalog (suggest on no match)
  4. Append a hint block for the resolved workflows

Workflows hinted on an earlier turn are skipped unless the mention is
forced with '!'.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .catalog import WorkflowCatalog
from .config import HintConfig
from .formatters import HintMatch, format_auto_apply_hint
from .logger import HintLogger
from .mentions import Mention, detect_mentions
from .sanitize import sanitize_user_message


@dataclass
class InjectionResult:
    """Outcome of processing one message."""
    text: str
    clean_text: str
    mentions: List[Mention] = field(default_factory=list)
    hinted: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    unresolved: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def changed(self) -> bool:
        return self.text != self.clean_text


class HintInjector:
    """Turns raw user messages into sanitized messages with a fresh hint block."""

    def __init__(
        self,
        catalog: WorkflowCatalog,
        config: Optional[HintConfig] = None,
        logger: Optional[HintLogger] = None
    ):
        self.catalog = catalog
        self.config = config or HintConfig()
        self.logger = logger

    def prepare(self, message: str, already_hinted: Iterable[str] = ()) -> InjectionResult:
        """
        Sanitize a message and append hints for the workflows it mentions.

        Args:
            message: Raw message text, possibly carrying stale hints
            already_hinted: Workflow names hinted on earlier turns

        Returns:
            InjectionResult with the final text and what was matched
        """
        previous = set(already_hinted)
        clean_text = sanitize_user_message(message)
        if self.logger:
            self.logger.log_strip(len(message), len(clean_text))

        result = InjectionResult(text=clean_text, clean_text=clean_text)
        result.mentions = detect_mentions(clean_text)

        matches: Dict[str, HintMatch] = {}
        for mention in result.mentions:
            if self.logger:
                self.logger.log_mention(mention.name, mention.force)

            workflow = self.catalog.resolve(mention.name)
            if workflow is None:
                suggestions = self.catalog.format_suggestions(
                    mention.name,
                    limit=self.config.suggestion_limit,
                    max_aliases=self.config.max_aliases,
                )
                result.unresolved[mention.name] = suggestions
                if self.logger:
                    self.logger.log_resolve(mention.name, None, suggestions)
                continue

            if self.logger:
                self.logger.log_resolve(mention.name, workflow.name)

            # Aliases of one workflow share a single reference line
            if workflow.name in matches:
                matches[workflow.name].keywords.append(mention.name)
                continue

            if workflow.name in previous and not mention.force:
                if workflow.name not in result.skipped:
                    result.skipped.append(workflow.name)
                    if self.logger:
                        self.logger.log_skip(workflow.name)
                continue

            if workflow.name in result.skipped:
                result.skipped.remove(workflow.name)
            matches[workflow.name] = HintMatch(
                name=workflow.name,
                keywords=[mention.name],
                description=workflow.description,
            )

        if matches:
            theme = self.config.theme
            result.hinted = list(matches.keys())
            result.text = format_auto_apply_hint(clean_text, list(matches.values()), theme)
            if self.logger:
                self.logger.log_hint(result.hinted, theme)

        return result
