#!/usr/bin/env python3
"""
Workflow Hints - Hint Block Templates

Wire format of the hint block appended to user messages. The stripper in
sanitize.py recognizes every line emitted from these templates, including
the legacy variants still present in stored conversation history.

Block layout:
    [⚡ Workflow matched]
    ACTION_REQUIRED: IF matches user intent → get_workflow("name"), else SKIP
    ↳ [// commit-review] (matched: "cr")
    ↳ Desc: "Review staged git changes"
"""

THEME_STANDARD = "standard"
THEME_PIRATE = "pirate"

# --- Header ---

HEADER_WORKFLOW = "[⚡ Workflow matched]"
HEADER_ORDERS = "[⚡ Orders matched]"

THEME_HEADERS = {
    THEME_STANDARD: HEADER_WORKFLOW,
    THEME_PIRATE: HEADER_ORDERS,
}

ALL_HEADERS = (HEADER_WORKFLOW, HEADER_ORDERS)


def get_header(theme: str) -> str:
    """Header line for a theme. Unknown themes use the standard header."""
    return THEME_HEADERS.get(theme, HEADER_WORKFLOW)


# --- Instruction ---

INSTRUCTION_LINE = 'ACTION_REQUIRED: IF matches user intent → get_workflow("name"), else SKIP'

# --- Mention reference ---

ARROW = "↳"

REFERENCE_TEMPLATE = ARROW + " [// {name}]"
LEGACY_REFERENCE_TEMPLATE = ARROW + " //[{name}]"
MATCHED_SUFFIX_TEMPLATE = " (matched: {keywords})"

# --- Description ---

DESCRIPTION_PREFIX = ARROW + " Desc: "
DESCRIPTION_TEMPLATE = DESCRIPTION_PREFIX + '"{description}"'
LEGACY_DESCRIPTION_TEMPLATE = DESCRIPTION_PREFIX + "`{description}`"
