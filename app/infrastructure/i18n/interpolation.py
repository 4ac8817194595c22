"""Placeholder substitution for translated messages."""

import re
from typing import Mapping, Optional


def replace_placeholders(
    message: str, replacements: Optional[Mapping[str, str]] = None
) -> str:
    """Replace each placeholder token with its value in a single pass.

    Plain textual substitution, e.g. "Hi :user" with {":user": "Sam"} gives
    "Hi Sam". Longer tokens match first so ":username" is not clobbered by
    ":user", and inserted values are never substituted again.

    Args:
        message: Message containing placeholder tokens.
        replacements: Placeholder token to replacement value.

    Returns:
        Message with placeholders replaced.
    """
    if not replacements:
        return message
    tokens = sorted((t for t in replacements if t), key=len, reverse=True)
    if not tokens:
        return message
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: str(replacements[match.group(0)]), message)
