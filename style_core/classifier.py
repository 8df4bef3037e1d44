"""Maps Tailwind-style class tokens to utility groups.

Two tokens conflict when they classify to the same group key. The key is the
group name scoped by the token's modifier chain (``hover:padding``), except for
translate and inset/position offsets whose literal prefix is the key on its own.
Tokens that match no rule classify to ``None`` and are never deduplicated.
"""
from typing import Optional, Tuple

from .constants import (
    SPACING_RE, SIZING_RE, GAP_RE, COLOR_RE, ARBITRARY_LENGTH_RE,
    BORDER_WIDTH_RE, OPACITY_RE, Z_INDEX_RE, GRID_COLS_RE, GRID_ROWS_RE,
    DURATION_RE, ANIMATE_DURATION_RE, DELAY_RE, ANIMATE_EASE_RE, EASE_RE,
    ANIMATE_NAME_RE, TRANSLATE_RE, INSET_RE, SHADOW_RE,
)
from .taxonomy import (
    STATIC_GROUPS, SPACING_GROUPS, SIZING_GROUPS, GAP_GROUPS, COLOR_GROUPS,
    ARBITRARY_LENGTH_GROUPS, NON_COLOR_KEYWORDS,
)
from .types import ClassificationResult
from .utils.modifiers import split_modifiers


# Whole-token patterns with a fixed group, in evaluation order.
_FIXED_RULES = (
    (BORDER_WIDTH_RE, "border-width"),
    (OPACITY_RE, "opacity"),
    (Z_INDEX_RE, "z-index"),
    (GRID_COLS_RE, "grid-cols"),
    (GRID_ROWS_RE, "grid-rows"),
    (DURATION_RE, "animation-duration"),
    # Kept separate from animation-duration; the two do not conflict.
    (ANIMATE_DURATION_RE, "animate-duration"),
    (DELAY_RE, "animation-delay"),
    (ANIMATE_EASE_RE, "animate-ease"),
    (EASE_RE, "animation-timing-function"),
    # Last so it cannot shadow the animate-duration/ease patterns.
    (ANIMATE_NAME_RE, "animation-name"),
)

# Prefix patterns whose captured prefix is the group itself.
_LITERAL_PREFIX_RULES = (TRANSLATE_RE, INSET_RE)


def _color_group(base: str) -> Optional[str]:
    match = COLOR_RE.match(base)
    if not match:
        return None
    family, value = match.group(1), match.group(2)
    if value.startswith("["):
        if ARBITRARY_LENGTH_RE.match(value):
            return ARBITRARY_LENGTH_GROUPS.get(family)
        return COLOR_GROUPS[family]
    if value.split("-", 1)[0] in NON_COLOR_KEYWORDS[family]:
        return None
    return COLOR_GROUPS[family]


def classify_base(base: str) -> Tuple[Optional[str], bool]:
    """
    Returns (group, scoped). ``scoped`` is False when the group already is the
    final key and must not be combined with the modifier chain.
    """
    group = STATIC_GROUPS.get(base)
    if group:
        return group, True

    for regex, groups in ((SPACING_RE, SPACING_GROUPS), (SIZING_RE, SIZING_GROUPS), (GAP_RE, GAP_GROUPS)):
        match = regex.match(base)
        if match:
            return groups[match.group(1)], True

    group = _color_group(base)
    if group:
        return group, True

    for regex, group in _FIXED_RULES:
        if regex.match(base):
            return group, True

    for regex in _LITERAL_PREFIX_RULES:
        match = regex.match(base)
        if match:
            return match.group(1), False

    if SHADOW_RE.match(base):
        return "box-shadow", True

    return None, True


def classify(token: str) -> ClassificationResult:
    """Classify a raw (validated) token, modifiers included."""
    modifiers, base = split_modifiers(token)
    group, scoped = classify_base(base)
    if group is None:
        return ClassificationResult(None, modifiers)
    if scoped and modifiers:
        group = ":".join(modifiers) + ":" + group
    return ClassificationResult(group, modifiers)
