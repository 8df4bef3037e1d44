from typing import List, Tuple

from ..types import ModifierChain


def _top_level_colons(token: str) -> List[int]:
    """Positions of colons not nested inside [...] or (...)."""
    positions = []
    depth = 0
    for i, ch in enumerate(token):
        if ch == "[" or ch == "(":
            depth += 1
        elif ch == "]" or ch == ")":
            if depth > 0:
                depth -= 1
        elif ch == ":" and depth == 0:
            positions.append(i)
    return positions


def split_modifiers(token: str) -> Tuple[ModifierChain, str]:
    """
    Split a class token into its variant chain and base class.

    'dark:hover:bg-red-500'        -> (('dark', 'hover'), 'bg-red-500')
    'data-[state=open]:block'      -> (('data-[state=open]',), 'block')
    'bg-[length:2px]'              -> ((), 'bg-[length:2px]')
    """
    colons = _top_level_colons(token)
    if not colons:
        return (), token

    modifiers = []
    start = 0
    for pos in colons:
        modifiers.append(token[start:pos])
        start = pos + 1
    return tuple(modifiers), token[start:]
