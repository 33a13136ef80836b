"""
Class Rewriter Module
Replaces matched family members with their shorthand class.
"""

from typing import Dict, List, Sequence

from .class_token import ClassToken
from .errors import ShorthandInvariantError
from .shorthand_matcher import MatchGroup

PLACEMENT_INPLACE = 'inplace'
PLACEMENT_APPEND = 'append'
PLACEMENTS = (PLACEMENT_INPLACE, PLACEMENT_APPEND)

def consumed_positions(groups: Sequence[MatchGroup]) -> Dict[int, int]:
    """Map token position -> index of the group consuming it.

    Raises ShorthandInvariantError when two groups claim the same token.
    """
    owners = {}
    for index, group in enumerate(groups):
        for token in group.source_tokens:
            if token.position in owners:
                other = groups[owners[token.position]]
                raise ShorthandInvariantError(
                    f"Class '{token.raw}' is claimed by both '{other.shorthand}' "
                    f"and '{group.shorthand}'",
                    token_positions=[token.position],
                )
            owners[token.position] = index
    return owners

def rewrite_tokens(tokens: Sequence[ClassToken], groups: Sequence[MatchGroup],
                   placement: str = PLACEMENT_INPLACE) -> List[ClassToken]:
    """Build the rewritten token list.

    inplace: each shorthand takes the slot of its group's first token.
    append: untouched tokens first, then shorthands in group order.
    A shorthand whose class is already present is not emitted twice.
    """
    if placement not in PLACEMENTS:
        raise ValueError(f"Unknown placement '{placement}'")
    owners = consumed_positions(groups)
    kept = [token for token in tokens if token.position not in owners]
    present = {token.raw for token in kept}

    def emit(shorthand_token, rewritten):
        if shorthand_token.raw not in present:
            present.add(shorthand_token.raw)
            rewritten.append(shorthand_token)

    if placement == PLACEMENT_APPEND:
        rewritten = list(kept)
        for group in groups:
            emit(group.shorthand_token, rewritten)
        return rewritten

    rewritten = []
    for token in tokens:
        owner = owners.get(token.position)
        if owner is None:
            rewritten.append(token)
        elif groups[owner].first_position == token.position:
            emit(groups[owner].shorthand_token, rewritten)
    return rewritten

def rewrite_class_string(tokens: Sequence[ClassToken], groups: Sequence[MatchGroup],
                         placement: str = PLACEMENT_INPLACE) -> str:
    return ' '.join(token.raw for token in rewrite_tokens(tokens, groups, placement))
