"""
Shorthand Matcher Module
Finds groups of family members that collapse into a shorthand class.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, FrozenSet, List, Sequence

from .class_token import BucketKey, ClassToken
from .shorthand_families import DEFAULT_FAMILIES, Family

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class MatchGroup:
    family: str
    source_tokens: tuple
    shorthand_token: ClassToken

    @property
    def first_position(self) -> int:
        return self.source_tokens[0].position

    @property
    def source_classnames(self) -> List[str]:
        return [token.raw for token in self.source_tokens]

    @property
    def shorthand(self) -> str:
        return self.shorthand_token.raw

    def to_dict(self) -> Dict:
        return {
            'sourceClassnames': self.source_classnames,
            'shorthand': self.shorthand,
        }

def find_cover(target: FrozenSet[str], candidates: Sequence[ClassToken],
               member_sides: Dict[str, FrozenSet[str]]) -> List[ClassToken]:
    """Smallest set of disjoint candidates whose sides are exactly `target`.

    Candidates covering the whole target on their own are ignored; an empty
    list means no cover exists.
    """
    usable = []
    seen_utilities = set()
    for token in candidates:
        sides = member_sides[token.utility]
        # Duplicate utilities can never both sit in a disjoint cover
        if sides < target and token.utility not in seen_utilities:
            usable.append(token)
            seen_utilities.add(token.utility)

    for size in range(2, len(target) + 1):
        for selection in combinations(usable, size):
            covered = set()
            for token in selection:
                sides = member_sides[token.utility]
                if covered & sides:
                    break
                covered |= sides
            else:
                if covered == target:
                    return list(selection)
    return []

def reduce_bucket(family: Family, bucket: Sequence[ClassToken]) -> List[MatchGroup]:
    """Fire the family rules, most reducing first, against one bucket."""
    member_sides = family.member_sides
    available = list(bucket)
    groups = []
    for shorthand, target in family.rules:
        while len(available) >= 2:
            selection = find_cover(target, available, member_sides)
            if not selection:
                break
            selection.sort(key=lambda token: token.position)
            for token in selection:
                available.remove(token)
            groups.append(MatchGroup(
                family=family.name,
                source_tokens=tuple(selection),
                shorthand_token=selection[0].with_utility(shorthand),
            ))
    return groups

def bucket_tokens(family: Family, tokens: Sequence[ClassToken]) -> Dict[BucketKey, List[ClassToken]]:
    buckets = defaultdict(list)
    for token in tokens:
        if token.family == family.name:
            buckets[token.bucket_key].append(token)
    return buckets

def match_tokens(tokens: Sequence[ClassToken],
                 families: Sequence[Family] = DEFAULT_FAMILIES) -> List[MatchGroup]:
    """All shorthand groups for one class string, ordered by first source token."""
    groups = []
    for family in families:
        for key, bucket in bucket_tokens(family, tokens).items():
            if len(bucket) < 2:
                continue
            found = reduce_bucket(family, bucket)
            if found:
                logger.debug(f"Family '{family.name}' bucket {key}: {len(found)} group(s)")
            groups.extend(found)
    groups.sort(key=lambda group: group.first_position)
    return groups
