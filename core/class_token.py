"""
Class Token Module
Splits class strings into tokens and decomposes each token into variant,
sign, utility and value so that members of a shorthand family can be found.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .shorthand_families import DEFAULT_FAMILIES, Family

logger = logging.getLogger(__name__)

VALUE_KIND_NONE = 'none'
VALUE_KIND_NAMED = 'named'
VALUE_KIND_ARBITRARY = 'arbitrary'

BucketKey = Tuple[Tuple[str, ...], bool, bool, str]

@dataclass(frozen=True)
class ClassToken:
    raw: str
    position: int
    variant: Tuple[str, ...] = ()
    important: bool = False
    negative: bool = False
    utility: Optional[str] = None
    value: str = ''
    family: Optional[str] = None
    prefix: str = ''
    separator: str = ':'

    @property
    def is_family_member(self) -> bool:
        return self.utility is not None

    @property
    def value_kind(self) -> str:
        if not self.value:
            return VALUE_KIND_NONE
        if self.value.startswith('-['):
            return VALUE_KIND_ARBITRARY
        return VALUE_KIND_NAMED

    @property
    def bucket_key(self) -> BucketKey:
        return self.variant, self.important, self.negative, self.value

    def render(self) -> str:
        """Rebuild the class text from its parts."""
        if self.utility is None:
            return self.raw
        variant = ''.join(f'{segment}{self.separator}' for segment in self.variant)
        important = '!' if self.important else ''
        sign = '-' if self.negative else ''
        return f'{variant}{important}{sign}{self.prefix}{self.utility}{self.value}'

    def with_utility(self, utility: str) -> 'ClassToken':
        """Same variant, sign and value under another utility name."""
        token = replace(self, utility=utility)
        return replace(token, raw=token.render())

def split_variants(raw: str, separator: str = ':') -> Tuple[Tuple[str, ...], str]:
    """Split `md:hover:mt-2` into (('md', 'hover'), 'mt-2').

    Separators inside brackets or parentheses (arbitrary variants and
    values) do not split.
    """
    segments = []
    depth = 0
    start = 0
    index = 0
    while index < len(raw):
        char = raw[index]
        if char in '[(':
            depth += 1
        elif char in '])':
            depth = max(depth - 1, 0)
        elif depth == 0 and raw.startswith(separator, index):
            segments.append(raw[start:index])
            index += len(separator)
            start = index
            continue
        index += 1
    return tuple(segments), raw[start:]

def parse_class(raw: str, position: int = 0,
                families: Sequence[Family] = DEFAULT_FAMILIES,
                prefix: str = '', separator: str = ':') -> ClassToken:
    """Decompose one class into a ClassToken; unknown classes keep utility=None."""
    variant, base = split_variants(raw, separator)
    passthrough = ClassToken(raw=raw, position=position, variant=variant,
                             prefix=prefix, separator=separator)
    important = base.startswith('!')
    if important:
        base = base[1:]
    negative = base.startswith('-')
    if negative:
        base = base[1:]
    if prefix:
        if not base.startswith(prefix):
            return passthrough
        base = base[len(prefix):]
    if not base or any(segment == '' for segment in variant):
        return passthrough

    for family in families:
        matched = family.match(base)
        if matched is None:
            continue
        if negative and not family.allow_negative:
            return passthrough
        utility, value = matched
        token = replace(passthrough, important=important, negative=negative,
                        utility=utility, value=value, family=family.name)
        if token.render() != raw:
            logger.debug(f"Class '{raw}' does not round-trip, treating as non-family")
            return passthrough
        return token
    return passthrough

def tokenize(class_string: str, families: Sequence[Family] = DEFAULT_FAMILIES,
             prefix: str = '', separator: str = ':') -> List[ClassToken]:
    """Split a class attribute value into ordered tokens, duplicates kept."""
    return [
        parse_class(raw, position, families, prefix, separator)
        for position, raw in enumerate(class_string.split())
    ]
