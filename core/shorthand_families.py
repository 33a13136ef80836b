"""
Shorthand Families Module
Static catalog of Tailwind utility families that collapse into a shorthand.

Each family is plain data: the member utilities with the sides they cover,
and the ordered combine rules (most reducing first) naming the shorthand
utility produced when a set of members covers exactly the rule's sides.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Pattern, Tuple

# Accepted value suffixes, including the leading dash
ANY_VALUE = r'-.+'
BORDER_WIDTH_VALUE = r'-(?:\d+(?:\.\d+)?|\[[^\]]+\])'
BORDER_COLOR_VALUE = r'-[a-zA-Z].*'
# w-screen is 100vw and h-screen 100vh, there is no size-screen
SIZE_VALUE = r'-(?!screen$).+'

BOX_SIDES = frozenset({'t', 'r', 'b', 'l'})
CORNERS = frozenset({'tl', 'tr', 'br', 'bl'})
AXES = frozenset({'x', 'y'})

def _sides(*names: str) -> FrozenSet[str]:
    return frozenset(names)

@dataclass(frozen=True)
class Family:
    """A shorthand family definition.

    members: (utility, covered sides) pairs.
    rules: (shorthand utility, sides) pairs, evaluated in order.
    """
    name: str
    members: Tuple[Tuple[str, FrozenSet[str]], ...]
    rules: Tuple[Tuple[str, FrozenSet[str]], ...]
    value_pattern: str = ANY_VALUE
    allow_bare: bool = False
    allow_negative: bool = False
    pattern: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Longest utility first so `rounded-t` never shadows `rounded-tl`
        utilities = sorted((utility for utility, _ in self.members), key=len, reverse=True)
        alternatives = '|'.join(re.escape(utility) for utility in utilities)
        value = f'(?:{self.value_pattern})?' if self.allow_bare else f'(?:{self.value_pattern})'
        compiled = re.compile(f'^(?P<utility>{alternatives})(?P<value>{value})$')
        object.__setattr__(self, 'pattern', compiled)

    @property
    def member_sides(self) -> Dict[str, FrozenSet[str]]:
        return dict(self.members)

    def match(self, base: str) -> Optional[Tuple[str, str]]:
        """Return (utility, value) when `base` is a member of this family."""
        found = self.pattern.match(base)
        if not found:
            return None
        return found.group('utility'), found.group('value')

def _box_family(name: str, top: str, right: str, bottom: str, left: str,
                x: str, y: str, shorthand: str, **options) -> Family:
    """Margin-style family: t/r/b/l sides, x/y axes, one bare shorthand."""
    return Family(
        name=name,
        members=(
            (top, _sides('t')),
            (right, _sides('r')),
            (bottom, _sides('b')),
            (left, _sides('l')),
            (x, _sides('l', 'r')),
            (y, _sides('t', 'b')),
        ),
        rules=(
            (shorthand, BOX_SIDES),
            (y, _sides('t', 'b')),
            (x, _sides('l', 'r')),
        ),
        **options,
    )

def _axis_family(name: str, x: str, y: str, shorthand: str, **options) -> Family:
    """Two-member family where x + y collapse into the bare shorthand."""
    return Family(
        name=name,
        members=((x, _sides('x')), (y, _sides('y'))),
        rules=((shorthand, AXES),),
        **options,
    )

BORDER_RADIUS = Family(
    name='border-radius',
    members=(
        ('rounded-tl', _sides('tl')),
        ('rounded-tr', _sides('tr')),
        ('rounded-br', _sides('br')),
        ('rounded-bl', _sides('bl')),
        ('rounded-t', _sides('tl', 'tr')),
        ('rounded-r', _sides('tr', 'br')),
        ('rounded-b', _sides('br', 'bl')),
        ('rounded-l', _sides('tl', 'bl')),
    ),
    rules=(
        ('rounded', CORNERS),
        ('rounded-t', _sides('tl', 'tr')),
        ('rounded-b', _sides('br', 'bl')),
        ('rounded-l', _sides('tl', 'bl')),
        ('rounded-r', _sides('tr', 'br')),
    ),
    allow_bare=True,
)

FAMILY_CATALOG: Tuple[Family, ...] = (
    _axis_family('overflow', 'overflow-x', 'overflow-y', 'overflow'),
    _axis_family('overscroll', 'overscroll-x', 'overscroll-y', 'overscroll'),
    _box_family('inset', 'top', 'right', 'bottom', 'left', 'inset-x', 'inset-y', 'inset',
                allow_negative=True),
    BORDER_RADIUS,
    _box_family('border-width', 'border-t', 'border-r', 'border-b', 'border-l',
                'border-x', 'border-y', 'border',
                value_pattern=BORDER_WIDTH_VALUE, allow_bare=True),
    _box_family('border-color', 'border-t', 'border-r', 'border-b', 'border-l',
                'border-x', 'border-y', 'border',
                value_pattern=BORDER_COLOR_VALUE),
    _box_family('margin', 'mt', 'mr', 'mb', 'ml', 'mx', 'my', 'm', allow_negative=True),
    _box_family('padding', 'pt', 'pr', 'pb', 'pl', 'px', 'py', 'p'),
    _box_family('scroll-margin', 'scroll-mt', 'scroll-mr', 'scroll-mb', 'scroll-ml',
                'scroll-mx', 'scroll-my', 'scroll-m', allow_negative=True),
    _box_family('scroll-padding', 'scroll-pt', 'scroll-pr', 'scroll-pb', 'scroll-pl',
                'scroll-px', 'scroll-py', 'scroll-p'),
    _axis_family('gap', 'gap-x', 'gap-y', 'gap'),
    _axis_family('border-spacing', 'border-spacing-x', 'border-spacing-y', 'border-spacing'),
    _axis_family('scale', 'scale-x', 'scale-y', 'scale', allow_negative=True),
    Family(
        name='size',
        members=(('w', _sides('w')), ('h', _sides('h'))),
        rules=(('size', _sides('w', 'h')),),
        value_pattern=SIZE_VALUE,
    ),
)

FAMILY_NAMES: Tuple[str, ...] = tuple(family.name for family in FAMILY_CATALOG)

# size-* needs Tailwind 3.4 or later
OPT_IN_FAMILIES = frozenset({'size'})

DEFAULT_FAMILIES: Tuple[Family, ...] = tuple(
    family for family in FAMILY_CATALOG if family.name not in OPT_IN_FAMILIES)

def select_families(names: Optional[Iterable[str]] = None) -> Tuple[Family, ...]:
    """Return the catalog restricted to `names`, keeping catalog order.

    None selects every family except the opt-in ones.
    """
    if names is None:
        return DEFAULT_FAMILIES
    wanted = set(names)
    unknown = wanted - set(FAMILY_NAMES)
    if unknown:
        raise KeyError(f"Unknown shorthand families: {', '.join(sorted(unknown))}")
    return tuple(family for family in FAMILY_CATALOG if family.name in wanted)
