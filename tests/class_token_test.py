import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.class_token import parse_class, split_variants, tokenize
from core.shorthand_families import FAMILY_CATALOG

def test_split_variants_stacked():
    assert split_variants('md:hover:mt-2') == (('md', 'hover'), 'mt-2')
    assert split_variants('mt-2') == ((), 'mt-2')

def test_split_variants_ignores_separator_inside_brackets():
    assert split_variants('[&>*:first-child]:mt-2') == (('[&>*:first-child]',), 'mt-2')
    assert split_variants('bg-[url(a:b)]') == ((), 'bg-[url(a:b)]')

def test_split_variants_custom_separator():
    assert split_variants('md__mt-2', separator='__') == (('md',), 'mt-2')

def test_parse_margin():
    token = parse_class('mt-0', position=3)
    assert token.position == 3
    assert token.family == 'margin'
    assert token.utility == 'mt'
    assert token.value == '-0'
    assert token.value_kind == 'named'
    assert not token.negative

def test_parse_negative_with_variant():
    token = parse_class('md:-mt-1')
    assert token.variant == ('md',)
    assert token.negative
    assert token.utility == 'mt'
    assert token.value == '-1'
    assert token.render() == 'md:-mt-1'

def test_parse_important():
    token = parse_class('lg:!mb-4')
    assert token.important
    assert token.utility == 'mb'
    assert token.render() == 'lg:!mb-4'

def test_parse_radius_longest_utility_wins():
    assert parse_class('rounded-tl-sm').utility == 'rounded-tl'
    assert parse_class('rounded-t-sm').utility == 'rounded-t'
    bare = parse_class('rounded-tl')
    assert bare.utility == 'rounded-tl'
    assert bare.value == ''
    assert bare.value_kind == 'none'

def test_parse_arbitrary_value():
    token = parse_class('top-[var(--some-value)]')
    assert token.family == 'inset'
    assert token.utility == 'top'
    assert token.value == '-[var(--some-value)]'
    assert token.value_kind == 'arbitrary'

def test_parse_border_width_and_color():
    width = parse_class('border-t-4')
    color = parse_class('border-t-indigo-200/50')
    assert width.family == 'border-width'
    assert color.family == 'border-color'
    assert color.value == '-indigo-200/50'
    assert parse_class('lg:border-y').family == 'border-width'

def test_non_family_classes_pass_through():
    for raw in ('block', 'border-4', 'grid-cols-3', 'whitespace-nowrap', 'md:p-0', 'hover:', ''):
        token = parse_class(raw)
        assert not token.is_family_member
        assert token.family is None
        assert token.render() == raw

def test_negative_rejected_for_families_without_negatives():
    assert parse_class('-px-2').utility is None
    assert parse_class('-gap-x-2').utility is None
    assert parse_class('-scale-x-50').utility == 'scale-x'

def test_prefix():
    token = parse_class('md:-tw-mt-2', prefix='tw-')
    assert token.utility == 'mt'
    assert token.negative
    assert token.render() == 'md:-tw-mt-2'
    assert parse_class('mt-2', prefix='tw-').utility is None

def test_with_utility_keeps_variant_sign_and_value():
    token = parse_class('md:-mt-1', position=5)
    shorthand = token.with_utility('my')
    assert shorthand.raw == 'md:-my-1'
    assert shorthand.position == 5
    assert shorthand.bucket_key == token.bucket_key

def test_tokenize_keeps_order_and_duplicates():
    tokens = tokenize('  mt-0\n   mb-0\tmt-0  block ')
    assert [token.raw for token in tokens] == ['mt-0', 'mb-0', 'mt-0', 'block']
    assert [token.position for token in tokens] == [0, 1, 2, 3]

def test_tokenize_empty():
    assert tokenize('') == []
    assert tokenize('   ') == []

def test_family_tokens_round_trip():
    raws = ['mt-0', '-scale-y-75', 'md:hover:rounded-bl-[4px]', 'gap-x-1.5', 'w-1/2',
            'overflow-y-auto', 'inset-x-[10%]', 'scroll-mx-2', 'border-spacing-y-px']
    for token in tokenize(' '.join(raws), FAMILY_CATALOG):
        assert token.is_family_member, token.raw
        assert token.render() == token.raw
