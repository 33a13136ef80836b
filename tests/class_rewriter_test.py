import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.class_rewriter import consumed_positions, rewrite_class_string, rewrite_tokens
from core.class_token import tokenize
from core.errors import ShorthandInvariantError
from core.shorthand_matcher import MatchGroup, match_tokens

def test_inplace_rewrite_keeps_untouched_order():
    tokens = tokenize('mt-0 mr-0 mb-0 ml-1 md:mx-2 md:my-2 py-0 px-0 block')
    groups = match_tokens(tokens)
    assert rewrite_class_string(tokens, groups) == 'my-0 mr-0 ml-1 md:m-2 p-0 block'

def test_append_rewrite():
    tokens = tokenize('mt-0 mr-0 mb-0 ml-1 block')
    groups = match_tokens(tokens)
    assert rewrite_class_string(tokens, groups, placement='append') == 'mr-0 ml-1 block my-0'

def test_no_groups_normalizes_whitespace():
    tokens = tokenize('  block   flex\n items-center ')
    assert rewrite_class_string(tokens, []) == 'block flex items-center'

def test_rewrite_tokens_returns_shorthand_token():
    tokens = tokenize('gap-x-4 grid gap-y-4')
    groups = match_tokens(tokens)
    rewritten = rewrite_tokens(tokens, groups)
    assert [token.raw for token in rewritten] == ['gap-4', 'grid']
    assert rewritten[0].utility == 'gap'

def test_token_claimed_twice_is_rejected():
    tokens = tokenize('mt-0 mb-0 mx-0')
    first = MatchGroup('margin', (tokens[0], tokens[1]), tokens[0].with_utility('my'))
    second = MatchGroup('margin', (tokens[1], tokens[2]), tokens[1].with_utility('m'))
    with pytest.raises(ShorthandInvariantError) as excinfo:
        rewrite_class_string(tokens, [first, second])
    assert excinfo.value.token_positions == [1]
    assert 'mb-0' in str(excinfo.value)

def test_consumed_positions():
    tokens = tokenize('block mt-0 mb-0')
    groups = match_tokens(tokens)
    assert consumed_positions(groups) == {1: 0, 2: 0}

def test_unknown_placement():
    with pytest.raises(ValueError):
        rewrite_tokens(tokenize('mt-0'), [], placement='sideways')

def test_shorthand_already_present_is_not_repeated():
    tokens = tokenize('mx-2 my-2 m-2 block')
    groups = match_tokens(tokens)
    assert [group.shorthand for group in groups] == ['m-2']
    assert rewrite_class_string(tokens, groups) == 'm-2 block'
    assert rewrite_class_string(tokens, groups, placement='append') == 'm-2 block'

def test_repeated_pairs_rewrite_to_one_shorthand():
    tokens = tokenize('mt-0 mb-0 block mt-0 mb-0')
    assert rewrite_class_string(tokens, match_tokens(tokens)) == 'my-0 block'
