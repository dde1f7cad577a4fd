"""
牌组属性测试

使用hypothesis生成任意的发牌、洗牌、重置操作序列，
验证牌组在任何操作序列下都满足不变量.
"""

import random
from collections import Counter

import pytest
from hypothesis import given, strategies as st

from deck_of_cards import Card, Deck, DeckState, Suit, Rank


FULL_DECK = {Card(suit, rank) for suit in Suit for rank in Rank}
DEAL_ORDER = [Card(suit, rank) for suit in Suit for rank in Rank][::-1]

operation_strategy = st.lists(
    st.sampled_from(["deal", "shuffle", "reset"]),
    max_size=120,
)
seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)


def remaining_cards(deck: Deck):
    """发出剩余的所有牌"""
    return deck.deal_cards(deck.count())


@pytest.mark.property_test
@given(seed_strategy, operation_strategy)
def test_operation_sequence_invariants(seed, operations):
    """任意操作序列后，剩余牌数与模型一致，无重复，且都来自标准52张牌"""
    deck = Deck(rng=random.Random(seed))
    expected_count = 52
    dealt = []

    for operation in operations:
        if operation == "deal":
            card = deck.deal()
            if expected_count == 0:
                assert card is None
            else:
                assert card is not None
                dealt.append(card)
                expected_count -= 1
        elif operation == "shuffle":
            deck.shuffle()
        else:
            deck.reset()
            expected_count = 52
            dealt = []

        assert deck.count() == expected_count
        assert 0 <= deck.count() <= 52

    if expected_count == 52:
        assert deck.state == DeckState.FULL
    elif expected_count == 0:
        assert deck.state == DeckState.EMPTY
    else:
        assert deck.state == DeckState.PARTIAL

    rest = remaining_cards(deck)
    assert len(set(rest)) == len(rest)
    assert set(rest) <= FULL_DECK
    assert not set(rest) & set(dealt)
    assert set(rest) | set(dealt) == FULL_DECK


@pytest.mark.property_test
@given(seed_strategy, operation_strategy)
def test_reset_restores_construction_order(seed, operations):
    deck = Deck(rng=random.Random(seed))

    for operation in operations:
        getattr(deck, operation)()

    deck.reset()

    assert deck.count() == 52
    assert remaining_cards(deck) == DEAL_ORDER


@pytest.mark.property_test
@given(seed_strategy, st.integers(min_value=0, max_value=52))
def test_shuffle_is_permutation(seed, num_dealt):
    deck = Deck(rng=random.Random(seed))
    deck.deal_cards(num_dealt)
    live_before = deck.count()
    reference = Deck(rng=random.Random(seed))
    reference.deal_cards(num_dealt)
    expected = Counter(remaining_cards(reference))

    deck.shuffle()

    assert deck.count() == live_before
    assert Counter(remaining_cards(deck)) == expected
