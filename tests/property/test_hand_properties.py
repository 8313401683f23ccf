"""
Property-based Tests - 牌型与编码的性质测试

使用hypothesis验证：
- 任意合法编码解析后再输出等于小写原文，其他字符串一律报错
- 评估结果的牌型与穷举21种5张组合得到的最佳牌型一致
- 牌力值与牌型、组成牌的计分公式一致
"""

from collections import Counter
from itertools import combinations

import pytest
from hypothesis import given, settings, strategies as st

from holdem_equity.core.deck import build_template, parse_card
from holdem_equity.core.deck.types import RANK_CHARS
from holdem_equity.core.eval import HandCategory, classify, group_cards, score_hand
from holdem_equity.core.exceptions import InvalidCardError


SUIT_CHARS = "dchs"

rank_char_strategy = st.sampled_from(RANK_CHARS + RANK_CHARS.upper())
suit_char_strategy = st.sampled_from(SUIT_CHARS + SUIT_CHARS.upper())
seven_cards_strategy = st.lists(st.sampled_from(build_template()), min_size=7, max_size=7, unique=True)


def _is_valid_code(text: str) -> bool:
    lowered = text.lower()
    return len(lowered) == 2 and lowered[0] in RANK_CHARS and lowered[1] in SUIT_CHARS


def _five_card_category(cards) -> HandCategory:
    """标准规则下5张牌的牌型，用于对照"""
    ranks = sorted(card.rank.value for card in cards)
    counts = sorted(Counter(ranks).values(), reverse=True)
    is_flush = len({card.suit for card in cards}) == 1
    distinct = sorted(set(ranks))
    is_straight = len(distinct) == 5 and (distinct[4] - distinct[0] == 4 or distinct == [2, 3, 4, 5, 14])

    if is_straight and is_flush:
        return HandCategory.STRAIGHT_FLUSH
    if counts[0] == 4:
        return HandCategory.FOUR_OF_A_KIND
    if counts[:2] == [3, 2]:
        return HandCategory.FULL_HOUSE
    if is_flush:
        return HandCategory.FLUSH
    if is_straight:
        return HandCategory.STRAIGHT
    if counts[0] == 3:
        return HandCategory.THREE_OF_A_KIND
    if counts[:2] == [2, 2]:
        return HandCategory.TWO_PAIR
    if counts[0] == 2:
        return HandCategory.PAIR
    return HandCategory.HIGH_CARD


@pytest.mark.property_test
@given(rank_char_strategy, suit_char_strategy)
def test_valid_code_round_trip(rank_char, suit_char):
    """Property test: 合法编码解析后输出小写原文"""
    text = rank_char + suit_char

    assert str(parse_card(text)) == text.lower()


@pytest.mark.property_test
@given(st.text(max_size=4).filter(lambda text: not _is_valid_code(text)))
def test_invalid_code_is_rejected(text):
    """Property test: 其他任何字符串都无法解析"""
    with pytest.raises(InvalidCardError):
        parse_card(text)


@pytest.mark.property_test
@settings(max_examples=300, deadline=None)
@given(seven_cards_strategy)
def test_category_matches_best_five_of_seven(cards):
    """Property test: 牌型等于21种5张组合中的最佳牌型"""
    expected = max(_five_card_category(combo) for combo in combinations(cards, 5))

    assert classify(cards).category == expected


@pytest.mark.property_test
@settings(max_examples=300, deadline=None)
@given(seven_cards_strategy)
def test_result_is_consistent(cards):
    """Property test: 组成牌来自输入，牌力符合计分公式"""
    hand = classify(cards)

    assert len(set(hand.cards)) == 5
    assert set(hand.cards) <= set(cards)
    assert hand.strength == score_hand(hand.category, hand.cards)
    assert hand.strength // 1_000_000 == hand.category


@pytest.mark.property_test
@settings(deadline=None)
@given(seven_cards_strategy, seven_cards_strategy)
def test_higher_category_always_wins(cards1, cards2):
    """Property test: 牌型更高的一手牌牌力一定更大"""
    hand1 = classify(cards1)
    hand2 = classify(cards2)

    if hand1.category > hand2.category:
        assert hand1.strength > hand2.strength
    elif hand1.category < hand2.category:
        assert hand1.strength < hand2.strength


@pytest.mark.property_test
@given(st.lists(st.sampled_from(build_template()), max_size=12, unique=True))
def test_grouping_counts_match_card_count(cards):
    """Property test: 两个计数映射的总和都等于牌数"""
    grouped = group_cards(cards)

    assert sum(grouped.rank_counts.values()) == len(cards)
    assert sum(grouped.suit_counts.values()) == len(cards)
    assert list(grouped.cards) == sorted(cards)
