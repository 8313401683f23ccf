"""
德州扑克牌型评估器.

从7张牌中找出最佳5张牌型，并将结果归约为一个可比较的整数牌力.
各规则按牌型强弱依次检测，命中即返回.
"""

from typing import Callable, Iterable, List, Optional, Sequence, Union

from ..deck.card import Card
from ..deck.types import LOW_ACE_VALUE, Rank
from ..exceptions import InvalidHandSizeError
from .grouping import GroupedCards, group_cards
from .types import EvaluatedHand, HandCategory


CATEGORY_WEIGHT = 1_000_000

# 第0张牌权重为0，只报告不参与比较
POSITION_WEIGHTS = (0, 15, 15 ** 2, 15 ** 3, 15 ** 4)

HAND_SIZE = 7


def score_hand(category: HandCategory, cards: Sequence[Card]) -> int:
    """
    计算牌力值.
    
    牌力 = 牌型序号 * 1_000_000 + Σ 点数(第i张) * 15^i (i >= 1).
    顺子和同花顺中处于第0位的A按低位A计分.
    
    Args:
        category: 牌型
        cards: 按权重从低到高排列的5张牌
        
    Returns:
        int: 牌力值
    """
    strength = category * CATEGORY_WEIGHT
    for i, card in enumerate(cards):
        value = card.rank.value
        if (i == 0 and card.rank == Rank.ACE
                and category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH)):
            value = LOW_ACE_VALUE
        strength += value * POSITION_WEIGHTS[i]
    return strength


def _make_result(category: HandCategory, cards: Sequence[Card]) -> EvaluatedHand:
    return EvaluatedHand(category, tuple(cards), score_hand(category, cards))


def find_flush(grouped: GroupedCards) -> Optional[List[Card]]:
    """
    检查同花.
    
    Returns:
        同花花色的全部牌（5至7张，升序），保留多余的牌用于同花顺检测；
        没有同花时返回None
    """
    for suit, count in grouped.suit_counts.items():
        if count >= 5:
            return grouped.cards_of_suit(suit)
    return None


def find_straight(grouped: GroupedCards) -> Optional[List[Card]]:
    """
    检查顺子.
    
    从最高点数向下寻找5个连续点数，返回找到的第一组（即最大的一组），
    每个点数取一张代表牌. 正常扫描无结果且同时有A和2时，
    再把A当作低位A扫描一次（A-2-3-4-5）.
    
    Returns:
        升序排列的5张牌，没有顺子时返回None
    """
    ranks = grouped.distinct_ranks
    if len(ranks) < 5:
        return None

    values = [rank.value for rank in ranks]
    for ace_as_low_card in (False, True):
        if ace_as_low_card:
            if Rank.ACE not in grouped.rank_counts or Rank.TWO not in grouped.rank_counts:
                break
            # A移到最前面
            ranks = [ranks[-1]] + ranks[:-1]
            values = [LOW_ACE_VALUE] + values[:-1]

        for top in range(len(values) - 1, 3, -1):
            window = values[top - 4:top + 1]
            if all(high - low == 1 for low, high in zip(window, window[1:])):
                return [grouped.cards_of_rank(rank)[0] for rank in ranks[top - 4:top + 1]]
    return None


def find_x_of_a_kind(grouped: GroupedCards,
                     x: Union[int, Callable[[int], bool]]) -> Optional[List[Card]]:
    """
    检查"x张相同点数".
    
    Args:
        grouped: 分组后的牌
        x: 需要的张数，或者对张数的判断函数
        
    Returns:
        满足条件的最大点数的全部牌，没有时返回None
    """
    predicate = x if callable(x) else (lambda count: count == x)
    ranks = grouped.ranks_with_count(predicate)
    if not ranks:
        return None
    return grouped.cards_of_rank(ranks[-1])


def _without(cards: Iterable[Card], excluded: Iterable[Card]) -> List[Card]:
    excluded = set(excluded)
    return [card for card in cards if card not in excluded]


class HandEvaluator:
    """
    德州扑克牌型评估器.
    
    对恰好7张牌（2张手牌 + 5张公共牌）按以下顺序检测，命中即返回：
    四条、同花/同花顺、葫芦、顺子、三条、两对、一对、高牌.
    顺子的检测放在三条分支内部，并先于三条返回.
    
    Examples:
        >>> evaluator = HandEvaluator()
        >>> hand = evaluator.evaluate(["Ad", "Kd", "Qd", "Jd", "Td", "2c", "3c"])
        >>> hand.category
        <HandCategory.STRAIGHT_FLUSH: 8>
    """

    def evaluate(self, cards: Iterable[Union[str, Card]]) -> EvaluatedHand:
        """
        评估7张牌的最佳牌型.
        
        调用方需保证7张牌互不相同，重复牌不做校验.
        
        Args:
            cards: 7张Card对象或两字符编码
            
        Returns:
            EvaluatedHand: 最佳牌型的评估结果
            
        Raises:
            InvalidHandSizeError: 当牌数不是7张时
            InvalidCardError: 当文本编码无效时
        """
        cards = list(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandSizeError(f"需要7张牌，实际: {len(cards)}")

        grouped = group_cards(cards)

        return (self._try_four_of_a_kind(grouped)
                or self._try_flush(grouped)
                or self._try_three_of_a_kind_path(grouped)
                or self._try_pair_path(grouped)
                or _make_result(HandCategory.HIGH_CARD, grouped.cards[-5:]))

    def _try_four_of_a_kind(self, grouped: GroupedCards) -> Optional[EvaluatedHand]:
        # 7张牌中最多只有一组四条
        quads = find_x_of_a_kind(grouped, 4)
        if quads is None:
            return None
        remainder = _without(grouped.cards, quads)
        return _make_result(HandCategory.FOUR_OF_A_KIND, remainder[-1:] + quads)

    def _try_flush(self, grouped: GroupedCards) -> Optional[EvaluatedHand]:
        flush_cards = find_flush(grouped)
        if flush_cards is None:
            return None

        straight = find_straight(group_cards(flush_cards))
        if straight is not None:
            return _make_result(HandCategory.STRAIGHT_FLUSH, straight)
        return _make_result(HandCategory.FLUSH, flush_cards[-5:])

    def _try_three_of_a_kind_path(self, grouped: GroupedCards) -> Optional[EvaluatedHand]:
        trips = find_x_of_a_kind(grouped, 3)
        remainder: List[Card] = []

        if trips is not None:
            remainder = _without(grouped.cards, trips)
            pair = find_x_of_a_kind(group_cards(remainder), lambda count: count >= 2)
            if pair is not None:
                return _make_result(HandCategory.FULL_HOUSE, pair[-2:] + trips)

        # 有三条时同样检测顺子，顺子先于三条返回
        straight = find_straight(grouped)
        if straight is not None:
            return _make_result(HandCategory.STRAIGHT, straight)

        if trips is not None:
            return _make_result(HandCategory.THREE_OF_A_KIND, remainder[-2:] + trips)
        return None

    def _try_pair_path(self, grouped: GroupedCards) -> Optional[EvaluatedHand]:
        pair = find_x_of_a_kind(grouped, 2)
        if pair is None:
            return None

        remainder = _without(grouped.cards, pair)
        grouped_remainder = group_cards(remainder)
        lower_pair = find_x_of_a_kind(grouped_remainder, 2)
        if lower_pair is not None:
            kickers = _without(grouped_remainder.cards, lower_pair)
            return _make_result(HandCategory.TWO_PAIR, kickers[-1:] + lower_pair + pair)
        return _make_result(HandCategory.PAIR, remainder[-3:] + pair)


_default_evaluator = HandEvaluator()


def classify(cards: Iterable[Union[str, Card]]) -> EvaluatedHand:
    """评估7张牌，见 HandEvaluator.evaluate."""
    return _default_evaluator.evaluate(cards)
