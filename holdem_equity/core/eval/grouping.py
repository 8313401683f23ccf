"""
按点数和花色对任意一组牌进行分组统计.
"""

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple, Union

from ..deck.card import Card, to_card
from ..deck.types import Rank, Suit


@dataclass(frozen=True)
class GroupedCards:
    """
    一组牌的派生视图.
    
    Attributes:
        rank_counts: 点数 -> 张数，按点数从小到大排列
        suit_counts: 花色 -> 张数
        cards: 按(点数, 花色)升序排列的牌
    """

    rank_counts: Mapping[Rank, int]
    suit_counts: Mapping[Suit, int]
    cards: Tuple[Card, ...]

    @property
    def distinct_ranks(self) -> List[Rank]:
        return list(self.rank_counts)

    def ranks_with_count(self, predicate) -> List[Rank]:
        """返回张数满足条件的点数列表，从小到大."""
        return [rank for rank, count in self.rank_counts.items() if predicate(count)]

    def cards_of_rank(self, rank: Rank) -> List[Card]:
        return [card for card in self.cards if card.rank == rank]

    def cards_of_suit(self, suit: Suit) -> List[Card]:
        return [card for card in self.cards if card.suit == suit]


def group_cards(cards: Iterable[Union[str, Card]]) -> GroupedCards:
    """
    对牌进行排序和分组统计.
    
    纯函数，不修改输入. 所有牌型规则都以此作为预处理步骤.
    
    Args:
        cards: Card对象或两字符编码
        
    Returns:
        GroupedCards: 分组结果，两个计数映射的总和都等于牌数
    """
    ordered = tuple(sorted(to_card(card) for card in cards))
    rank_counts = Counter(card.rank for card in ordered)
    suit_counts = Counter(card.suit for card in ordered)
    return GroupedCards(
        rank_counts=MappingProxyType(dict(rank_counts)),
        suit_counts=MappingProxyType(dict(suit_counts)),
        cards=ordered,
    )
