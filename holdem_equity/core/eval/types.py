"""
牌型评估相关类型定义.

定义牌型等级和评估结果等核心数据结构.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from ..deck.card import Card


class HandCategory(IntEnum):
    """
    德州扑克牌型枚举.
    
    数值即牌型序号，越大表示牌型越强，直接参与牌力计算.
    """

    HIGH_CARD = 0          # 高牌
    PAIR = 1               # 一对
    TWO_PAIR = 2           # 两对
    THREE_OF_A_KIND = 3    # 三条
    STRAIGHT = 4           # 顺子
    FLUSH = 5              # 同花
    FULL_HOUSE = 6         # 葫芦
    FOUR_OF_A_KIND = 7     # 四条
    STRAIGHT_FLUSH = 8     # 同花顺

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pairs",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


@dataclass(frozen=True)
class EvaluatedHand:
    """
    牌型评估结果.
    
    包含牌型、组成该牌型的5张牌以及单一的整数牌力值.
    两手牌的胜负只由牌力值决定，牌力相等即为平局.
    
    Attributes:
        category: 牌型
        cards: 组成牌型的5张牌，按权重从低到高排列（第0张权重最低）
        strength: 牌力值，可直接比较大小
        
    Examples:
        >>> hand = classify(["7c", "7d", "7h", "7s", "2c", "3d", "4h"])
        >>> hand.category
        <HandCategory.FOUR_OF_A_KIND: 7>
        >>> str(hand.cards[0])
        '4h'
    """

    category: HandCategory
    cards: Tuple[Card, ...]
    strength: int

    def __post_init__(self) -> None:
        """
        验证评估结果的有效性.
        
        Raises:
            TypeError: 当牌型类型无效时
            ValueError: 当牌数不是5张时
        """
        if not isinstance(self.category, HandCategory):
            raise TypeError(f"牌型必须是HandCategory类型，实际: {type(self.category)}")
        if len(self.cards) != 5:
            raise ValueError(f"评估结果必须包含5张牌，实际: {len(self.cards)}")

    @property
    def top_card(self) -> Card:
        """权重最高的一张牌（顺子中即最大的一张）."""
        return self.cards[-1]

    def compare_to(self, other: Optional['EvaluatedHand']) -> int:
        """
        比较两手牌的强弱.
        
        Args:
            other: 另一个评估结果，可以为None
            
        Returns:
            int: 正数表示当前牌更强，负数表示更弱，0表示平局；
                与None比较时总是返回1
        """
        if other is None:
            return 1
        return self.strength - other.strength

    def __str__(self) -> str:
        cards = ",".join(str(card) for card in self.cards)
        return f"{self.category.display_name}: {cards} = {self.strength}"
