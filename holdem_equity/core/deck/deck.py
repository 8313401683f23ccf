"""
扑克牌组管理.

提供标准52张牌模板，以及排除死牌后随机打乱的工作牌组.
"""

import random
from typing import Iterable, List, Optional, Tuple

from ..exceptions import DeckExhaustedError
from .card import Card
from .types import get_all_ranks, get_all_suits


def _create_template() -> Tuple[Card, ...]:
    return tuple(
        Card(rank, suit)
        for rank in get_all_ranks()
        for suit in get_all_suits()
    )


_TEMPLATE: Tuple[Card, ...] = _create_template()


def build_template() -> Tuple[Card, ...]:
    """
    返回标准52张牌模板.
    
    模板只在导入时构建一次，返回值是不可变元组.
    """
    return _TEMPLATE


def shuffle(dead_cards: Iterable[Card] = (), rng: Optional[random.Random] = None) -> List[Card]:
    """
    生成一副新的随机工作牌组.
    
    从模板中去除所有死牌（按值比较），再使用Fisher-Yates算法随机打乱.
    不会修改模板.
    
    Args:
        dead_cards: 已经发出、需要排除的牌
        rng: 随机数生成器，为None时使用模块级默认生成器
        
    Returns:
        List[Card]: 打乱后的牌列表，末尾视为牌顶
    """
    dead = set(dead_cards)
    cards = [card for card in _TEMPLATE if card not in dead]
    (rng or random).shuffle(cards)
    return cards


class Deck:
    """
    表示一副工作牌组.
    
    创建时即排除死牌并洗牌，发牌从列表末尾（牌顶）逐张取出.
    使用可选的随机数生成器以支持确定性测试.
    
    Attributes:
        _cards: 当前牌组中的牌列表
        _rng: 随机数生成器
        
    Examples:
        >>> deck = Deck(dead_cards=[Card.from_str("As")])
        >>> len(deck)
        51
        >>> card = deck.deal_card()
        >>> len(deck)
        50
    """

    def __init__(self, dead_cards: Iterable[Card] = (), rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.
        
        Args:
            dead_cards: 需要排除的死牌
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
        """
        self._rng = rng or random.Random()
        self._dead_cards = frozenset(dead_cards)
        self._cards: List[Card] = shuffle(self._dead_cards, self._rng)

    def shuffle(self) -> None:
        """重新打乱剩余的牌."""
        self._rng.shuffle(self._cards)

    def deal_card(self) -> Card:
        """
        从牌顶发一张牌.
        
        Returns:
            Card: 发出的牌
            
        Raises:
            DeckExhaustedError: 当牌组为空时
        """
        if not self._cards:
            raise DeckExhaustedError("牌组已空，无法继续发牌")
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.
        
        Args:
            count: 要发的牌数
            
        Returns:
            List[Card]: 发出的牌列表，按发牌顺序
            
        Raises:
            ValueError: 当count为负数时
            DeckExhaustedError: 当牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("发牌数量不能为负数")
        if count > len(self._cards):
            raise DeckExhaustedError(f"无法发出{count}张牌，剩余{len(self._cards)}张")
        return [self._cards.pop() for _ in range(count)]

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.
        
        Returns:
            Optional[Card]: 顶部的牌，如果牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[-1]

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
