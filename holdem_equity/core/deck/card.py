"""
扑克牌数据结构.

定义不可变的Card类，支持文本编码解析、排序和字符串表示.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Dict, Tuple, Union

from ..exceptions import InvalidCardError
from .types import RANK_CHARS, Rank, Suit


_RANK_BY_CHAR: Dict[str, Rank] = {char: Rank(i + 2) for i, char in enumerate(RANK_CHARS)}
_SUIT_BY_CHAR: Dict[str, Suit] = {suit.value: suit for suit in Suit}
_READABLE_RANKS: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A"
}


@total_ordering
@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.
    
    不可变值类型，先按点数、再按花色编码排序.
    
    Attributes:
        rank: 点数
        suit: 花色
        
    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> str(card)
        'as'
        >>> Card.from_str("Td") < Card.from_str("Jc")
        True
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.
        
        Raises:
            InvalidCardError: 当点数或花色不属于固定取值范围时
        """
        if not isinstance(self.rank, Rank):
            raise InvalidCardError(f"点数必须是Rank类型，实际: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"花色必须是Suit类型，实际: {self.suit!r}")

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (self.rank.value, self.suit.value)

    @property
    def readable_value(self) -> str:
        """便于阅读的点数，如"10"、"J"."""
        return _READABLE_RANKS[self.rank]

    @property
    def suit_symbol(self) -> str:
        return self.suit.symbol

    def __str__(self) -> str:
        """
        返回扑克牌的规范文本编码.
        
        Returns:
            str: 小写的"点数花色"两字符编码，如"td"表示方块10
        """
        return f"{self.rank.char}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从两字符编码创建扑克牌对象.
        
        Args:
            card_str: 扑克牌编码，点数字符取自 23456789TJQKA，
                花色字符取自 dchs，大小写不敏感
            
        Returns:
            Card: 对应的扑克牌对象
            
        Raises:
            TypeError: 当输入不是字符串时
            InvalidCardError: 当点数、花色或长度无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.lower()
        if len(text) != 2:
            raise InvalidCardError(f"无效的牌: {card_str!r}")

        rank = _RANK_BY_CHAR.get(text[0])
        if rank is None:
            raise InvalidCardError(f"无效的点数: {card_str[0]!r}")
        suit = _SUIT_BY_CHAR.get(text[1])
        if suit is None:
            raise InvalidCardError(f"无效的花色: {card_str[1]!r}")

        return cls(rank, suit)


def parse_card(card_str: str) -> Card:
    """解析两字符编码，等同于 Card.from_str."""
    return Card.from_str(card_str)


def to_card(value: Union[str, Card]) -> Card:
    """
    将文本编码或Card对象统一转换为Card.
    
    Raises:
        InvalidCardError: 当文本编码无效时
        TypeError: 当输入既不是字符串也不是Card时
    """
    if isinstance(value, Card):
        return value
    return Card.from_str(value)
