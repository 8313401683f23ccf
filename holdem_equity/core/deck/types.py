"""
德州扑克牌组相关类型定义.

定义扑克牌的花色、点数等基础枚举类型.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.
    
    枚举值为单字符编码，花色之间没有强弱之分，
    仅在点数相同时按编码字母顺序作为排序依据.
    """

    DIAMONDS = "d"    # 方块
    CLUBS = "c"       # 梅花
    HEARTS = "h"      # 红桃
    SPADES = "s"      # 黑桃

    @property
    def symbol(self) -> str:
        """花色的Unicode符号."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(IntEnum):
    """
    扑克牌点数枚举.
    
    定义13种扑克牌点数，数值越大表示点数越大.
    A作为最小牌（A-2-3-4-5顺子）时使用 LOW_ACE_VALUE，不会存储在牌上.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        """点数的单字符编码（小写）."""
        return RANK_CHARS[self - Rank.TWO]


# 低位A的点数值，仅用于顺子检测和牌力计算
LOW_ACE_VALUE = 1

RANK_CHARS = "23456789tjqka"


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.
    
    Returns:
        List[Suit]: 包含所有四种花色的列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.
    
    Returns:
        List[Rank]: 包含所有13种点数的列表，从小到大
    """
    return list(Rank)
