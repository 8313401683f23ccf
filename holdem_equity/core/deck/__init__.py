"""
德州扑克牌组管理模块.

提供Card和Deck类，实现扑克牌的解析、排序和工作牌组管理功能.
"""

from .types import Suit, Rank, LOW_ACE_VALUE
from .card import Card, parse_card, to_card
from .deck import Deck, build_template, shuffle

__all__ = [
    'Suit', 'Rank', 'LOW_ACE_VALUE',
    'Card', 'parse_card', 'to_card',
    'Deck', 'build_template', 'shuffle',
]
