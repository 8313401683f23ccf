"""
德州扑克牌型评估模块.

提供分组统计、牌型识别和牌力计算功能.
"""

from .types import HandCategory, EvaluatedHand
from .grouping import GroupedCards, group_cards
from .evaluator import HandEvaluator, classify, score_hand

__all__ = [
    'HandCategory', 'EvaluatedHand',
    'GroupedCards', 'group_cards',
    'HandEvaluator', 'classify', 'score_hand',
]
