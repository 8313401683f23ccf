"""
胜率模拟相关类型定义.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..deck.card import Card
from ..eval.types import EvaluatedHand


@dataclass(frozen=True)
class DealResult:
    """
    一次完整发牌的结果.
    
    Attributes:
        hands: 每个座位的评估结果，与输入座位一一对应
        community_cards: 补全后的5张公共牌
        pocket_cards: 每个座位补全后的2张手牌
    """

    hands: Tuple[EvaluatedHand, ...]
    community_cards: Tuple[Card, ...]
    pocket_cards: Tuple[Tuple[Card, Card], ...]

    @property
    def dealt_cards(self) -> Tuple[Card, ...]:
        """本次发牌中出现的全部牌（手牌 + 公共牌）."""
        pockets = tuple(card for pocket in self.pocket_cards for card in pocket)
        return pockets + self.community_cards

    @property
    def winners(self) -> Tuple[int, ...]:
        """牌力最高的座位下标，平局时包含多个."""
        best = max(hand.strength for hand in self.hands)
        return tuple(i for i, hand in enumerate(self.hands) if hand.strength == best)


@dataclass(frozen=True)
class SimulationResult:
    """
    蒙特卡洛模拟结果.
    
    Attributes:
        equities: 每个座位的胜率（0到1之间），未使用的座位为None
        iterations: 实际执行的模拟次数
        requested_iterations: 请求的模拟次数
        
    Examples:
        >>> result = simulate([["Ac", "As"], ["Kd", "Kh"]], iterations=1000)
        >>> result.iterations
        1000
    """

    equities: Tuple[Optional[float], ...]
    iterations: int
    requested_iterations: int

    @property
    def truncated(self) -> bool:
        """是否因为时间上限而提前结束."""
        return self.iterations < self.requested_iterations

    @property
    def total_equity(self) -> float:
        return sum(equity for equity in self.equities if equity is not None)
