"""
蒙特卡洛胜率模拟器.

每次模拟都从排除已知牌后重新洗好的牌组中补全所有未指定的手牌和公共牌，
评估每个座位的7张牌，按牌力统计胜局（平局平分），最后按实际执行次数归一化.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..config import SimulationConfig
from ..deck.card import Card, to_card
from ..deck.deck import Deck
from ..eval.evaluator import HandEvaluator
from ..exceptions import InvalidBoardError, InvalidCardError, InvalidPocketInputError
from .types import DealResult, SimulationResult


logger = logging.getLogger(__name__)

CardInput = Union[str, Card, None]
PocketSlot = Optional[Sequence[CardInput]]

POCKET_SIZE = 2
BOARD_SIZE = 5


@dataclass(frozen=True)
class _Table:
    """校验并转换后的输入，每次模拟都以此为模板重新补全."""

    pockets: Tuple[Tuple[Optional[Card], ...], ...]
    board: Tuple[Optional[Card], ...]
    active: Tuple[bool, ...]
    dead_cards: Tuple[Card, ...]


def _convert(value: CardInput) -> Optional[Card]:
    if value is None:
        return None
    return to_card(value)


def _pad(cards: List[Optional[Card]], size: int) -> Tuple[Optional[Card], ...]:
    return tuple(cards + [None] * (size - len(cards)))


def _prepare_table(pocket_slots: Optional[Sequence[PocketSlot]],
                   community_cards: Optional[Sequence[CardInput]]) -> _Table:
    """
    校验座位和公共牌输入.
    
    Raises:
        InvalidPocketInputError: 座位集合缺失、为空，或某个座位超过2张牌
        InvalidBoardError: 公共牌超过5张
        InvalidCardError: 牌编码无效或已知牌重复
    """
    if pocket_slots is None or isinstance(pocket_slots, str):
        raise InvalidPocketInputError("必须提供手牌座位列表")
    if len(pocket_slots) == 0:
        raise InvalidPocketInputError("手牌座位列表不能为空")

    pockets = []
    active = []
    for seat, slot in enumerate(pocket_slots):
        if slot is None:
            slot = ()
        if isinstance(slot, (str, Card)):
            raise InvalidPocketInputError(f"座位{seat}必须是牌的序列，实际: {slot!r}")
        if len(slot) > POCKET_SIZE:
            raise InvalidPocketInputError(f"座位{seat}最多2张手牌，实际: {len(slot)}")
        active.append(len(slot) > 0)
        pockets.append(_pad([_convert(card) for card in slot], POCKET_SIZE))

    board_input = list(community_cards or [])
    if len(board_input) > BOARD_SIZE:
        raise InvalidBoardError(f"公共牌最多5张，实际: {len(board_input)}")
    board = _pad([_convert(card) for card in board_input], BOARD_SIZE)

    known = [card for pocket in pockets for card in pocket if card is not None]
    known += [card for card in board if card is not None]
    if len(set(known)) != len(known):
        duplicates = sorted({str(card) for card in known if known.count(card) > 1})
        raise InvalidCardError(f"已知牌重复: {', '.join(duplicates)}")

    return _Table(tuple(pockets), board, tuple(active), tuple(known))


class EquitySimulator:
    """
    蒙特卡洛胜率模拟器.
    
    单线程顺序执行，每次模拟之间不共享可变状态.
    随机数生成器和计时时钟均可注入，以支持确定性测试.
    
    Attributes:
        config: 模拟配置
        
    Examples:
        >>> simulator = EquitySimulator(rng=random.Random(7))
        >>> result = simulator.simulate([["Ac", "As"], None], iterations=500)
        >>> result.equities[1] is None
        True
    """

    def __init__(self,
                 config: Optional[SimulationConfig] = None,
                 rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], float]] = None,
                 evaluator: Optional[HandEvaluator] = None) -> None:
        """
        初始化模拟器.
        
        Args:
            config: 模拟配置，为None时使用默认配置
            rng: 随机数生成器，优先于配置中的随机种子
            clock: 返回秒数的单调时钟，默认 time.perf_counter
            evaluator: 牌型评估器
        """
        self.config = config or SimulationConfig()
        self._rng = rng or random.Random(self.config.random_seed)
        self._clock = clock or time.perf_counter
        self._evaluator = evaluator or HandEvaluator()

    def _deal(self, table: _Table) -> DealResult:
        deck = Deck(table.dead_cards, self._rng)

        pockets = []
        for pocket in table.pockets:
            pockets.append(tuple(card if card is not None else deck.deal_card() for card in pocket))
        board = tuple(card if card is not None else deck.deal_card() for card in table.board)

        hands = tuple(self._evaluator.evaluate(pocket + board) for pocket in pockets)
        return DealResult(hands=hands, community_cards=board, pocket_cards=tuple(pockets))

    def single_run(self,
                   pocket_slots: Sequence[PocketSlot],
                   community_cards: Optional[Sequence[CardInput]] = None) -> DealResult:
        """
        执行一次发牌并评估所有座位.
        
        Args:
            pocket_slots: 座位列表，每个座位为None、空序列或最多2张牌的序列，
                序列中的None位置随机补全
            community_cards: 0到5张已知公共牌，None位置随机补全
            
        Returns:
            DealResult: 补全后的手牌、公共牌和评估结果
            
        Raises:
            InvalidPocketInputError: 座位输入无效时
            InvalidBoardError: 公共牌超过5张时
            InvalidCardError: 牌编码无效或重复时
            DeckExhaustedError: 剩余牌不足以补全所有位置时
        """
        return self._deal(_prepare_table(pocket_slots, community_cards))

    def simulate(self,
                 pocket_slots: Sequence[PocketSlot],
                 community_cards: Optional[Sequence[CardInput]] = None,
                 iterations: Optional[int] = None,
                 time_limit_ms: Optional[int] = None) -> SimulationResult:
        """
        通过重复随机补全估计每个座位的胜率.
        
        每次模拟中牌力最高的座位平分1个单位的胜率. 为None或空序列的座位
        作为随机对手参与比牌，但不报告其胜率.
        
        Args:
            pocket_slots: 座位列表，格式同 single_run
            community_cards: 0到5张已知公共牌
            iterations: 请求的模拟次数，默认取自配置
            time_limit_ms: 时间上限（毫秒），默认取自配置；每隔
                time_check_interval 次检查一次，不会中断正在进行的模拟
            
        Returns:
            SimulationResult: 各座位胜率和实际执行次数
            
        Raises:
            ValueError: 当模拟次数小于1时
            InvalidPocketInputError: 座位输入无效时
            InvalidBoardError: 公共牌超过5张时
            InvalidCardError: 牌编码无效或重复时
            DeckExhaustedError: 剩余牌不足以补全所有位置时，整个模拟中止
        """
        if iterations is None:
            iterations = self.config.iterations
        if time_limit_ms is None:
            time_limit_ms = self.config.time_limit_ms
        if iterations < 1:
            raise ValueError(f"模拟次数必须至少为1: {iterations}")

        table = _prepare_table(pocket_slots, community_cards)
        check_interval = self.config.time_check_interval
        logger.debug(f"开始模拟: {len(table.pockets)}个座位, 请求{iterations}次, 时间上限{time_limit_ms}ms")

        wins = [0.0] * len(table.pockets)
        started = self._clock()
        count = 0
        while count < iterations:
            deal = self._deal(table)
            winners = deal.winners
            share = 1 / len(winners)
            for seat in winners:
                wins[seat] += share
            count += 1

            if (time_limit_ms and count % check_interval == 0
                    and (self._clock() - started) * 1000 > time_limit_ms):
                logger.info(f"达到时间上限{time_limit_ms}ms，已执行{count}/{iterations}次模拟")
                break

        equities = tuple(
            wins[seat] / count if is_active else None
            for seat, is_active in enumerate(table.active)
        )
        logger.debug(f"模拟完成: {count}次, 胜率 {equities}")
        return SimulationResult(equities=equities, iterations=count, requested_iterations=iterations)


def single_run(pocket_slots: Sequence[PocketSlot],
               community_cards: Optional[Sequence[CardInput]] = None,
               rng: Optional[random.Random] = None) -> DealResult:
    """执行一次发牌，见 EquitySimulator.single_run."""
    return EquitySimulator(rng=rng).single_run(pocket_slots, community_cards)


def simulate(pocket_slots: Sequence[PocketSlot],
             community_cards: Optional[Sequence[CardInput]] = None,
             iterations: int = 10_000,
             time_limit_ms: Optional[int] = None,
             rng: Optional[random.Random] = None) -> SimulationResult:
    """估计各座位胜率，见 EquitySimulator.simulate."""
    return EquitySimulator(rng=rng).simulate(pocket_slots, community_cards, iterations, time_limit_ms)
