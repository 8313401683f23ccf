"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture（固定种子的随机数生成器、可控时钟）
- 测试标记定义
"""

import random
import sys
from pathlib import Path
from typing import List

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from holdem_equity.core.deck import Card
from holdem_equity.core.eval import HandEvaluator


class FakeClock:
    """每次调用前进固定秒数的时钟，用于确定性地测试时间上限"""

    def __init__(self, step: float = 0.0):
        self.step = step
        self.now = 0.0
        self.calls = 0

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        self.calls += 1
        return current


@pytest.fixture
def rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(20240601)


@pytest.fixture
def evaluator():
    return HandEvaluator()


@pytest.fixture
def fake_clock():
    """可控时钟工厂fixture"""
    return FakeClock


def cards_of(*codes: str) -> List[Card]:
    """从两字符编码创建卡牌列表"""
    return [Card.from_str(code) for code in codes]


def codes_of(cards) -> List[str]:
    return [str(card) for card in cards]


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
    config.addinivalue_line(
        "markers", "slow: 标记运行时间较长的测试"
    )
