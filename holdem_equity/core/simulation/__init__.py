"""
蒙特卡洛胜率模拟模块.
"""

from .types import DealResult, SimulationResult
from .simulator import EquitySimulator, simulate, single_run

__all__ = ['DealResult', 'SimulationResult', 'EquitySimulator', 'simulate', 'single_run']
