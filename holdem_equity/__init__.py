"""
Texas Hold'em Equity Calculator

This package classifies the best 5-card poker hand out of 7 cards and
estimates every player's winning probability by repeated randomized
completion of partially known deals.
"""

from .core.deck import Card, Deck, Rank, Suit, parse_card
from .core.eval import EvaluatedHand, HandCategory, HandEvaluator, classify
from .core.simulation import DealResult, EquitySimulator, SimulationResult, simulate, single_run
from .core.config import SimulationConfig, LoggingConfig, configure_logging, get_simulation_config
from .core.exceptions import (
    HoldemEquityError,
    InvalidCardError,
    InvalidHandSizeError,
    InvalidPocketInputError,
    InvalidBoardError,
    DeckExhaustedError,
)

__version__ = "1.0.0"

__all__ = [
    # Card model
    'Card', 'Deck', 'Rank', 'Suit', 'parse_card',

    # Classification
    'EvaluatedHand', 'HandCategory', 'HandEvaluator', 'classify',

    # Simulation
    'DealResult', 'EquitySimulator', 'SimulationResult', 'simulate', 'single_run',

    # Configuration
    'SimulationConfig', 'LoggingConfig', 'configure_logging', 'get_simulation_config',

    # Errors
    'HoldemEquityError', 'InvalidCardError', 'InvalidHandSizeError',
    'InvalidPocketInputError', 'InvalidBoardError', 'DeckExhaustedError',
]
