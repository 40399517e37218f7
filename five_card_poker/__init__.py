"""
Five-card poker hand classification and showdown
"""

import logging

from .exceptions import (
    InsufficientHands,
    InvalidCardNotation,
    InvalidHandSize,
    PokerError,
)
from .game_models import Card, Hand, Rank, Suit
from .evaluator import (
    EvaluatedHand,
    HandCategory,
    HandEvaluator,
    WinnerResult,
    classify,
    compare,
    determine_winner,
    evaluate,
    tie_break_key,
)
from .notation import card_to_short, parse_card, parse_cards, parse_hand

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Card",
    "EvaluatedHand",
    "Hand",
    "HandCategory",
    "HandEvaluator",
    "InsufficientHands",
    "InvalidCardNotation",
    "InvalidHandSize",
    "PokerError",
    "Rank",
    "Suit",
    "WinnerResult",
    "card_to_short",
    "classify",
    "compare",
    "determine_winner",
    "evaluate",
    "parse_card",
    "parse_cards",
    "parse_hand",
    "tie_break_key",
]
