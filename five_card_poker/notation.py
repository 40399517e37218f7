"""
Card notation helpers: "AS", "10H", "K♦" <-> Card
"""

import re
from typing import Dict, Iterable, List, Union

from .exceptions import InvalidCardNotation
from .game_models import Card, Hand, Rank, Suit

__all__ = [
    "parse_card",
    "parse_cards",
    "parse_hand",
    "card_to_short",
]

# ====== 内部ヘルパ ======

_RANK_TO_INT: Dict[str, int] = {
    "A": 14, "K": 13, "Q": 12, "J": 11, "T": 10, "10": 10,
    "9": 9, "8": 8, "7": 7, "6": 6, "5": 5, "4": 4, "3": 3, "2": 2,
}
_INT_TO_RANK: Dict[int, str] = {
    14: "A", 13: "K", 12: "Q", 11: "J", 10: "10", 9: "9", 8: "8",
    7: "7", 6: "6", 5: "5", 4: "4", 3: "3", 2: "2",
}

_UNICODE_TO_SUIT = {"♥": Suit.HEARTS, "♦": Suit.DIAMONDS, "♣": Suit.CLUBS, "♠": Suit.SPADES}
_LETTER_TO_SUIT = {"H": Suit.HEARTS, "D": Suit.DIAMONDS, "C": Suit.CLUBS, "S": Suit.SPADES}
_SUIT_TO_LETTER = {suit: letter for letter, suit in _LETTER_TO_SUIT.items()}

_SEPARATORS = re.compile(r"[\s,]+")


def _symbol_to_suit(symbol: str, token: str) -> Suit:
    """'♥♦♣♠' だけでなく 'H/D/C/S'（大文字小文字問わず）も許容"""
    if symbol in _UNICODE_TO_SUIT:
        return _UNICODE_TO_SUIT[symbol]
    up = symbol.upper()
    if up in _LETTER_TO_SUIT:
        return _LETTER_TO_SUIT[up]
    raise InvalidCardNotation(token, f"unknown suit {symbol!r}")


def _rank_to_int(rank_str: str, token: str) -> int:
    rs = rank_str.upper()
    if rs in _RANK_TO_INT:
        return _RANK_TO_INT[rs]
    # "11D".."14D" のような数値表記も受け付ける
    if rs.isascii() and rs.isdigit() and 2 <= int(rs) <= 14:
        return int(rs)
    raise InvalidCardNotation(token, f"unknown rank {rank_str!r}")


# ====== 公開API ======

def parse_card(code: str) -> Card:
    """カード表記を Card に変換する（例: 'AS', '10h', 'K♦', '14D'）"""
    if not isinstance(code, str):
        raise InvalidCardNotation(repr(code), "card code must be a string")
    s = code.strip()
    if len(s) < 2:
        raise InvalidCardNotation(code, "too short")
    suit = _symbol_to_suit(s[-1], code)
    rank = _rank_to_int(s[:-1], code)
    return Card(Rank(rank), suit)


def parse_cards(codes: Union[str, Iterable[str]]) -> List[Card]:
    """空白・カンマ区切りの文字列、または表記のリストを Card のリストに変換"""
    if isinstance(codes, str):
        codes = [c for c in _SEPARATORS.split(codes) if c]
    return [parse_card(c) for c in codes]


def parse_hand(codes: Union[str, Iterable[str]]) -> Hand:
    """表記から Hand を作成（枚数違いは InvalidHandSize）"""
    return Hand(parse_cards(codes))


def card_to_short(card: Card) -> str:
    """Card を短い表記に変換（例: Card(14, SPADES) -> 'AS'）"""
    return f"{_INT_TO_RANK[int(card.rank)]}{_SUIT_TO_LETTER[card.suit]}"
