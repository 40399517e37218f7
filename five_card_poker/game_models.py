"""
Poker hand models: Rank, Suit, Card and five-card Hand
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Tuple

from .exceptions import InvalidHandSize

HAND_SIZE = 5


class Suit(Enum):
    """カードのスート（順序なし）"""

    SPADES = "spades"
    CLUBS = "clubs"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"


class Rank(IntEnum):
    """カードのランク（2 < 3 < ... < K < A）"""

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
    def display_name(self) -> str:
        return Card.RANK_NAMES[self.value]


@dataclass(frozen=True)
class Card:
    """トランプカード（不変）"""

    rank: Rank
    suit: Suit

    # スートの記号マップ
    SUIT_SYMBOLS = {
        Suit.HEARTS: "♥",
        Suit.DIAMONDS: "♦",
        Suit.CLUBS: "♣",
        Suit.SPADES: "♠",
    }

    # ランクの表記マップ
    RANK_NAMES = {
        2: "2",
        3: "3",
        4: "4",
        5: "5",
        6: "6",
        7: "7",
        8: "8",
        9: "9",
        10: "10",
        11: "J",
        12: "Q",
        13: "K",
        14: "A",
    }

    def __post_init__(self):
        """
        Args:
            rank: カードのランク（2-14, 11=J, 12=Q, 13=K, 14=A）。intも受け付ける
            suit: カードのスート
        """
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise ValueError(f"Rank must be an integer, got {self.rank!r}")
        if self.rank < 2 or self.rank > 14:
            raise ValueError("Rank must be between 2 and 14")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Suit must be a Suit, got {self.suit!r}")
        # frozenなのでobject.__setattr__で正規化する
        object.__setattr__(self, "rank", Rank(self.rank))

    @property
    def rank_name(self) -> str:
        """ランクの表示名を取得"""
        return self.RANK_NAMES[self.rank]

    @property
    def suit_symbol(self) -> str:
        """スートの記号を取得"""
        return self.SUIT_SYMBOLS[self.suit]

    def __str__(self) -> str:
        """カードの文字列表現（例: A♠）"""
        return f"{self.rank_name}{self.suit_symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank_name}, {self.suit.value})"


@dataclass(frozen=True, init=False, eq=False)
class Hand:
    """5枚のカードからなるハンド（不変、カードの順序は問わない）

    同一ハンド内・ハンド間のカード重複は検証しない。
    物理的なデッキとしての整合性は呼び出し側の責任。
    """

    cards: Tuple[Card, ...]

    def __init__(self, cards: Iterable[Card]):
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandSize(len(cards))
        object.__setattr__(self, "cards", cards)

    @property
    def ranks(self) -> Tuple[int, ...]:
        return tuple(int(card.rank) for card in self.cards)

    @property
    def suits(self) -> Tuple[Suit, ...]:
        return tuple(card.suit for card in self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return Counter(self.cards) == Counter(other.cards)

    def __hash__(self) -> int:
        return hash(frozenset(self.cards))

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)
