"""
Five-card poker hand evaluation system
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .exceptions import InsufficientHands
from .game_models import Card, Hand

logger = logging.getLogger(__name__)

# ランク2-14を0-12に対応させる頻度テーブルのサイズ
_RANK_BUCKETS = 13


class HandCategory(Enum):
    """ハンドカテゴリ（強い順）"""

    ROYAL_FLUSH = 10
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1

    @property
    def label(self) -> str:
        """結果メッセージ用の表記（例: 'full house'）"""
        return self.name.lower().replace("_", " ")


class EvaluatedHand:
    """ハンド評価結果（読み取り専用）"""

    __slots__ = ("_hand", "_category", "_tie_break_key", "_description")

    def __init__(
        self,
        hand: Hand,
        category: HandCategory,
        tie_break_key: Sequence[int],
        description: str = "",
    ):
        self._hand = hand
        self._category = category
        self._tie_break_key = tuple(int(r) for r in tie_break_key)  # 同じカテゴリの場合の比較用
        self._description = description

    @property
    def hand(self) -> Hand:
        return self._hand

    @property
    def category(self) -> HandCategory:
        return self._category

    @property
    def tie_break_key(self) -> Tuple[int, ...]:
        return self._tie_break_key

    @property
    def description(self) -> str:
        return self._description

    @property
    def strength(self) -> Tuple[int, Tuple[int, ...]]:
        return self._category.value, self._tie_break_key

    def __lt__(self, other):
        """ハンドの強さを比較（弱い方がTrue）"""
        if not isinstance(other, EvaluatedHand):
            return NotImplemented
        return self.strength < other.strength

    def __eq__(self, other):
        """ハンドの強さが同じかチェック"""
        if not isinstance(other, EvaluatedHand):
            return NotImplemented
        return self.strength == other.strength

    __hash__ = None

    def __str__(self):
        return f"{self._description} - {self._hand}"

    def __repr__(self):
        return (
            f"EvaluatedHand({self._category.name}, "
            f"key={list(self._tie_break_key)}, hand=[{self._hand}])"
        )


@dataclass(frozen=True)
class WinnerResult:
    """勝者判定の結果

    winners は1つ以上。2つ以上なら引き分け（共同勝者）。
    indices は入力リスト中の勝者の位置（0始まり）。
    """

    winners: Tuple[EvaluatedHand, ...]
    indices: Tuple[int, ...]

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    @property
    def winner(self) -> EvaluatedHand:
        """単独勝者を取得（引き分けの場合はエラー）"""
        if self.is_tie:
            raise ValueError(
                f"Result is a tie between {len(self.winners)} hands; use winners"
            )
        return self.winners[0]

    @property
    def category(self) -> HandCategory:
        return self.winners[0].category


class HandEvaluator:
    """ハンド評価クラス"""

    @staticmethod
    def evaluate(hand: Hand) -> EvaluatedHand:
        """ハンドを分類し、タイブレークキーと説明を付けて返す"""
        category = HandEvaluator.classify(hand)
        key = HandEvaluator._tie_break_key(hand, category)
        result = EvaluatedHand(
            hand, category, key, HandEvaluator._describe(category, key)
        )
        logger.debug("Evaluated [%s] as %s key=%s", hand, category.name, list(key))
        return result

    @staticmethod
    def classify(hand: Hand) -> HandCategory:
        """ハンドのカテゴリを判定（上から順に最初に一致したもの）"""
        ranks = hand.ranks
        is_flush = len(set(hand.suits)) == 1
        is_straight = HandEvaluator._is_straight(ranks)

        rank_counts = HandEvaluator._rank_counts(ranks)
        quad_count = rank_counts.count(4)
        triple_count = rank_counts.count(3)
        pair_count = rank_counts.count(2)

        # ロイヤルフラッシュ（A-K-Q-J-10）
        if is_flush and is_straight and max(ranks) == 14:
            return HandCategory.ROYAL_FLUSH
        if is_flush and is_straight:
            return HandCategory.STRAIGHT_FLUSH
        if quad_count == 1:
            return HandCategory.FOUR_OF_A_KIND
        if triple_count == 1 and pair_count == 1:
            return HandCategory.FULL_HOUSE
        if is_flush:
            return HandCategory.FLUSH
        if is_straight:
            return HandCategory.STRAIGHT
        if triple_count == 1:
            return HandCategory.THREE_OF_A_KIND
        if pair_count == 2:
            return HandCategory.TWO_PAIR
        if pair_count == 1:
            return HandCategory.ONE_PAIR
        return HandCategory.HIGH_CARD

    @staticmethod
    def tie_break_key(hand: Hand, category: HandCategory) -> Tuple[int, ...]:
        """同じカテゴリ同士の比較に使うランク列（重要な順）"""
        actual = HandEvaluator.classify(hand)
        if category != actual:
            raise ValueError(
                f"Hand [{hand}] is {actual.name}, not {category.name}"
            )
        return HandEvaluator._tie_break_key(hand, category)

    @staticmethod
    def _tie_break_key(hand: Hand, category: HandCategory) -> Tuple[int, ...]:
        ranks = sorted(hand.ranks, reverse=True)

        if category in (HandCategory.ROYAL_FLUSH, HandCategory.STRAIGHT_FLUSH):
            return (ranks[0],)
        if category in (
            HandCategory.FLUSH,
            HandCategory.STRAIGHT,
            HandCategory.HIGH_CARD,
        ):
            return tuple(ranks)

        rank_counts = HandEvaluator._rank_counts(ranks)
        quads = HandEvaluator._ranks_with_count(rank_counts, 4)
        triples = HandEvaluator._ranks_with_count(rank_counts, 3)
        pairs = HandEvaluator._ranks_with_count(rank_counts, 2)
        singles = HandEvaluator._ranks_with_count(rank_counts, 1)

        if category == HandCategory.FOUR_OF_A_KIND:
            return (quads[0], singles[0])
        if category == HandCategory.FULL_HOUSE:
            return (triples[0], pairs[0])
        if category == HandCategory.THREE_OF_A_KIND:
            return (triples[0], *singles)
        if category == HandCategory.TWO_PAIR:
            return (pairs[0], pairs[1], singles[0])
        if category == HandCategory.ONE_PAIR:
            return (pairs[0], *singles)

        raise ValueError(f"Unknown hand category: {category!r}")

    @staticmethod
    def compare_hands(hand1: Hand, hand2: Hand) -> int:
        """
        2つのハンドを比較

        Returns:
            1: hand1が勝ち
            -1: hand2が勝ち
            0: 引き分け
        """
        return HandEvaluator.compare_results(
            HandEvaluator.evaluate(hand1), HandEvaluator.evaluate(hand2)
        )

    @staticmethod
    def compare_results(result1: EvaluatedHand, result2: EvaluatedHand) -> int:
        """評価済みハンドの比較（戻り値は compare_hands と同じ）"""
        if result1.category.value > result2.category.value:
            return 1
        elif result1.category.value < result2.category.value:
            return -1
        else:
            # 同じカテゴリの場合はタイブレークキーで比較
            for k1, k2 in zip(result1.tie_break_key, result2.tie_break_key):
                if k1 > k2:
                    return 1
                elif k1 < k2:
                    return -1
            return 0  # 完全に同じ

    @staticmethod
    def determine_winner(hands: Sequence[Hand]) -> WinnerResult:
        """
        複数のハンドから勝者を決定

        引き分けの場合は該当するハンドをすべて共同勝者として返す。

        Raises:
            InsufficientHands: ハンドが2つ未満の場合
        """
        hands = list(hands)
        if len(hands) < 2:
            raise InsufficientHands(len(hands))
        return HandEvaluator.select_winners(
            [HandEvaluator.evaluate(hand) for hand in hands]
        )

    @staticmethod
    def select_winners(results: Sequence[EvaluatedHand]) -> WinnerResult:
        """評価済みハンドから勝者を決定（determine_winner と同じ規則）"""
        results = list(results)
        if len(results) < 2:
            raise InsufficientHands(len(results))

        best: Optional[EvaluatedHand] = None
        winners: List[EvaluatedHand] = []
        indices: List[int] = []
        for index, evaluated in enumerate(results):
            if best is None:
                best = evaluated
                winners, indices = [evaluated], [index]
                continue

            outcome = HandEvaluator.compare_results(evaluated, best)
            if outcome > 0:
                # より強いハンドが現れたら候補を入れ替える
                best = evaluated
                winners, indices = [evaluated], [index]
            elif outcome == 0:
                winners.append(evaluated)
                indices.append(index)

        logger.debug(
            "Winner(s) among %d hands: indices=%s category=%s",
            len(results),
            indices,
            best.category.name,
        )
        return WinnerResult(tuple(winners), tuple(indices))

    @staticmethod
    def _is_straight(ranks: Sequence[int]) -> bool:
        """ストレートかどうかをチェック（A-5ストレートは対象外、Aは常に14）"""
        distinct = set(ranks)
        if len(distinct) != 5:
            return False
        return max(distinct) - min(distinct) == 4

    @staticmethod
    def _rank_counts(ranks: Sequence[int]) -> List[int]:
        """ランクごとの枚数（2→index 0, A→index 12）"""
        counts = [0] * _RANK_BUCKETS
        for rank in ranks:
            counts[rank - 2] += 1
        return counts

    @staticmethod
    def _ranks_with_count(rank_counts: Sequence[int], count: int) -> List[int]:
        """指定枚数のランクを降順で返す"""
        return [
            index + 2
            for index in range(_RANK_BUCKETS - 1, -1, -1)
            if rank_counts[index] == count
        ]

    @staticmethod
    def _describe(category: HandCategory, key: Sequence[int]) -> str:
        names = Card.RANK_NAMES
        if category == HandCategory.ROYAL_FLUSH:
            return "Royal Flush"
        if category == HandCategory.STRAIGHT_FLUSH:
            return f"Straight Flush: {names[key[0]]}-high"
        if category == HandCategory.FOUR_OF_A_KIND:
            return f"Four of a Kind: {names[key[0]]}s"
        if category == HandCategory.FULL_HOUSE:
            return f"Full House: {names[key[0]]}s over {names[key[1]]}s"
        if category == HandCategory.FLUSH:
            return f"Flush: {names[key[0]]}-high"
        if category == HandCategory.STRAIGHT:
            return f"Straight: {names[key[0]]}-high"
        if category == HandCategory.THREE_OF_A_KIND:
            return f"Three of a Kind: {names[key[0]]}s"
        if category == HandCategory.TWO_PAIR:
            return f"Two Pair: {names[key[0]]}s and {names[key[1]]}s"
        if category == HandCategory.ONE_PAIR:
            return f"One Pair: {names[key[0]]}s"
        return f"High Card: {names[key[0]]}"


def evaluate(hand: Hand) -> EvaluatedHand:
    return HandEvaluator.evaluate(hand)


def classify(hand: Hand) -> HandCategory:
    return HandEvaluator.classify(hand)


def tie_break_key(hand: Hand, category: HandCategory) -> Tuple[int, ...]:
    return HandEvaluator.tie_break_key(hand, category)


def compare(a: Hand, b: Hand) -> int:
    return HandEvaluator.compare_hands(a, b)


def determine_winner(hands: Sequence[Hand]) -> WinnerResult:
    return HandEvaluator.determine_winner(hands)
