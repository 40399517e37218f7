"""
CLI User Interface for five-card showdowns
"""

import logging
from typing import List, Sequence, Tuple

from .evaluator import EvaluatedHand, HandCategory, HandEvaluator, WinnerResult
from .exceptions import InsufficientHands
from .game_models import Hand
from .notation import parse_hand
from .schemas import DemoReport, ShowdownReport, winner_message

logger = logging.getLogger(__name__)

# デモ用の配札（各ハンド5枚）
SAMPLE_DEALS: List[List[str]] = [
    [
        "2H 3D 5S 9C KD",
        "2C 3H 4S 8C AH",
        "2S 3C 4H 5D 6D",
        "2H 2D 4C 4D 4S",
    ],
    [
        "2H 2D 5S 5C 5D",
        "2C 4H 4S 8C AH",
        "2S 3C 4H 5D 8D",
        "2H 3D 4C 5D 6S",
    ],
    [
        "10D 11D 12D 13D 14D",
        "2C 4H 4S 8C AH",
        "2S 3C 4H 5D 6D",
        "10H 11H 12H 13H 14H",
    ],
]


class ShowdownUI:
    """ショーダウン結果のCLI表示"""

    CATEGORY_NAMES_JA = {
        HandCategory.ROYAL_FLUSH: "ロイヤルフラッシュ",
        HandCategory.STRAIGHT_FLUSH: "ストレートフラッシュ",
        HandCategory.FOUR_OF_A_KIND: "フォーカード",
        HandCategory.FULL_HOUSE: "フルハウス",
        HandCategory.FLUSH: "フラッシュ",
        HandCategory.STRAIGHT: "ストレート",
        HandCategory.THREE_OF_A_KIND: "スリーカード",
        HandCategory.TWO_PAIR: "ツーペア",
        HandCategory.ONE_PAIR: "ワンペア",
        HandCategory.HIGH_CARD: "ハイカード",
    }

    def __init__(self, as_json: bool = False):
        self.as_json = as_json

    def print_separator(self, char="=", length=60):
        """区切り線を出力"""
        print(char * length)

    def print_title(self, title: str):
        """タイトルを出力"""
        self.print_separator()
        print(f"  {title}")
        self.print_separator()

    def run_deal(self, hand_codes: Sequence[str]) -> WinnerResult:
        """カード表記のリストからハンドを作成して勝者を表示"""
        hands = [parse_hand(codes) for codes in hand_codes]
        return self.show_showdown(hands)

    def run_demo(self) -> List[WinnerResult]:
        """サンプル配札をすべて評価"""
        if self.as_json:
            # JSONモードでは全配札を1つのドキュメントにまとめる
            results = []
            reports = []
            for deal in SAMPLE_DEALS:
                evaluated, result = self._evaluate_showdown(
                    [parse_hand(codes) for codes in deal]
                )
                results.append(result)
                reports.append(ShowdownReport.from_result(evaluated, result))
            print(DemoReport(deals=reports).model_dump_json(indent=2))
            return results

        results = []
        for number, deal in enumerate(SAMPLE_DEALS, start=1):
            self.print_title(f"SAMPLE DEAL #{number}")
            results.append(self.run_deal(deal))
            print()
        return results

    def show_showdown(self, hands: Sequence[Hand]) -> WinnerResult:
        """各ハンドの役と勝者を表示"""
        evaluated, result = self._evaluate_showdown(hands)

        if self.as_json:
            report = ShowdownReport.from_result(evaluated, result)
            print(report.model_dump_json(indent=2))
            return result

        for index, hand_result in enumerate(evaluated, start=1):
            marker = "*" if index - 1 in result.indices else " "
            print(
                f"{marker} Hand {index}: {hand_result.hand} -> "
                f"{hand_result.description}"
                f"（{self.get_category_name_ja(hand_result.category)}）"
            )
        print(winner_message(result))
        return result

    def _evaluate_showdown(
        self, hands: Sequence[Hand]
    ) -> Tuple[List[EvaluatedHand], WinnerResult]:
        """各ハンドを1回だけ評価して勝者を決定"""
        hands = list(hands)
        if len(hands) < 2:
            raise InsufficientHands(len(hands))
        evaluated = [HandEvaluator.evaluate(hand) for hand in hands]
        result = HandEvaluator.select_winners(evaluated)
        logger.info("Showdown: %s", winner_message(result))
        return evaluated, result

    def get_category_name_ja(self, category: HandCategory) -> str:
        """カテゴリ名を日本語で取得"""
        return self.CATEGORY_NAMES_JA.get(category, "不明なハンド")
