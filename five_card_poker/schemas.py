"""
Showdown report schema (JSON output)
"""

from typing import List, Sequence

from pydantic import BaseModel, Field

from .evaluator import EvaluatedHand, WinnerResult
from .notation import card_to_short


class HandReport(BaseModel):
    index: int = Field(description="1-based position of the hand in the input")
    cards: List[str] = Field(description="Card codes, e.g. 'AS', '10H'")
    category: str = Field(description="Hand category name, e.g. 'FULL_HOUSE'")
    tie_break_key: List[int] = Field(description="Tie-break ranks, most significant first")
    description: str = Field(description="Human readable hand description")

    @classmethod
    def from_evaluated(cls, index: int, evaluated: EvaluatedHand) -> "HandReport":
        return cls(
            index=index,
            cards=[card_to_short(card) for card in evaluated.hand],
            category=evaluated.category.name,
            tie_break_key=list(evaluated.tie_break_key),
            description=evaluated.description,
        )


class ShowdownReport(BaseModel):
    hands: List[HandReport] = Field(description="Every evaluated hand, in input order")
    winners: List[int] = Field(description="1-based indices of the winning hand(s)")
    is_tie: bool = Field(description="True when two or more hands share the win")
    message: str = Field(description="Summary line, e.g. 'Hand 1 wins with a flush'")

    @classmethod
    def from_result(
        cls, evaluated: Sequence[EvaluatedHand], result: WinnerResult
    ) -> "ShowdownReport":
        return cls(
            hands=[
                HandReport.from_evaluated(i + 1, e) for i, e in enumerate(evaluated)
            ],
            winners=[i + 1 for i in result.indices],
            is_tie=result.is_tie,
            message=winner_message(result),
        )


class DemoReport(BaseModel):
    deals: List[ShowdownReport] = Field(description="One showdown report per sample deal")


def winner_message(result: WinnerResult) -> str:
    """'Hand 4 wins with a full house' / 'Tie between Hand 1 and Hand 4 with a royal flush'"""
    label = result.category.label
    if not result.is_tie:
        return f"Hand {result.indices[0] + 1} wins with a {label}"
    names = [f"Hand {i + 1}" for i in result.indices]
    joined = ", ".join(names[:-1]) + f" and {names[-1]}"
    return f"Tie between {joined} with a {label}"
