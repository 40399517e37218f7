"""
Poker hand evaluation errors
"""


class PokerError(ValueError):
    """ハンド評価で発生するエラーの基底クラス"""


class InvalidHandSize(PokerError):
    """ハンドの枚数が5枚でない"""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"A hand must contain exactly 5 cards, got {count}")


class InsufficientHands(PokerError):
    """勝者判定に必要なハンド数（2つ以上）が足りない"""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"At least 2 hands are required to determine a winner, got {count}"
        )


class InvalidCardNotation(PokerError):
    """カード表記を解釈できない"""

    def __init__(self, token: str, reason: str = ""):
        self.token = token
        message = f"Invalid card: {token!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
