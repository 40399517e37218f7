"""
Tests for five_card_poker.game_models module
"""

import dataclasses

import pytest
from five_card_poker.exceptions import InvalidHandSize, PokerError
from five_card_poker.game_models import Card, Hand, Rank, Suit


def make_hand(*specs):
    return Hand([Card(rank, suit) for rank, suit in specs])


class TestSuit:
    """Suitクラスのテスト"""

    def test_suit_values(self):
        """スートの値が正しいことを確認"""
        assert Suit.HEARTS.value == "hearts"
        assert Suit.DIAMONDS.value == "diamonds"
        assert Suit.CLUBS.value == "clubs"
        assert Suit.SPADES.value == "spades"

    def test_four_suits(self):
        assert len(list(Suit)) == 4


class TestRank:
    """Rankクラスのテスト"""

    def test_rank_values(self):
        """ランクの数値が2-14であることを確認"""
        assert [r.value for r in Rank] == list(range(2, 15))
        assert Rank.JACK == 11
        assert Rank.QUEEN == 12
        assert Rank.KING == 13
        assert Rank.ACE == 14

    def test_rank_ordering(self):
        assert Rank.TWO < Rank.THREE < Rank.TEN < Rank.KING < Rank.ACE

    def test_display_name(self):
        assert Rank.TEN.display_name == "10"
        assert Rank.ACE.display_name == "A"


class TestCard:
    """Cardクラスのテスト"""

    def test_card_creation_valid(self):
        """正常なカード作成"""
        card = Card(14, Suit.SPADES)
        assert card.rank == 14
        assert card.rank is Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_creation_with_rank_enum(self):
        card = Card(Rank.QUEEN, Suit.HEARTS)
        assert card.rank == 12

    def test_card_creation_invalid_rank_low(self):
        """不正なランク（低すぎる）でのエラー"""
        with pytest.raises(ValueError, match="Rank must be between 2 and 14"):
            Card(1, Suit.HEARTS)

    def test_card_creation_invalid_rank_high(self):
        """不正なランク（高すぎる）でのエラー"""
        with pytest.raises(ValueError, match="Rank must be between 2 and 14"):
            Card(15, Suit.HEARTS)

    def test_card_creation_invalid_rank_type(self):
        with pytest.raises(ValueError):
            Card("A", Suit.HEARTS)

    def test_card_creation_invalid_suit(self):
        with pytest.raises(ValueError):
            Card(14, "spades")

    def test_rank_name_property(self):
        """rank_nameプロパティのテスト"""
        assert Card(2, Suit.HEARTS).rank_name == "2"
        assert Card(10, Suit.HEARTS).rank_name == "10"
        assert Card(11, Suit.HEARTS).rank_name == "J"
        assert Card(12, Suit.HEARTS).rank_name == "Q"
        assert Card(13, Suit.HEARTS).rank_name == "K"
        assert Card(14, Suit.HEARTS).rank_name == "A"

    def test_suit_symbol_property(self):
        """suit_symbolプロパティのテスト"""
        assert Card(14, Suit.HEARTS).suit_symbol == "♥"
        assert Card(14, Suit.DIAMONDS).suit_symbol == "♦"
        assert Card(14, Suit.CLUBS).suit_symbol == "♣"
        assert Card(14, Suit.SPADES).suit_symbol == "♠"

    def test_str_representation(self):
        """文字列表現のテスト"""
        assert str(Card(14, Suit.SPADES)) == "A♠"
        assert str(Card(10, Suit.HEARTS)) == "10♥"

    def test_repr_representation(self):
        assert repr(Card(13, Suit.CLUBS)) == "Card(K, clubs)"

    def test_equality_and_hash(self):
        """等価性とハッシュのテスト"""
        assert Card(14, Suit.SPADES) == Card(Rank.ACE, Suit.SPADES)
        assert Card(14, Suit.SPADES) != Card(14, Suit.HEARTS)
        assert Card(14, Suit.SPADES) != Card(13, Suit.SPADES)
        assert len({Card(14, Suit.SPADES), Card(14, Suit.SPADES)}) == 1

    def test_immutable(self):
        """カードは変更できない"""
        card = Card(14, Suit.SPADES)
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.rank = 13


class TestHand:
    """Handクラスのテスト"""

    def test_hand_creation(self):
        hand = make_hand(
            (14, Suit.HEARTS),
            (13, Suit.HEARTS),
            (12, Suit.HEARTS),
            (11, Suit.HEARTS),
            (10, Suit.HEARTS),
        )
        assert len(hand) == 5
        assert hand.ranks == (14, 13, 12, 11, 10)
        assert hand.suits == (Suit.HEARTS,) * 5
        assert isinstance(hand.cards, tuple)

    def test_hand_accepts_generator(self):
        hand = Hand(Card(r, Suit.CLUBS) for r in range(2, 7))
        assert hand.ranks == (2, 3, 4, 5, 6)

    @pytest.mark.parametrize("count", [0, 1, 4, 6, 7])
    def test_invalid_hand_size(self, count):
        """5枚以外はInvalidHandSize"""
        cards = [Card(2 + i % 13, Suit.SPADES) for i in range(count)]
        with pytest.raises(InvalidHandSize) as exc_info:
            Hand(cards)
        assert exc_info.value.count == count
        assert isinstance(exc_info.value, PokerError)
        assert isinstance(exc_info.value, ValueError)

    def test_duplicate_cards_not_rejected(self):
        """重複カードは検証しない（呼び出し側の責任）"""
        hand = Hand([Card(14, Suit.SPADES)] * 5)
        assert len(hand) == 5

    def test_immutable(self):
        hand = Hand(Card(r, Suit.CLUBS) for r in range(2, 7))
        with pytest.raises(dataclasses.FrozenInstanceError):
            hand.cards = ()

    def test_equality(self):
        hand1 = Hand(Card(r, Suit.CLUBS) for r in range(2, 7))
        hand2 = Hand(Card(r, Suit.CLUBS) for r in range(2, 7))
        assert hand1 == hand2
        assert hash(hand1) == hash(hand2)

    def test_equality_ignores_card_order(self):
        """カードの並び順が違っても同じハンド"""
        cards = [Card(r, Suit.SPADES) for r in (14, 13, 12, 11, 10)]
        hand1 = Hand(cards)
        hand2 = Hand(reversed(cards))

        assert hand1 == hand2
        assert hash(hand1) == hash(hand2)
        assert len({hand1, hand2}) == 1

    def test_inequality_different_cards(self):
        hand1 = Hand(Card(r, Suit.CLUBS) for r in range(2, 7))
        hand2 = Hand(Card(r, Suit.HEARTS) for r in range(2, 7))
        assert hand1 != hand2
        assert hand1 != "not a hand"

    def test_equality_respects_duplicates(self):
        """重複カードの枚数も比較対象"""
        ace, king = Card(14, Suit.SPADES), Card(13, Suit.SPADES)
        hand1 = Hand([ace, ace, ace, ace, king])
        hand2 = Hand([ace, king, king, king, king])
        assert hand1 != hand2

    def test_str_representation(self):
        hand = make_hand(
            (14, Suit.SPADES),
            (13, Suit.HEARTS),
            (12, Suit.DIAMONDS),
            (11, Suit.CLUBS),
            (10, Suit.SPADES),
        )
        assert str(hand) == "A♠, K♥, Q♦, J♣, 10♠"

    def test_iteration(self):
        cards = [Card(r, Suit.CLUBS) for r in range(2, 7)]
        assert list(Hand(cards)) == cards
