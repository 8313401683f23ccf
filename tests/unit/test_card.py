"""
扑克牌模型的单元测试.

测试Card的构造、解析、排序和字符串表示.
"""

import dataclasses

import pytest

from holdem_equity.core.deck import Card, Rank, Suit, parse_card
from holdem_equity.core.exceptions import HoldemEquityError, InvalidCardError


class TestCard:
    """Card类的单元测试."""

    def test_card_creation(self):
        """测试Card对象的创建."""
        card = Card(Rank.ACE, Suit.SPADES)

        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES
        assert card.rank.value == 14

    def test_card_immutability(self):
        """测试Card对象的不可变性."""
        card = Card(Rank.KING, Suit.SPADES)

        with pytest.raises(dataclasses.FrozenInstanceError):
            card.rank = Rank.ACE

    def test_card_validation(self):
        """测试无效的点数或花色类型."""
        with pytest.raises(InvalidCardError):
            Card(14, Suit.HEARTS)
        with pytest.raises(InvalidCardError):
            Card(Rank.ACE, "h")

    def test_card_string_representation(self):
        """测试Card的规范文本编码."""
        test_cases = [
            (Card(Rank.ACE, Suit.HEARTS), "ah"),
            (Card(Rank.KING, Suit.SPADES), "ks"),
            (Card(Rank.TEN, Suit.DIAMONDS), "td"),
            (Card(Rank.TWO, Suit.CLUBS), "2c"),
        ]

        for card, expected in test_cases:
            assert str(card) == expected

    def test_card_repr(self):
        assert repr(Card(Rank.QUEEN, Suit.DIAMONDS)) == "Card(QUEEN, DIAMONDS)"

    @pytest.mark.parametrize("code, rank, suit", [
        ("As", Rank.ACE, Suit.SPADES),
        ("as", Rank.ACE, Suit.SPADES),
        ("AS", Rank.ACE, Suit.SPADES),
        ("Td", Rank.TEN, Suit.DIAMONDS),
        ("tD", Rank.TEN, Suit.DIAMONDS),
        ("2c", Rank.TWO, Suit.CLUBS),
        ("9H", Rank.NINE, Suit.HEARTS),
    ])
    def test_card_from_string(self, code, rank, suit):
        """测试从字符串创建Card对象（大小写不敏感）."""
        card = Card.from_str(code)

        assert card == Card(rank, suit)
        assert str(card) == code.lower()

    @pytest.mark.parametrize("code", ["", "A", "XH", "AX", "10h", "Ahh", " As", "1s", "Ab"])
    def test_card_from_string_invalid(self, code):
        """测试无效字符串创建Card对象."""
        with pytest.raises(InvalidCardError):
            parse_card(code)

    def test_invalid_card_error_hierarchy(self):
        """无效牌异常同时是ValueError和包基础异常."""
        with pytest.raises(ValueError):
            parse_card("Zz")
        with pytest.raises(HoldemEquityError):
            parse_card("Zz")

    def test_card_from_non_string(self):
        with pytest.raises(TypeError):
            Card.from_str(14)

    def test_card_comparison(self):
        """测试先按点数、再按花色比较."""
        ace_hearts = parse_card("Ah")
        king_spades = parse_card("Ks")
        ace_clubs = parse_card("Ac")

        assert ace_hearts > king_spades
        assert king_spades < ace_hearts
        assert ace_clubs < ace_hearts
        assert ace_hearts != ace_clubs
        assert ace_hearts == parse_card("aH")

    def test_card_sorting(self):
        cards = [parse_card(code) for code in ["As", "2d", "Ad", "Tc", "2c"]]

        assert [str(card) for card in sorted(cards)] == ["2c", "2d", "tc", "ad", "as"]

    def test_card_hash(self):
        """测试Card对象的哈希值."""
        assert hash(parse_card("Ah")) == hash(Card(Rank.ACE, Suit.HEARTS))
        assert len({parse_card("Ah"), parse_card("ah"), parse_card("As")}) == 2

    def test_readable_value_and_symbol(self):
        card = parse_card("Th")

        assert card.readable_value == "10"
        assert card.suit_symbol == "♥"
        assert parse_card("Qc").readable_value == "Q"
        assert parse_card("7d").suit_symbol == "♦"
