from enum import IntEnum
from dataclasses import dataclass


class PokerError(ValueError):
    pass


class InvalidCard(PokerError):
    pass


class InvalidSuit(InvalidCard):
    pass


class InvalidRank(InvalidCard):
    pass


class Suit(IntEnum):
    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    @classmethod
    def parse(cls, token):
        try:
            return _SUIT_CODES[token]
        except (KeyError, TypeError):
            raise InvalidSuit("Not a suit", token) from None

    @property
    def code(self):
        return _SUIT_NAMES[self]

    @property
    def symbol(self):
        return SUIT_CODEPOINTS[self.code]


class Rank(IntEnum):
    # Values are used for adjacency arithmetic in straight detection
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

    @classmethod
    def parse(cls, token):
        try:
            return _RANK_CODES[token]
        except (KeyError, TypeError):
            raise InvalidRank("Not a rank", token) from None

    @property
    def code(self):
        return _RANK_NAMES[self]


_SUIT_CODES = dict(H=Suit.HEARTS, D=Suit.DIAMONDS, C=Suit.CLUBS, S=Suit.SPADES)
_SUIT_NAMES = {suit: code for code, suit in _SUIT_CODES.items()}

SUIT_CODEPOINTS = dict(S="♠", H="♡", D="♢", C="♣")

_RANK_CODES = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}
_RANK_NAMES = {rank: code for code, rank in _RANK_CODES.items()}


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card.

    Cards order by rank first and suit second. The suit order only exists so
    that a hand has one canonical sorted form; it never affects hand value.
    """

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, token: str) -> "Card":
        if not isinstance(token, str) or len(token) not in (2, 3):
            raise InvalidCard("Card token has wrong length", token)

        suit = Suit.parse(token[-1])
        if len(token) == 2:
            return cls(Rank.parse(token[0]), suit)

        # The only three character card is the ten
        if token[:2] != "10":
            raise InvalidCard("Not a card", token)

        return cls(Rank.TEN, suit)

    def display(self):
        return self.rank.code + self.suit.symbol

    def __str__(self):
        return self.rank.code + self.suit.code


def get_card_char(s):
    return SUIT_CODEPOINTS.get(s, s)


def convert_card_string(s):
    """Replace suit letters in a card string with their symbols."""
    return "".join(map(get_card_char, s))
