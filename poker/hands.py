import logging
from enum import IntEnum
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable
from typing import List
from typing import NamedTuple
from typing import Tuple

from poker.cards import Card
from poker.cards import PokerError
from poker.cards import Rank

logger = logging.getLogger(__name__)

HAND_SIZE = 5


class Category(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9


class InvalidHand(PokerError):
    pass


class WrongCardCount(InvalidHand):
    pass


class UnorderedConstructionError(InvalidHand):
    pass


class DuplicateCard(UnorderedConstructionError):
    pass


class Group(NamedTuple):
    count: int
    rank: Rank


class KindGroups(tuple):
    """Same-rank groups of a hand, largest group first, then highest rank.

    Two KindGroups are only comparable when their group sizes line up; a
    pair and a set have no meaningful order between them.
    """

    def _ranks_against(self, other):
        if [g.count for g in self] != [g.count for g in other]:
            raise TypeError("KindGroups have different shapes", self, other)

        return [g.rank for g in self], [g.rank for g in other]

    def __lt__(self, other):
        if not isinstance(other, KindGroups):
            return NotImplemented
        mine, theirs = self._ranks_against(other)
        return mine < theirs

    def __le__(self, other):
        if not isinstance(other, KindGroups):
            return NotImplemented
        mine, theirs = self._ranks_against(other)
        return mine <= theirs

    def __gt__(self, other):
        if not isinstance(other, KindGroups):
            return NotImplemented
        mine, theirs = self._ranks_against(other)
        return mine > theirs

    def __ge__(self, other):
        if not isinstance(other, KindGroups):
            return NotImplemented
        mine, theirs = self._ranks_against(other)
        return mine >= theirs

    def __repr__(self):
        return f"KindGroups({list(self)!r})"


_GROUP_CATEGORIES = {
    (2,): Category.ONE_PAIR,
    (3,): Category.THREE_OF_A_KIND,
    (4,): Category.FOUR_OF_A_KIND,
    (2, 2): Category.TWO_PAIRS,
    (3, 2): Category.FULL_HOUSE,
}


def _categorize(groups: KindGroups, flush: bool, straight: bool) -> Category:
    if not groups:
        if flush and straight:
            return Category.STRAIGHT_FLUSH
        if flush:
            return Category.FLUSH
        if straight:
            return Category.STRAIGHT
        return Category.HIGH_CARD

    shape = tuple(g.count for g in groups)
    try:
        return _GROUP_CATEGORIES[shape]
    except KeyError:
        # Five cards can't produce any other shape unless grouping is broken
        raise RuntimeError("Unreachable kind groups", groups) from None


def _is_run(ranks):
    return all(high - low == 1 for high, low in zip(ranks, ranks[1:]))


@dataclass(frozen=True)
class Classification:
    category: Category
    groups: KindGroups
    remainder: Tuple[Rank, ...]
    low_ace: bool = False

    @property
    def sort_key(self):
        # The wheel shows an ace on top but plays five-high, so it sorts
        # below any other straight before the remainder is looked at.
        return (self.category, self.groups, not self.low_ace, self.remainder)


@dataclass(frozen=True)
class Hand:
    """Five distinct cards, stored in ascending card order."""

    cards: Tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        object.__setattr__(self, "cards", cards)

        if len(cards) != HAND_SIZE:
            raise WrongCardCount("Hand has wrong number of cards", cards)

        if not all(lower < higher for lower, higher in zip(cards, cards[1:])):
            raise UnorderedConstructionError("Cards are not in order", cards)

    @classmethod
    def new(cls, c1: Card, c2: Card, c3: Card, c4: Card, c5: Card) -> "Hand":
        return cls((c1, c2, c3, c4, c5))

    @classmethod
    def parse(cls, text: str) -> "Hand":
        cards = sorted(Card.parse(token) for token in text.split())
        if len(cards) != HAND_SIZE:
            raise WrongCardCount("Hand has wrong number of cards", text)

        for lower, higher in zip(cards, cards[1:]):
            if lower == higher:
                raise DuplicateCard("Card appears twice in hand", str(lower))

        return cls(tuple(cards))

    def __str__(self):
        return " ".join(map(str, self.cards))

    def display(self):
        return " ".join(card.display() for card in self.cards)

    def is_flush(self) -> bool:
        return len(set(card.suit for card in self.cards)) == 1

    def kind_groups(self) -> Tuple[KindGroups, Tuple[Rank, ...]]:
        groups: List[Group] = []
        remainder: List[Rank] = []

        # Cards are sorted, so equal ranks are always adjacent
        for rank, run in groupby(card.rank for card in self.cards):
            count = len(list(run))
            if count > 1:
                groups.append(Group(count, rank))
            else:
                remainder.append(rank)

        groups.sort(reverse=True)
        remainder.sort(reverse=True)
        return KindGroups(groups), tuple(remainder)

    def straight(self) -> Tuple[bool, bool]:
        """Return (is_straight, is_low_ace).

        The ace only plays low in A-2-3-4-5. It never bridges king and two.
        """
        ranks = sorted(set(card.rank for card in self.cards), reverse=True)
        if len(ranks) != HAND_SIZE:
            return False, False

        if _is_run(ranks):
            return True, False

        if ranks[0] == Rank.ACE and ranks[1] == Rank.FIVE and _is_run(ranks[1:]):
            return True, True

        return False, False

    def classify(self) -> Classification:
        groups, remainder = self.kind_groups()
        is_straight, low_ace = self.straight()
        category = _categorize(groups, self.is_flush(), is_straight)
        return Classification(category, groups, remainder, low_ace)

    @property
    def sort_key(self):
        return self.classify().sort_key


def compare(a: Hand, b: Hand) -> int:
    """Return -1, 0 or 1 as hand a is worth less than, the same as, or more than b."""
    a_key = a.sort_key
    b_key = b.sort_key
    return (a_key > b_key) - (a_key < b_key)


def _get_winners(hands: Iterable[str]):
    evaluated = [(text, Hand.parse(text).sort_key) for text in hands]
    if not evaluated:
        return

    argmax = max(key for (_, key) in evaluated)
    for text, key in evaluated:
        if key == argmax:
            yield text


def winning_hands(hands: Iterable[str]) -> List[str]:
    """Return every hand tied for best, as the same objects that were passed in.

    Raises the parse error of the first malformed hand; one bad hand aborts
    the whole showdown.
    """
    winners = list(_get_winners(hands))
    logger.info("Winners:  %s", winners)
    return winners
