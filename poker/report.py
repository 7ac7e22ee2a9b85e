import logging
from typing import Iterable
from typing import List
from typing import Optional

from pydantic import BaseModel

from poker.cards import PokerError
from poker.cards import convert_card_string
from poker.hands import Hand

logger = logging.getLogger(__name__)


class HandReport(BaseModel):
    # The entry exactly as the caller passed it in
    hand: str
    # Category and display are None if the hand couldn't be parsed
    category: Optional[str] = None
    display: Optional[str] = None
    error: Optional[str] = None
    winner: bool = False

    def show(self):
        return self.__class__(
            hand=convert_card_string(self.hand),
            category=self.category,
            display=self.display,
            error=self.error,
            winner=self.winner,
        )


def _describe(error):
    return ": ".join(str(arg) for arg in error.args)


def _evaluate(text):
    try:
        hand = Hand.parse(text)
    except PokerError as e:
        logger.warning("Rejected hand %r: %s", text, _describe(e))
        return HandReport(hand=text, error=_describe(e)), None

    classification = hand.classify()
    report = HandReport(
        hand=text,
        category=classification.category.name,
        display=hand.display(),
    )
    return report, classification.sort_key


def evaluate_hands(hands: Iterable[str]) -> List[HandReport]:
    """Report on every entry of a showdown, marking the winners.

    Unlike winning_hands, a malformed entry is reported and skipped instead of
    aborting the showdown.
    """
    evaluated = [_evaluate(text) for text in hands]

    keys = [key for (_, key) in evaluated if key is not None]
    if keys:
        argmax = max(keys)
        for report, key in evaluated:
            if key == argmax:
                report.winner = True

    return [report for (report, _) in evaluated]
