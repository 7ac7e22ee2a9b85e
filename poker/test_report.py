from poker.report import HandReport
from poker.report import evaluate_hands


def test_evaluate_hands():
    reports = evaluate_hands(["4D 5S 6S 8D 3C", "3S 4S 5D 6H JH", "3H 4H 5C 6C JD"])

    assert [r.winner for r in reports] == [False, True, True]
    assert [r.category for r in reports] == ["HIGH_CARD"] * 3
    assert all(r.error is None for r in reports)
    assert reports[1].display == "3♠ 4♠ 5♢ 6♡ J♡"


def test_bad_entries_are_reported():
    hands = ["4S 5S 7H 8D 1C", "2H 3H 4H 5H", "2S 8H 2D 8D 3H", "2H 3H 4H 4H 6H"]
    reports = evaluate_hands(hands)

    assert [r.hand for r in reports] == hands
    assert [r.winner for r in reports] == [False, False, True, False]
    assert reports[0].error == "Not a rank: 1"
    assert reports[0].category is None
    assert reports[0].display is None
    assert reports[1].error == "Hand has wrong number of cards: 2H 3H 4H 5H"
    assert reports[2].category == "TWO_PAIRS"
    assert reports[3].error == "Card appears twice in hand: 4H"


def test_rejections_are_logged(caplog):
    evaluate_hands(["garbage", "4S 5S 7H 8D JC"])
    assert "Rejected hand 'garbage'" in caplog.text


def test_nothing_to_evaluate():
    assert evaluate_hands([]) == []

    reports = evaluate_hands(["nope", "2H 3H"])
    assert not any(r.winner for r in reports)


def test_wheel_loses_to_six_high():
    reports = evaluate_hands(["2H 3H 4H 5H 6H", "4D AD 3D 2D 5D"])
    assert [r.category for r in reports] == ["STRAIGHT_FLUSH", "STRAIGHT_FLUSH"]
    assert [r.winner for r in reports] == [True, False]


def test_show():
    report = HandReport(hand="4S 5S 7H 8D JC", category="HIGH_CARD", winner=True)
    shown = report.show()

    assert shown.hand == "4♠ 5♠ 7♡ 8♢ J♣"
    assert shown.category == "HIGH_CARD"
    assert shown.winner
    # show() returns a copy
    assert report.hand == "4S 5S 7H 8D JC"
