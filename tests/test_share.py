from models import Settlement
from share import email_url, share_text, sms_url
from split_state import SplitState


def make_state():
    state = SplitState()
    state.add_person("Alice", "a")
    state.add_person("Bob", "b")
    return state


def test_share_text_lists_settlements():
    state = make_state()
    state.add_expense("Dinner", 100, "a", ["a", "b"])

    text = share_text(state)

    assert text.splitlines() == [
        "💰 QuickSplit Results",
        "",
        "Total Expenses: $100.00",
        "Split between: Alice, Bob",
        "",
        "💸 Who owes who:",
        "• Bob owes Alice $50.00",
        "",
        "Calculated with QuickSplit 📱",
    ]


def test_share_text_when_even():
    state = make_state()
    state.add_expense("Dinner", 10, "a", ["a"])

    text = share_text(state, app_name="SplitIt")

    assert "Everyone is even!" in text
    assert "Who owes who" not in text
    assert text.endswith("Calculated with SplitIt 📱")


def test_share_text_uses_given_settlements():
    state = make_state()

    text = share_text(state, [Settlement("a", "b", 12.5)])

    assert "• Alice owes Bob $12.50" in text


def test_sms_url():
    assert sms_url("a b&c") == "sms:?body=a%20b%26c"
    assert sms_url("hi", platform="ios") == "sms:&body=hi"


def test_email_url():
    assert email_url("x y", subject="Hi there") == "mailto:?subject=Hi%20there&body=x%20y"
