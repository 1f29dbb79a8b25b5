# backend/share.py
from urllib.parse import quote

DEFAULT_SUBJECT = "QuickSplit - Expense Split Results"


def share_text(state, settlements=None, app_name="QuickSplit"):
    """Plain-text "who owes who" summary for pasting into a message."""
    if settlements is None:
        settlements = state.settlements()

    lines = [
        f"💰 {app_name} Results",
        "",
        f"Total Expenses: ${state.total_expenses:.2f}",
        f"Split between: {', '.join(p.name for p in state.people)}",
        "",
    ]

    if len(settlements) == 0:
        lines.append("🎉 Everyone is even! No money needs to change hands.")
    else:
        lines.append("💸 Who owes who:")
        for s in settlements:
            lines.append(f"• {state.person_name(s.from_id)} owes {state.person_name(s.to_id)} ${s.amount:.2f}")

    lines.append("")
    lines.append(f"Calculated with {app_name} 📱")
    return "\n".join(lines)


def sms_url(text, platform=None):
    # iOS wants "&body", everything else "?body"
    separator = "&" if platform == "ios" else "?"
    return f"sms:{separator}body={quote(text, safe='')}"


def email_url(text, subject=DEFAULT_SUBJECT):
    return f"mailto:?subject={quote(subject, safe='')}&body={quote(text, safe='')}"
