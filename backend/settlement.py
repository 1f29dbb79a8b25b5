# backend/settlement.py
import logging

from models import EPSILON, Settlement

logger = logging.getLogger(__name__)


def compute_balances(participants, expenses):
    """Net position per participant id: total paid minus total owed.

    Every participant is seeded at 0 in input order. Ids that only show up
    inside an expense are appended as extra keys instead of raising. No
    rounding is applied; summation order can change the last digits.
    """
    balances = {}
    for person in participants:
        balances[person.id] = 0.0

    for expense in expenses:
        # Nothing to divide by. The payer is not credited either, so balances still sum to zero
        if len(expense.shared_by) == 0:
            logger.warning("Skipping expense %r (%s): nobody shares it", expense.name, expense.id)
            continue

        if expense.paid_by not in balances: balances[expense.paid_by] = 0.0
        balances[expense.paid_by] += expense.amount

        split_amount = expense.share
        for person_id in expense.shared_by:
            if person_id not in balances: balances[person_id] = 0.0
            balances[person_id] -= split_amount

    logger.debug("Computed balances for %d participants from %d expenses", len(balances), len(expenses))
    return balances


def compute_settlements(balances):
    """Greedy list of transfers that brings every balance within EPSILON of 0.

    Creditors and debtors keep the order of ``balances``; each creditor is
    paid by the debtors in turn until it is drained. The input mapping is
    left untouched.
    """
    # 1. Separate Creditors and Debtors
    creditors = []
    debtors = []

    for person, amount in balances.items():
        if amount > EPSILON: creditors.append({'person': person, 'amount': amount})
        if amount < -EPSILON: debtors.append({'person': person, 'amount': amount})

    # 2. Match them up
    settlements = []
    i = 0
    j = 0

    while i < len(creditors) and j < len(debtors):
        creditor = creditors[i]
        debtor = debtors[j]

        amount = min(creditor['amount'], abs(debtor['amount']))
        settlements.append(Settlement(debtor['person'], creditor['person'], amount))

        creditor['amount'] -= amount
        debtor['amount'] += amount

        if abs(debtor['amount']) <= EPSILON: j += 1
        if creditor['amount'] <= EPSILON: i += 1

    # 3. Drop float noise
    return [s for s in settlements if s.amount > EPSILON]


def settle(participants, expenses):
    balances = compute_balances(participants, expenses)
    return balances, compute_settlements(balances)
