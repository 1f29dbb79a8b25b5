# backend/split_state.py
import logging
import math
import uuid

import errors
from models import Expense, Participant
from settlement import compute_balances, compute_settlements

logger = logging.getLogger(__name__)


def _new_id():
    return uuid.uuid4().hex


def _person_id(value):
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise errors.UnknownParticipantReference(f"Not a valid person id: {value!r}")
    return str(value)


class SplitState:
    """People and expenses for one split, owned by whoever is editing it.

    All user input goes through ``add_person`` / ``add_expense`` so the
    engine only ever sees validated values. Balances and settlements are
    recomputed from scratch on every call.
    """

    def __init__(self, people=None, expenses=None):
        self.people = list(people or [])
        self.expenses = list(expenses or [])

    # --- People ---

    def add_person(self, name, person_id=None):
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise errors.InvalidParticipantName()

        person_id = _new_id() if person_id is None or person_id == "" else _person_id(person_id)
        if self.has_person(person_id):
            raise errors.DuplicateParticipant()

        person = Participant(person_id, name)
        self.people.append(person)
        logger.debug("Added person %s (%s)", name, person_id)
        return person

    def remove_person(self, person_id):
        # Expenses that mention this person are kept as they are
        self.people = [p for p in self.people if p.id != person_id]

    def has_person(self, person_id):
        return any(p.id == person_id for p in self.people)

    def person_name(self, person_id):
        for person in self.people:
            if person.id == person_id:
                return person.name
        return ""

    # --- Expenses ---

    def add_expense(self, name, amount, paid_by, shared_by, expense_id=None):
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise errors.MissingExpenseName()

        try:
            amount = float(amount)
        except (TypeError, ValueError):
            raise errors.InvalidExpenseAmount()
        if math.isnan(amount) or math.isinf(amount) or amount <= 0:
            raise errors.InvalidExpenseAmount()

        if paid_by is None or paid_by == "":
            raise errors.MissingPayer()

        # Ids are stored as strings, so 1 and "1" are the same person
        ids = [_person_id(pid) for pid in [paid_by] + list(shared_by or [])]
        paid_by = ids[0]

        # Same person ticked twice still only gets one share
        beneficiaries = tuple(dict.fromkeys(ids[1:]))
        if not beneficiaries:
            raise errors.EmptyBeneficiarySet()

        unknown = [pid for pid in (paid_by,) + beneficiaries if not self.has_person(pid)]
        if unknown:
            raise errors.UnknownParticipantReference(
                f"Expense refers to unknown people: {', '.join(unknown)}"
            )

        expense = Expense(
            str(expense_id) if expense_id else _new_id(),
            name,
            amount,
            paid_by,
            beneficiaries,
        )
        self.expenses.append(expense)
        logger.debug("Added expense %s: %.2f paid by %s", name, amount, paid_by)
        return expense

    def remove_expense(self, expense_id):
        self.expenses = [e for e in self.expenses if e.id != expense_id]

    def reset(self):
        self.people = []
        self.expenses = []

    # --- Results ---

    @property
    def can_add_expenses(self):
        return len(self.people) >= 2

    @property
    def can_show_results(self):
        return len(self.expenses) > 0

    @property
    def total_expenses(self):
        return sum(e.amount for e in self.expenses)

    def balances(self):
        return compute_balances(self.people, self.expenses)

    def settlements(self):
        return compute_settlements(self.balances())
