"""Balance ledger: reads and debits a user's balance inside a unit of work."""

from storefront.errors import InsufficientBalance
from storefront.shared.ledger import Ledger


class BalanceLedger(Ledger):
    def has_sufficient_funds(self, user, amount) -> bool:
        return amount <= user.balance

    def debit(self, user, amount, uow):
        """Write ``user.balance - amount`` through the given unit of work.

        The new balance is only visible to readers inside ``uow`` until it
        commits. A debit that would leave a negative balance is refused.
        """
        self._ensure_in_progress(uow)
        if not self.has_sufficient_funds(user, amount):
            raise InsufficientBalance(balance=user.balance, amount=amount)

        user.balance = user.balance - amount
        self.repository.add(user)
        return user
