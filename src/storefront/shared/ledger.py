"""Base class for repositories-with-rules that only write inside a unit of work."""

from protean.exceptions import IncorrectUsageError


class Ledger:
    def __init__(self, repository):
        self.repository = repository

    @staticmethod
    def _ensure_in_progress(uow) -> None:
        if uow is None or not uow.in_progress:
            raise IncorrectUsageError(f"{type(uow).__name__} is not in progress; ledger writes need an open unit of work")
