"""Domain errors raised by repositories and services."""


class LedgerError(Exception):
    """Base error for the governance and points core."""

    default_message = "Ledger error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(LedgerError):
    """Caller omitted or malformed a required input."""

    default_message = "Invalid request"


class InvalidWeight(LedgerError):
    """A vote weight could not be coerced to a non-negative number."""

    default_message = "Invalid vote weight"

    def __init__(self, value: object, proposal_id: str | None = None):
        self.value = value
        self.proposal_id = proposal_id
        where = f" on proposal {proposal_id}" if proposal_id is not None else ""
        super().__init__(f"Invalid vote weight{where}: {value!r}")


class StoreError(LedgerError):
    """The persistent store was unreachable or the query failed."""

    default_message = "Store query failed"
