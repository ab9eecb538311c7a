"""
Ledger Errors — failure taxonomy for graph construction and statistics.

Every error is raised synchronously and aborts the whole analysis; no partial
statistics are ever produced.
"""


class LedgerError(Exception):
    """Base class for all ledger analysis failures."""


class InvalidArgument(LedgerError, ValueError):
    """A vertex count or vertex identifier is outside its allowed range."""


class MalformedInput(LedgerError, ValueError):
    """The transaction list does not describe a valid two-parent DAG."""


class DivisionUndefined(LedgerError, ArithmeticError):
    """A statistic would divide by zero."""


class EmptyInput(DivisionUndefined):
    """The ledger contains no transactions."""
