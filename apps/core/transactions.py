"""Transaction facility shared by services that write several rows at once."""

from typing import Callable, TypeVar

from django.db import DEFAULT_DB_ALIAS, connections, transaction

from apps.core.errors import InvalidTransactionError

T = TypeVar('T')


class TransactionManager:
    """
    Run a unit of work inside ``transaction.atomic``.

    The work callable receives an opaque transaction token. Services only pass
    the token through to repository methods; repositories resolve it back to a
    database connection with ``resolve_transaction``.
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def start_transaction(self, work: Callable[[str], T]) -> T:
        """
        Execute ``work`` atomically.

        Commits when ``work`` returns, rolls back when it raises. The
        exception is re-raised unchanged.
        """
        with transaction.atomic(using=self.using):
            return work(self.using)


def resolve_transaction(tx) -> str:
    """
    Return the database alias behind a transaction token.

    Raises:
        InvalidTransactionError: If the token is not a known alias or the
            connection is not inside an atomic block
    """
    if not isinstance(tx, str) or tx not in connections.databases:
        raise InvalidTransactionError()
    if not transaction.get_connection(tx).in_atomic_block:
        raise InvalidTransactionError()
    return tx
