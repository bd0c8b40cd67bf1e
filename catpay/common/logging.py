"""JSON logging for gateway calls.

Every record emitted while a `BlackCatClient` operation is in flight carries
the operation name and the transaction (or external reference) it concerns,
so one sale can be followed across create/status log lines.
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from pythonjsonlogger.json import JsonFormatter

from catpay.common.config import settings


operation_ctx: ContextVar[str] = ContextVar("operation", default="")
transaction_id_ctx: ContextVar[str] = ContextVar("transaction_id", default="")


class ContextFilter(logging.Filter):
    """Stamp records with the service name and the gateway call in progress."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        record.operation = operation_ctx.get()
        record.transaction_id = transaction_id_ctx.get()
        return True


@contextmanager
def gateway_call_context(operation: str, transaction_id: str | None = None) -> Iterator[None]:
    """Bind operation/transaction fields for the duration of one gateway call.

    A nested call without a transaction id keeps the enclosing one.
    """

    op_token = operation_ctx.set(operation)
    tx_token = transaction_id_ctx.set(transaction_id) if transaction_id is not None else None
    try:
        yield
    finally:
        if tx_token is not None:
            transaction_id_ctx.reset(tx_token)
        operation_ctx.reset(op_token)


def configure_logging(level: str | None = None) -> None:
    """Install the JSON handler on the root logger.

    The client itself only logs through `logger`; scripts and host
    applications decide whether to call this.
    """

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(service_name)s %(operation)s %(transaction_id)s %(message)s"
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level or settings.log_level)


logger = logging.getLogger("catpay")
