"""Postback payloads sent by Black Cat on transaction/withdrawal changes.

Receiving the HTTP request and verifying its origin is the caller's job; this
module only decodes the body.
"""

from typing import Literal

from catpay.common.status import StatusTag, map_status
from catpay.gateway.schemas import RemoteModel

WebhookEvent = Literal[
    "transaction.created",
    "transaction.paid",
    "transaction.failed",
    "withdrawal.created",
    "withdrawal.completed",
    "withdrawal.failed",
]


class WebhookCustomer(RemoteModel):
    name: str
    email: str


class WebhookPayload(RemoteModel):
    """Canonical postback shape; `event` discriminates the record."""

    event: WebhookEvent
    timestamp: str
    status: str
    amount: int
    transaction_id: str | None = None
    withdrawal_id: str | None = None
    external_reference: str | None = None
    net_amount: int | None = None
    fees: int | None = None
    payment_method: str | None = None
    acquirer: str | None = None
    acquirer_transaction_id: str | None = None
    paid_at: str | None = None
    end_to_end_id: str | None = None
    reason: str | None = None
    customer: WebhookCustomer | None = None
    metadata: str | None = None

    @property
    def is_transaction_event(self) -> bool:
        return self.event.startswith("transaction.")

    @property
    def is_withdrawal_event(self) -> bool:
        return self.event.startswith("withdrawal.")

    @property
    def normalized_status(self) -> StatusTag:
        return map_status(self.status)


def parse_webhook(body: bytes | str | dict) -> WebhookPayload:
    """Decode a raw postback body; raises `pydantic.ValidationError` when malformed."""

    if isinstance(body, dict):
        return WebhookPayload.model_validate(body)
    return WebhookPayload.model_validate_json(body)
