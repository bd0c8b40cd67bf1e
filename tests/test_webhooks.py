"""Decoding of Black Cat postback payloads."""

import json

import pytest
from pydantic import ValidationError

from catpay.gateway.webhooks import parse_webhook

PAID = {
    "event": "transaction.paid",
    "timestamp": "2026-10-19T12:03:00Z",
    "transactionId": "tx_123",
    "externalReference": "order-42",
    "status": "PAID",
    "amount": 2590,
    "netAmount": 2490,
    "fees": 100,
    "paymentMethod": "pix",
    "paidAt": "2026-10-19T12:03:00Z",
    "endToEndId": "E1234567820261019120300000000001",
    "customer": {"name": "Maria Souza", "email": "maria@example.com"},
}


def test_parse_transaction_paid_from_bytes():
    payload = parse_webhook(json.dumps(PAID).encode("utf-8"))

    assert payload.event == "transaction.paid"
    assert payload.transaction_id == "tx_123"
    assert payload.external_reference == "order-42"
    assert payload.customer.email == "maria@example.com"
    assert payload.normalized_status == "paid"
    assert payload.is_transaction_event
    assert not payload.is_withdrawal_event


def test_parse_withdrawal_failed_from_dict():
    payload = parse_webhook(
        {
            "event": "withdrawal.failed",
            "timestamp": "2026-10-19T13:00:00Z",
            "withdrawalId": "wd_1",
            "status": "FAILED",
            "amount": 10000,
            "reason": "invalid pix key",
        }
    )
    assert payload.is_withdrawal_event
    assert payload.withdrawal_id == "wd_1"
    assert payload.transaction_id is None
    assert payload.reason == "invalid pix key"


def test_unknown_event_rejected():
    with pytest.raises(ValidationError):
        parse_webhook({**PAID, "event": "transaction.refunded"})


def test_missing_required_fields_rejected():
    body = dict(PAID)
    del body["amount"]
    with pytest.raises(ValidationError):
        parse_webhook(json.dumps(body))


def test_malformed_json_rejected():
    with pytest.raises(ValidationError):
        parse_webhook(b"{not json")
