"""Decode a saved postback body and print a short summary.

Handy when replaying captured webhook deliveries by hand.
"""

import argparse
import json
from pathlib import Path

from pydantic import ValidationError

from catpay.gateway.webhooks import parse_webhook


def main() -> None:
    """Parse CLI args and summarize one webhook payload."""

    parser = argparse.ArgumentParser(description="Decode a Black Cat webhook payload.")
    parser.add_argument("--file", required=True, help="Path to JSON payload")
    args = parser.parse_args()

    try:
        payload = parse_webhook(Path(args.file).read_bytes())
    except ValidationError as exc:
        print(exc)
        raise SystemExit(2)

    summary = {
        "event": payload.event,
        "kind": "transaction" if payload.is_transaction_event else "withdrawal",
        "id": payload.transaction_id or payload.withdrawal_id,
        "status": payload.normalized_status,
        "amount": payload.amount,
        "timestamp": payload.timestamp,
    }
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
