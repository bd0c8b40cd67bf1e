"""Fetch and print the status of one Black Cat transaction."""

import argparse
import asyncio
import json

from catpay.common.config import settings
from catpay.common.logging import configure_logging
from catpay.common.startup import log_startup_config
from catpay.common.tracing import setup_tracing
from catpay.gateway.client import BlackCatClient


def main() -> None:
    """CLI entrypoint for status polling."""

    parser = argparse.ArgumentParser(description="Query a Black Cat transaction status.")
    parser.add_argument("--transaction-id", required=True)
    args = parser.parse_args()

    configure_logging()
    setup_tracing(settings.service_name, settings.otel_exporter_otlp_endpoint)
    log_startup_config(settings.service_name, config=settings)

    result = asyncio.run(BlackCatClient.from_settings().get_transaction_status(args.transaction_id))
    output = result.model_dump(mode="json", by_alias=True)
    if result.success and result.data is not None:
        output["normalizedStatus"] = result.data.normalized_status
    print(json.dumps(output, indent=2))
    if not result.success:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
