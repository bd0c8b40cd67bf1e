"""Create one PIX sale from a raw JSON request body.

Useful for manual checks against the sandbox credentials in `.env`.
"""

import argparse
import asyncio
import json
from pathlib import Path

from catpay.common.config import settings
from catpay.common.logging import configure_logging
from catpay.common.startup import log_startup_config
from catpay.common.tracing import setup_tracing
from catpay.gateway.client import BlackCatClient
from catpay.gateway.schemas import SaleRequest


def main() -> None:
    """Parse CLI args, validate the sale request and send it."""

    parser = argparse.ArgumentParser(description="Create a PIX sale on Black Cat.")
    parser.add_argument("--json", dest="json_inline", default=None, help="Inline JSON sale request")
    parser.add_argument("--file", dest="json_file", default=None, help="Path to JSON sale request")
    args = parser.parse_args()

    if bool(args.json_inline) == bool(args.json_file):
        raise SystemExit("Provide exactly one of --json or --file")

    if args.json_inline:
        raw = args.json_inline
    else:
        raw = Path(args.json_file).read_text()

    configure_logging()
    setup_tracing(settings.service_name, settings.otel_exporter_otlp_endpoint)
    log_startup_config(settings.service_name, config=settings)

    request = SaleRequest.model_validate_json(raw)
    result = asyncio.run(BlackCatClient.from_settings().create_sale(request))
    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    if not result.success:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
