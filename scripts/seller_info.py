"""Print the seller account attached to the configured credentials."""

import asyncio
import json

from catpay.common.config import settings
from catpay.common.logging import configure_logging
from catpay.common.startup import log_startup_config
from catpay.gateway.client import BlackCatClient


def main() -> None:
    configure_logging()
    log_startup_config(settings.service_name, config=settings)

    result = asyncio.run(BlackCatClient.from_settings().get_seller())
    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    if not result.success:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
