"""Async client for the Black Cat sales API.

Each operation performs exactly one HTTP call and always returns a tagged
result. Gateway rejections and transport failures both come back as
`success=False`; only task cancellation propagates.
"""

import json
import time
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from catpay.common.config import DEFAULT_API_URL, GatewayCredentials, GatewaySettings, settings
from catpay.common.logging import gateway_call_context, logger
from catpay.common.metrics import gateway_request_duration_seconds, gateway_requests_total
from catpay.common.tracing import get_tracer
from catpay.gateway.schemas import (
    GatewayResult,
    SaleRequest,
    SaleResponse,
    SellerResponse,
    StatusResponse,
)

CONNECTION_ERROR_MESSAGE = "connection error with API"

ResultT = TypeVar("ResultT", bound=GatewayResult)


def build_headers(credentials: GatewayCredentials) -> dict[str, str]:
    """Headers sent on every call. Missing keys are sent as empty strings."""

    api_key = credentials.api_key
    return {
        "Content-Type": "application/json",
        "x-api-key": api_key,
        "Authorization": f"Bearer {api_key}",
        "x-public-key": credentials.public_key or api_key,
        "x-secret-key": api_key,
    }


def _wire_headers(headers: dict[str, str]) -> dict[str, str]:
    # HTTP forbids leading/trailing whitespace in values ("Bearer " with no key).
    return {name: value.strip() for name, value in headers.items()}


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value)


def _rejection(result_type: type[ResultT], body: Any, default_message: str) -> ResultT:
    """Build the failure result for a non-2xx reply, passing remote fields through."""

    if not isinstance(body, dict):
        body = {}
    return result_type(
        success=False,
        message=_as_text(body.get("message")) or default_message,
        error=_as_text(body.get("error")),
    )


def _accepted(result_type: type[ResultT], body: Any, operation: str) -> ResultT:
    """Decode a 2xx body, keeping it as sent when it does not fit the model.

    A 2xx means the gateway did the work; reporting a local decode problem as
    a failure would invite the caller to repeat it.
    """

    try:
        return result_type.model_validate(body)
    except ValidationError as exc:
        if not isinstance(body, dict):
            raise
        logger.warning(
            "gateway response did not match schema operation=%s errors=%s",
            operation,
            exc.error_count(),
        )
        return result_type.model_construct(**body)


class BlackCatClient:
    """Thin wrapper over the create-sale, status and seller endpoints."""

    def __init__(
        self,
        credentials: GatewayCredentials,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls,
        config: GatewaySettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "BlackCatClient":
        config = config or settings
        return cls(
            config.credentials(),
            base_url=config.blackcat_api_url,
            timeout=config.blackcat_timeout_seconds,
            transport=transport,
        )

    async def create_sale(self, request: SaleRequest) -> SaleResponse:
        """Create a PIX sale; on success `data.payment_data` carries the QR code."""

        with gateway_call_context("create_sale", request.external_ref):
            return await self._call(
                "create_sale",
                "POST",
                "/sales/create-sale",
                SaleResponse,
                "error creating sale",
                payload=request.to_wire(),
            )

    async def get_transaction_status(self, transaction_id: str) -> StatusResponse:
        with gateway_call_context("get_transaction_status", transaction_id):
            return await self._call(
                "get_transaction_status",
                "GET",
                f"/sales/{quote(transaction_id, safe='')}/status",
                StatusResponse,
                "error querying status",
            )

    async def get_seller(self) -> SellerResponse:
        with gateway_call_context("get_seller"):
            return await self._call(
                "get_seller",
                "GET",
                "/sales/seller",
                SellerResponse,
                "error fetching seller",
            )

    async def _call(
        self,
        operation: str,
        method: str,
        path: str,
        result_type: type[ResultT],
        default_message: str,
        payload: dict | None = None,
    ) -> ResultT:
        """Run one request and fold every failure into a `success=False` result."""

        started = time.perf_counter()
        # Stays "cancelled" only if the task is cancelled mid-request.
        outcome = "cancelled"
        try:
            with get_tracer().start_as_current_span(f"blackcat.{operation}") as span:
                try:
                    async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                        resp = await client.request(
                            method,
                            f"{self.base_url}{path}",
                            headers=_wire_headers(build_headers(self.credentials)),
                            json=payload,
                        )
                    span.set_attribute("http.status_code", resp.status_code)
                    body = resp.json()
                    if resp.is_success:
                        result = _accepted(result_type, body, operation)
                        outcome = "ok"
                    else:
                        result = _rejection(result_type, body, default_message)
                        outcome = "rejected"
                        logger.warning(
                            "gateway rejected operation=%s status_code=%s message=%s error=%s",
                            operation,
                            resp.status_code,
                            result.message,
                            result.error,
                        )
                except Exception as exc:
                    outcome = "transport_error"
                    logger.exception("gateway call failed operation=%s: %s", operation, exc)
                    result = result_type(
                        success=False,
                        message=CONNECTION_ERROR_MESSAGE,
                        error=str(exc),
                    )
                span.set_attribute("catpay.outcome", outcome)
                return result
        finally:
            elapsed = max(0.0, time.perf_counter() - started)
            gateway_request_duration_seconds.labels(operation=operation).observe(elapsed)
            gateway_requests_total.labels(operation=operation, outcome=outcome).inc()
