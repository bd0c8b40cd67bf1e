"""Request/response schemas for the Black Cat sales endpoints.

Python attributes are snake_case; the wire format is camelCase. Both spellings
are accepted on input.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catpay.common.status import StatusTag, map_status


class WireModel(BaseModel):
    """Base for payloads we build and send."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RemoteModel(BaseModel):
    """Base for payloads decoded from the gateway.

    Unknown keys are kept and numeric ids are accepted as strings.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )


class Document(WireModel):
    number: str = Field(min_length=1, pattern=r"^\d+$")
    type: Literal["cpf", "cnpj"]


class Customer(WireModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str = Field(pattern=r"^\d+$")
    document: Document


class Item(WireModel):
    """One sale line; `tangible` marks physical goods."""

    title: str = Field(min_length=1)
    unit_price: int = Field(ge=0)
    quantity: int = Field(gt=0)
    tangible: bool | None = None


class Shipping(WireModel):
    name: str
    street: str
    number: str
    complement: str | None = None
    neighborhood: str
    city: str
    state: str = Field(pattern=r"^[A-Z]{2}$")
    zip_code: str = Field(pattern=r"^\d+$")


class PixConfig(WireModel):
    expires_in_days: int = Field(default=1, gt=0)


class SaleRequest(WireModel):
    """Payload accepted by `POST /sales/create-sale`.

    `shipping` is required by the gateway when any item is tangible; that rule
    is left for the gateway to enforce.
    """

    amount: int = Field(gt=0)
    currency: str = Field(default="BRL", min_length=3, max_length=3)
    payment_method: Literal["pix"] = "pix"
    items: list[Item] = Field(min_length=1)
    customer: Customer
    pix: PixConfig | None = None
    shipping: Shipping | None = None
    metadata: str | None = None
    postback_url: str | None = None
    external_ref: str | None = None


class PaymentData(RemoteModel):
    qr_code: str | None = None
    qr_code_base64: str | None = None
    copy_paste: str | None = None
    expires_at: str | None = None


class TransactionData(RemoteModel):
    """Fields shared by sale creation and status payloads."""

    transaction_id: str | None = None
    status: str | None = None
    payment_method: str | None = None
    # Cents by contract; floats from the gateway are kept as sent.
    amount: int | float | None = None
    net_amount: int | float | None = None
    fees: int | float | None = None

    @property
    def normalized_status(self) -> StatusTag:
        return map_status(self.status or "")


class SaleData(TransactionData):
    invoice_url: str | None = None
    created_at: str | None = None
    payment_data: PaymentData | None = None


class StatusData(TransactionData):
    paid_at: str | None = None
    end_to_end_id: str | None = None


class SellerData(RemoteModel):
    name: str | None = None
    legal_name: str | None = None
    cnpj: str | None = None
    logo: str | None = None


class GatewayResult(RemoteModel):
    """Tagged result returned by every client operation.

    Only `success=True` guarantees a usable `data` payload.
    """

    success: bool = False
    message: str | None = None
    error: str | None = None


class SaleResponse(GatewayResult):
    data: SaleData | None = None


class StatusResponse(GatewayResult):
    data: StatusData | None = None


class SellerResponse(GatewayResult):
    data: SellerData | None = None
