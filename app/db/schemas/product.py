from datetime import datetime
from typing import Optional

from app.constants import messages
from app.validation import build_schema, text, number, integer, nonempty, positive
from .summary import ApiModel, StoreWithOwner

PRODUCT_FIELDS = {
    "name": text(
        messages.PRODUCT_NAME_NOT_TEXT,
        messages.PRODUCT_NAME_REQUIRED,
        nonempty(messages.PRODUCT_NAME_REQUIRED),
    ),
    "price": number(
        messages.PRODUCT_PRICE_NOT_NUMBER,
        messages.PRODUCT_PRICE_REQUIRED,
        positive(messages.PRODUCT_PRICE_NOT_POSITIVE),
    ),
    "store_id": integer(
        messages.PRODUCT_STORE_ID_NOT_INTEGER,
        messages.PRODUCT_STORE_ID_REQUIRED,
    ),
}

PRODUCT_SCHEMA = build_schema("ProductPayload", PRODUCT_FIELDS)
# Moving a product to another store is optional on update
UPDATE_PRODUCT_SCHEMA = build_schema("UpdateProductPayload", PRODUCT_FIELDS, optional={"store_id"})


class ProductRead(ApiModel):
    id: int
    name: str
    price: float
    store_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    store: StoreWithOwner
