from datetime import datetime
from typing import List, Optional

from app.constants import messages
from app.validation import build_schema, text, integer, nonempty
from .summary import ApiModel, ProductSummary, UserSummary

STORE_FIELDS = {
    "name": text(
        messages.STORE_NAME_NOT_TEXT,
        messages.STORE_NAME_REQUIRED,
        nonempty(messages.STORE_NAME_REQUIRED),
    ),
    "user_id": integer(
        messages.STORE_USER_ID_NOT_INTEGER,
        messages.STORE_USER_ID_REQUIRED,
    ),
}

CREATE_STORE_SCHEMA = build_schema("CreateStorePayload", STORE_FIELDS)
# The owner of a store cannot be changed
UPDATE_STORE_SCHEMA = build_schema("UpdateStorePayload", STORE_FIELDS, omit={"user_id"})


class StoreRead(ApiModel):
    id: int
    name: str
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: UserSummary
    products: List[ProductSummary] = []
