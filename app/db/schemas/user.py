from datetime import datetime
from typing import Optional

from email_validator import validate_email, EmailNotValidError

from app.constants import messages
from app.validation import build_schema, text, nonempty, min_length, refine
from .summary import ApiModel, StoreSummary


def has_full_name(value: str) -> bool:
    return len(value.strip().split()) >= 2


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


USER_FIELDS = {
    "name": text(
        messages.USER_NAME_NOT_TEXT,
        messages.USER_NAME_REQUIRED,
        nonempty(messages.USER_NAME_REQUIRED),
        refine(has_full_name, messages.USER_NAME_FULL),
    ),
    "email": text(
        messages.USER_EMAIL_NOT_TEXT,
        messages.USER_EMAIL_REQUIRED,
        refine(is_email, messages.USER_EMAIL_INVALID),
        nonempty(messages.USER_EMAIL_REQUIRED),
    ),
    "password": text(
        messages.USER_PASSWORD_NOT_TEXT,
        messages.USER_PASSWORD_REQUIRED,
        nonempty(messages.USER_PASSWORD_REQUIRED),
        min_length(8, messages.USER_PASSWORD_TOO_SHORT),
    ),
}

# Create and update both take the full payload
USER_SCHEMA = build_schema("UserPayload", USER_FIELDS)


class UserRead(ApiModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    store: Optional[StoreSummary] = None
