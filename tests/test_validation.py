"""
Tests for the payload schemas and message flattening.
"""
import pytest

from app.constants import messages
from app.db.schemas.product import PRODUCT_SCHEMA, UPDATE_PRODUCT_SCHEMA
from app.db.schemas.store import CREATE_STORE_SCHEMA, UPDATE_STORE_SCHEMA
from app.db.schemas.user import USER_SCHEMA, has_full_name, is_email
from app.errors import PayloadValidationError
from app.validation import validate


def errors_for(schema, payload):
    with pytest.raises(PayloadValidationError) as info:
        validate(schema, payload)
    return info.value.errors


class TestUserSchema:
    def test_valid_payload_is_parsed(self):
        data = validate(USER_SCHEMA, {"name": "Ana Silva", "email": "ana@x.com", "password": "abcdefgh"})
        assert (data.name, data.email, data.password) == ("Ana Silva", "ana@x.com", "abcdefgh")

    def test_missing_fields_report_one_message_each(self):
        assert errors_for(USER_SCHEMA, {}) == [
            messages.USER_NAME_REQUIRED,
            messages.USER_EMAIL_REQUIRED,
            messages.USER_PASSWORD_REQUIRED,
        ]

    def test_empty_strings_report_every_failed_rule(self):
        errors = errors_for(USER_SCHEMA, {"name": "", "email": "", "password": ""})
        assert errors == [
            messages.USER_NAME_REQUIRED,
            messages.USER_NAME_FULL,
            messages.USER_EMAIL_INVALID,
            messages.USER_EMAIL_REQUIRED,
            messages.USER_PASSWORD_REQUIRED,
            messages.USER_PASSWORD_TOO_SHORT,
        ]

    def test_single_name_is_rejected(self):
        errors = errors_for(USER_SCHEMA, {"name": "Ana", "email": "ana@x.com", "password": "abcdefgh"})
        assert errors == [messages.USER_NAME_FULL]

    def test_short_password_and_bad_email(self):
        errors = errors_for(USER_SCHEMA, {"name": "Ana Silva", "email": "ana", "password": "abc"})
        assert errors == [messages.USER_EMAIL_INVALID, messages.USER_PASSWORD_TOO_SHORT]

    def test_wrong_types_fail_without_crashing(self):
        errors = errors_for(USER_SCHEMA, {"name": 42, "email": ["a"], "password": {"x": 1}})
        assert errors == [
            messages.USER_NAME_NOT_TEXT,
            messages.USER_EMAIL_NOT_TEXT,
            messages.USER_PASSWORD_NOT_TEXT,
        ]

    @pytest.mark.parametrize("value,expected", [
        ("Ana Silva", True),
        ("  Ana   Maria Silva ", True),
        ("Ana", False),
        ("   ", False),
        ("", False),
    ])
    def test_full_name_rule(self, value, expected):
        assert has_full_name(value) is expected

    def test_email_rule(self):
        assert is_email("ana@x.com")
        assert not is_email("ana@")
        assert not is_email("")


class TestStoreSchemas:
    def test_camel_case_wire_names(self):
        data = validate(CREATE_STORE_SCHEMA, {"name": "Loja A", "userId": 3})
        assert data.user_id == 3

    def test_user_id_must_be_integer(self):
        assert errors_for(CREATE_STORE_SCHEMA, {"name": "Loja A", "userId": 1.5}) == [
            messages.STORE_USER_ID_NOT_INTEGER
        ]
        assert errors_for(CREATE_STORE_SCHEMA, {"name": "Loja A", "userId": "1"}) == [
            messages.STORE_USER_ID_NOT_INTEGER
        ]

    def test_integral_float_is_accepted(self):
        assert validate(CREATE_STORE_SCHEMA, {"name": "Loja A", "userId": 2.0}).user_id == 2

    def test_update_schema_omits_user_id(self):
        assert set(UPDATE_STORE_SCHEMA.model_fields) == {"name"}
        assert set(CREATE_STORE_SCHEMA.model_fields) == {"name", "user_id"}
        assert errors_for(UPDATE_STORE_SCHEMA, {"name": ""}) == [messages.STORE_NAME_REQUIRED]


class TestProductSchemas:
    def test_invalid_name_and_price_yield_two_messages(self):
        errors = errors_for(PRODUCT_SCHEMA, {"name": "", "price": -1, "storeId": 1})
        assert errors == [messages.PRODUCT_NAME_REQUIRED, messages.PRODUCT_PRICE_NOT_POSITIVE]

    @pytest.mark.parametrize("price", [True, "10", None])
    def test_price_must_be_a_number(self, price):
        errors = errors_for(PRODUCT_SCHEMA, {"name": "Caneca", "price": price, "storeId": 1})
        expected = messages.PRODUCT_PRICE_REQUIRED if price is None else messages.PRODUCT_PRICE_NOT_NUMBER
        assert errors == [expected]

    def test_price_too_large_for_a_float(self):
        errors = errors_for(PRODUCT_SCHEMA, {"name": "Caneca", "price": 10**400, "storeId": 1})
        assert errors == [messages.PRODUCT_PRICE_NOT_NUMBER]

    def test_zero_price_is_rejected(self):
        errors = errors_for(PRODUCT_SCHEMA, {"name": "Caneca", "price": 0, "storeId": 1})
        assert errors == [messages.PRODUCT_PRICE_NOT_POSITIVE]

    def test_store_id_required_on_create_only(self):
        assert errors_for(PRODUCT_SCHEMA, {"name": "Caneca", "price": 5}) == [
            messages.PRODUCT_STORE_ID_REQUIRED
        ]
        data = validate(UPDATE_PRODUCT_SCHEMA, {"name": "Caneca", "price": 5})
        assert data.store_id is None

    def test_update_schema_still_checks_supplied_store_id(self):
        assert errors_for(UPDATE_PRODUCT_SCHEMA, {"name": "Caneca", "price": 5, "storeId": "x"}) == [
            messages.PRODUCT_STORE_ID_NOT_INTEGER
        ]


class TestPayloadShape:
    @pytest.mark.parametrize("payload", [[], "texto", 10])
    def test_non_object_body(self, payload):
        assert errors_for(PRODUCT_SCHEMA, payload) == [messages.BODY_NOT_OBJECT]

    def test_missing_body_counts_as_empty_object(self):
        assert errors_for(UPDATE_STORE_SCHEMA, None) == [messages.STORE_NAME_REQUIRED]

    def test_unknown_keys_are_ignored(self):
        data = validate(UPDATE_STORE_SCHEMA, {"name": "Loja B", "userId": 9, "extra": True})
        assert data.model_dump() == {"name": "Loja B"}
