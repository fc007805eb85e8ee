"""
Tests for persistence error classification and per-operation translation.
"""
import pytest
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from app.errors import (
    ApiError,
    ErrorMessages,
    PersistenceError,
    PersistenceErrorCode,
    classify_persistence_error,
    flatten_validation_errors,
    persistence_errors,
)


class FakePgError(Exception):
    def __init__(self, pgcode):
        super().__init__("pg failure")
        self.pgcode = pgcode


class FakeSession:
    def __init__(self):
        self.rolled_back = False

    def rollback(self):
        self.rolled_back = True


def integrity(orig):
    return IntegrityError("INSERT ...", {}, orig)


class TestClassification:
    def test_sqlite_unique_violation(self):
        exc = integrity(Exception("UNIQUE constraint failed: users.email"))
        assert classify_persistence_error(exc) is PersistenceErrorCode.UNIQUE_VIOLATION

    def test_sqlite_foreign_key_violation(self):
        exc = integrity(Exception("FOREIGN KEY constraint failed"))
        assert classify_persistence_error(exc) is PersistenceErrorCode.FOREIGN_KEY_VIOLATION

    def test_postgres_sqlstates(self):
        assert classify_persistence_error(integrity(FakePgError("23505"))) is PersistenceErrorCode.UNIQUE_VIOLATION
        assert classify_persistence_error(integrity(FakePgError("23503"))) is PersistenceErrorCode.FOREIGN_KEY_VIOLATION

    def test_other_integrity_errors(self):
        exc = integrity(Exception("NOT NULL constraint failed: stores.user_id"))
        assert classify_persistence_error(exc) is PersistenceErrorCode.OTHER

    def test_no_result_is_not_found(self):
        assert classify_persistence_error(NoResultFound()) is PersistenceErrorCode.NOT_FOUND

    def test_connectivity_is_other(self):
        exc = OperationalError("SELECT 1", {}, Exception("could not connect"))
        assert classify_persistence_error(exc) is PersistenceErrorCode.OTHER


class TestPersistenceGuard:
    def test_rolls_back_and_wraps(self):
        session = FakeSession()
        with pytest.raises(PersistenceError) as info:
            with persistence_errors(session):
                raise integrity(Exception("UNIQUE constraint failed: users.email"))
        assert session.rolled_back
        assert info.value.code is PersistenceErrorCode.UNIQUE_VIOLATION
        assert isinstance(info.value.__cause__, IntegrityError)

    def test_other_exceptions_pass_through(self):
        session = FakeSession()
        with pytest.raises(KeyError):
            with persistence_errors(session):
                raise KeyError("x")
        assert not session.rolled_back


class TestErrorMessages:
    table = ErrorMessages(
        fallback="Erro ao criar loja",
        unique="Usuário já possui uma loja",
        not_found="Loja não encontrada",
        foreign_key="Usuário não encontrado",
        foreign_key_status=404,
    )

    @pytest.mark.parametrize("code,status_code,message", [
        (PersistenceErrorCode.UNIQUE_VIOLATION, 409, "Usuário já possui uma loja"),
        (PersistenceErrorCode.NOT_FOUND, 404, "Loja não encontrada"),
        (PersistenceErrorCode.FOREIGN_KEY_VIOLATION, 404, "Usuário não encontrado"),
        (PersistenceErrorCode.OTHER, 500, "Erro ao criar loja"),
    ])
    def test_translate(self, code, status_code, message):
        error = self.table.translate(PersistenceError(code, "detail"))
        assert isinstance(error, ApiError)
        assert (error.status_code, error.message) == (status_code, message)

    def test_unmapped_code_falls_back_without_leaking_detail(self, caplog):
        table = ErrorMessages(fallback="Erro ao listar usuários")
        error = table.translate(PersistenceError(PersistenceErrorCode.UNIQUE_VIOLATION, "secret detail"))
        assert (error.status_code, error.message) == (500, "Erro ao listar usuários")
        assert "secret detail" in caplog.text

    def test_every_code_is_handled(self):
        table = ErrorMessages(fallback="x")
        for code in PersistenceErrorCode:
            assert table.translate(PersistenceError(code)).status_code == 500


class TestFlatten:
    def test_expands_rule_messages_in_order(self):
        errors = [
            {"type": "payload_rule", "loc": ("name",), "msg": "a; b", "ctx": {"messages": ["a", "b"]}},
            {"type": "payload_rule", "loc": ("price",), "msg": "c", "ctx": {"messages": ["c"]}},
        ]
        assert flatten_validation_errors(errors) == ["a", "b", "c"]

    def test_framework_errors(self):
        errors = [
            {"type": "json_invalid", "loc": ("body", 3), "msg": "JSON decode error", "ctx": {"error": "x"}},
            {"type": "int_parsing", "loc": ("path", "user_id"), "msg": "Input should be a valid integer"},
            {"type": "missing", "loc": ("query", "q"), "msg": "Field required"},
        ]
        assert flatten_validation_errors(errors) == ["JSON inválido", "Identificador inválido", "Field required"]
