# shop_api/test/schemas/test_user_dto.py

# Rodar Script
# pytest shop_api/test/schemas/test_user_dto.py

import pytest
from datetime import datetime
from uuid import uuid4
from pydantic import ValidationError

from shop_api.application.dtos.base_dto import parse_input
from shop_api.application.dtos.user_dto import UserCreate, UserLogin, UserOutput
from shop_api.domain.exceptions import ValidationFailure
from shop_api.domain.models.user_role import UserRole


def valid_register(**overrides):
    data = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret1",
        "role": "user",
    }
    data.update(overrides)
    return data


def test_user_create_valid():
    user = UserCreate(**valid_register(avatar="https://example.com/a.png"))
    assert user.email == "alice@example.com"
    assert user.role == UserRole.USER
    assert user.avatar == "https://example.com/a.png"


def test_user_create_invalid_email():
    with pytest.raises(ValidationError):
        UserCreate(**valid_register(email="invalidemail"))


def test_password_minimum_length_boundary():
    """
    5 caracteres falha, 6 passa.
    """
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserCreate, valid_register(password="12345"))
    assert exc_info.value.message == "Password must be at least 6 characters long"

    assert parse_input(UserCreate, valid_register(password="123456")).password == "123456"


def test_role_outside_closed_set_is_rejected():
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserCreate, valid_register(role="superuser"))

    assert exc_info.value.message == "Invalid role"
    assert exc_info.value.issues[0].field == "role"


@pytest.mark.parametrize("role", ["admin", "user", "manager"])
def test_every_role_is_accepted(role):
    assert parse_input(UserCreate, valid_register(role=role)).role.value == role


def test_username_bounds():
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserCreate, valid_register(username=""))
    assert exc_info.value.message == "Username is required"

    with pytest.raises(ValidationFailure):
        parse_input(UserCreate, valid_register(username="a" * 101))


def test_issues_follow_schema_order():
    """
    Vários erros: a lista mantém a ordem dos campos e a mensagem é a do primeiro.
    """
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserCreate, {"email": "bad", "password": "123"})

    fields = [issue.field for issue in exc_info.value.issues]
    assert fields == ["username", "email", "password", "role"]
    assert exc_info.value.message == "Field 'username' is required."


def test_login_requires_email_and_password():
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserLogin, {"email": "alice@example.com"})

    assert exc_info.value.message == "Field 'password' is required."


def test_wrong_type_gets_catalogue_message():
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserLogin, {"email": "alice@example.com", "password": 123456})

    assert exc_info.value.message == "Field 'password' must be of type string."


def test_user_output_never_exposes_password():
    user = UserOutput(
        id=uuid4(),
        username="alice",
        email="alice@example.com",
        role="admin",
        created_at=datetime(2024, 1, 1),
    )
    assert "password" not in user.model_dump()


@pytest.mark.parametrize("email", ["alice@example", "alice@@example.com", "alice@exa mple.com", "alice@.com"])
def test_email_rejected_by_validator_gets_catalogue_message(email):
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserCreate, valid_register(email=email))

    assert exc_info.value.message == "Invalid email address"
    assert exc_info.value.issues[0].field == "email"


def test_login_email_rejected_by_validator():
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserLogin, {"email": "alice@example", "password": "secret1"})

    assert exc_info.value.message == "Invalid email address"


def test_overlong_email_reports_length():
    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserCreate, valid_register(email="a" * 250 + "@example.com"))

    assert exc_info.value.message == "Email is too long (maximum 255 characters)"


def test_password_limit_counts_bytes_not_characters():
    """
    bcrypt só lê 72 bytes: 36 caracteres de 2 bytes passam, 37 não.
    """
    assert parse_input(UserCreate, valid_register(password="é" * 36)).password == "é" * 36

    with pytest.raises(ValidationFailure) as exc_info:
        parse_input(UserCreate, valid_register(password="é" * 37))
    assert exc_info.value.message == "Password is too long (maximum 72 bytes)"
