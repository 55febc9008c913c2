# shop_api/application/dtos/base_dto.py

"""
Base schema shared by every DTO plus the helpers that turn pydantic errors
into a ValidationFailure.
"""

from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticCustomError

from shop_api.adapters.configuration.config import settings
from shop_api.domain.exceptions import ValidationFailure, ValidationIssue
from shop_api.shared.utils.input_validation import InputValidator
from shop_api.shared.utils.messages_utils import get_message

ModelT = TypeVar("ModelT", bound=BaseModel)

# Segmentos de loc que não fazem parte do caminho do campo
_LOCATION_PREFIXES = ("body", "query", "path", "header")

# Erros de tipo do pydantic e o nome exibido ao cliente
_TYPE_NAMES = {
    "string_type": "string",
    "float_type": "number",
    "float_parsing": "number",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "bool_type": "boolean",
    "model_type": "object",
    "dict_type": "object",
}


class CustomBaseModel(BaseModel):
    """Base for all DTOs: reads ORM attributes and ignores unknown keys."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")


def invalid(key: str, **kwargs) -> PydanticCustomError:
    """Build a pydantic error whose message is exactly the catalogue text."""
    return PydanticCustomError(key, get_message(key, settings.MESSAGES_LANGUAGE, **kwargs))


def _field_path(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _email_message(value: Any) -> str:
    # Erro do email-validator: traduz para o texto do catálogo
    if isinstance(value, str) and len(value) > InputValidator.MAX_EMAIL_LENGTH:
        return get_message("email_too_long", settings.MESSAGES_LANGUAGE, max=InputValidator.MAX_EMAIL_LENGTH)
    return get_message("email_invalid", settings.MESSAGES_LANGUAGE)


def issues_from_errors(errors: List[Dict[str, Any]]) -> List[ValidationIssue]:
    """
    Convert pydantic/FastAPI error dicts into ordered validation issues.

    Missing fields, wrong types, non-finite numbers and rejected emails get
    catalogue messages instead of pydantic's generic ones.
    """
    issues = []
    for error in errors:
        field = _field_path(error.get("loc", ()))
        error_type = error.get("type")
        if error_type == "missing":
            message = get_message("field_required", settings.MESSAGES_LANGUAGE, field=field)
        elif error_type in _TYPE_NAMES:
            message = get_message(
                "field_invalid_type", settings.MESSAGES_LANGUAGE, field=field, type=_TYPE_NAMES[error_type]
            )
        elif error_type == "finite_number":
            message = get_message("field_not_finite", settings.MESSAGES_LANGUAGE, field=field)
        elif error_type == "value_error" and field.rsplit(".", 1)[-1] == "email":
            message = _email_message(error.get("input"))
        else:
            message = error.get("msg", "Invalid input.")
        issues.append(ValidationIssue(field=field, message=message))
    return issues


def parse_input(model: Type[ModelT], raw: Optional[Dict[str, Any]]) -> ModelT:
    """
    Validate a raw payload against a DTO.

    Raises:
        ValidationFailure: with one issue per violated constraint, in schema order.
    """
    try:
        return model.model_validate(raw if raw is not None else {})
    except ValidationError as e:
        raise ValidationFailure(issues_from_errors(e.errors())) from e
