# shop_api/shared/utils/messages_utils.py

"""
Sistema de mensagens multilíngue para validação e feedback da API.

Este módulo fornece suporte a tradução de mensagens em diferentes idiomas,
facilitando a internacionalização do sistema (i18n).
"""

from typing import Dict

# Dicionário principal de mensagens
MESSAGES: Dict[str, Dict[str, str]] = {
    # Username
    "username_required": {
        "en": "Username is required",
        "pt": "Nome de usuário é obrigatório",
    },
    "username_too_long": {
        "en": "Username should not exceed {max} characters",
        "pt": "Nome de usuário não deve exceder {max} caracteres",
    },

    # Password validation
    "password_too_short": {
        "en": "Password must be at least {min} characters long",
        "pt": "Senha deve ter pelo menos {min} caracteres",
    },
    "password_too_long": {
        "en": "Password is too long (maximum {max} bytes)",
        "pt": "Senha é muito longa (máximo {max} bytes)",
    },

    # Email validation
    "email_invalid": {
        "en": "Invalid email address",
        "pt": "Endereço de e-mail inválido",
    },
    "email_too_long": {
        "en": "Email is too long (maximum {max} characters)",
        "pt": "E-mail é muito longo (máximo {max} caracteres)",
    },

    # Role
    "role_invalid": {
        "en": "Invalid role",
        "pt": "Perfil inválido",
    },

    # Product
    "name_required": {
        "en": "Name is required",
        "pt": "Nome é obrigatório",
    },
    "description_required": {
        "en": "Description is required",
        "pt": "Descrição é obrigatória",
    },
    "price_invalid": {
        "en": "Price must be a positive number",
        "pt": "Preço deve ser um número positivo",
    },
    "quantity_invalid": {
        "en": "Quantity must be a positive integer",
        "pt": "Quantidade deve ser um inteiro positivo",
    },
    "quantity_too_large": {
        "en": "Quantity must not exceed {max}",
        "pt": "Quantidade não pode exceder {max}",
    },

    # Generic fields
    "field_required": {
        "en": "Field '{field}' is required.",
        "pt": "Campo '{field}' é obrigatório.",
    },
    "field_not_nullable": {
        "en": "Field '{field}' cannot be null.",
        "pt": "Campo '{field}' não pode ser nulo.",
    },
    "field_invalid_type": {
        "en": "Field '{field}' must be of type {type}.",
        "pt": "Campo '{field}' deve ser do tipo {type}.",
    },
    "field_not_finite": {
        "en": "Field '{field}' must be a finite number.",
        "pt": "Campo '{field}' deve ser um número finito.",
    },

    # Auth
    "auth_header_missing": {
        "en": "Authorization header missing",
        "pt": "Cabeçalho de autorização ausente",
    },
    "auth_token_missing": {
        "en": "Missing authorization token",
        "pt": "Token de autorização ausente",
    },
    "auth_scheme_invalid": {
        "en": "Invalid authorization scheme",
        "pt": "Esquema de autorização inválido",
    },
    "auth_token_revoked": {
        "en": "Token has been invalidated, login again",
        "pt": "Token foi invalidado, faça login novamente",
    },
    "auth_token_invalid": {
        "en": "Invalid token",
        "pt": "Token inválido",
    },
    "auth_token_expired": {
        "en": "Token has expired",
        "pt": "Token expirado",
    },
    "generic_invalid_credentials": {
        "en": "Incorrect email or password.",
        "pt": "E-mail ou senha incorretos.",
    },
    "user_already_exists": {
        "en": "User with this email already exists.",
        "pt": "Já existe um usuário com este e-mail.",
    },
    "user_not_found": {
        "en": "User not found.",
        "pt": "Usuário não encontrado.",
    },
    "product_not_found": {
        "en": "Product not found.",
        "pt": "Produto não encontrado.",
    },

    # General
    "internal_error": {
        "en": "Internal server error.",
        "pt": "Erro interno do servidor.",
    },
}


def get_message(key: str, language: str = "en", **kwargs) -> str:
    """
    Recupera uma mensagem formatada baseada na chave e no idioma.

    Args:
        key (str): Chave da mensagem.
        language (str): Idioma desejado ('en', 'pt').
        kwargs: Variáveis a serem interpoladas na mensagem.

    Returns:
        str: Mensagem finalizada.
    """
    try:
        template = MESSAGES[key][language]
    except KeyError:
        # Tenta usar inglês como fallback
        template = MESSAGES.get(key, {}).get("en", f"[Message not found: {key}]")

    return template.format(**kwargs)
