# shop_api/shared/utils/input_validation.py

import re
from typing import Optional, Tuple, Union
from uuid import UUID

from shop_api.adapters.configuration.config import settings
from shop_api.shared.utils.messages_utils import get_message


class InputValidator:
    """
    Classe para validação e sanitização de entradas de usuário.

    Cada método devolve (válido, mensagem de erro) para que os DTOs decidam
    como reportar a falha.
    """

    # ─────────────────────────────────────────────────────────────
    # Constantes de limites
    MAX_USERNAME_LENGTH = 100
    MIN_PASSWORD_LENGTH = 6
    MAX_PASSWORD_BYTES = 72  # bcrypt ignora tudo além de 72 bytes
    MAX_EMAIL_LENGTH = 255

    # E-mail (EMAIL_PATTERN):
    # - Aceita letras, números, pontos, underlines, hífens no usuário
    # - Aceita domínios com letras, números, pontos e hífens
    EMAIL_PATTERN = re.compile(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    )

    # ─────────────────────────────────────────────────────────────

    @classmethod
    def validate_username(cls, username: str, language: Optional[str] = None) -> Tuple[bool, Optional[str]]:
        language = language or settings.MESSAGES_LANGUAGE
        if len(username) < 1:
            return False, get_message("username_required", language)
        if len(username) > cls.MAX_USERNAME_LENGTH:
            return False, get_message("username_too_long", language, max=cls.MAX_USERNAME_LENGTH)
        return True, None

    @classmethod
    def validate_password(cls, password: str, language: Optional[str] = None) -> Tuple[bool, Optional[str]]:
        """
        Valida o tamanho da senha.

        Returns:
            (bool indicando se é válida, mensagem de erro se inválida)
        """
        language = language or settings.MESSAGES_LANGUAGE
        if len(password) < cls.MIN_PASSWORD_LENGTH:
            return False, get_message("password_too_short", language, min=cls.MIN_PASSWORD_LENGTH)
        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_BYTES:
            return False, get_message("password_too_long", language, max=cls.MAX_PASSWORD_BYTES)
        return True, None

    @classmethod
    def validate_email(cls, email: str, language: Optional[str] = None) -> Tuple[bool, Optional[str]]:
        language = language or settings.MESSAGES_LANGUAGE
        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, get_message("email_too_long", language, max=cls.MAX_EMAIL_LENGTH)

        if not cls.EMAIL_PATTERN.match(email):
            return False, get_message("email_invalid", language)

        return True, None


    @staticmethod
    def parse_uuid(value: Union[str, UUID]) -> Optional[UUID]:
        """Return the UUID for a string id, or None if it is not one."""
        if isinstance(value, UUID):
            return value
        try:
            return UUID(str(value))
        except ValueError:
            return None
