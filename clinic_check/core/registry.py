# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Process-lifetime registry of bearer tokens keyed by role."""

import logging

from clinic_check.core.constants import SECONDARY_TOKEN_SUFFIX
from clinic_check.core.errors import MissingTokenError
from clinic_check.core.models import Role
from clinic_check.utils.strings import mask_token

logger = logging.getLogger(__name__)


class TokenRegistry:
    """Tokens obtained during the authentication phases of one run.

    Tokens are written by the login cases and only read afterwards. Primary
    (demo login) and secondary (credential login) tokens live under distinct
    keys, so recording one never replaces the other.
    """

    def __init__(self) -> None:
        self._tokens: dict[str, str] = {}

    @staticmethod
    def primary_key(role: Role) -> str:
        return role.value

    @staticmethod
    def secondary_key(role: Role) -> str:
        return f"{role.value}{SECONDARY_TOKEN_SUFFIX}"

    def record_token(self, key: str, token: str) -> None:
        """Store a token under the given key.

        Raises:
            MissingTokenError: If the token is empty.
        """
        if not token:
            raise MissingTokenError(key)
        self._tokens[key] = token
        logger.debug("Recorded token for %s: %s", key, mask_token(token))

    def get_token(self, key: str) -> str:
        """Return the token recorded under key.

        Raises:
            MissingTokenError: If authentication for key never recorded a token.
        """
        token = self._tokens.get(key)
        if not token:
            raise MissingTokenError(key)
        return token

    def has_token(self, key: str) -> bool:
        return bool(self._tokens.get(key))

    def keys(self) -> list[str]:
        return list(self._tokens)
