# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Static credential configuration for the credential-login phase."""

import logging
import os
from collections.abc import Mapping

from clinic_check.core.constants import DEMO_EMAIL_DOMAIN, DEMO_PASSWORD
from clinic_check.core.models import Credential, Role

logger = logging.getLogger(__name__)


def email_env_var(role: Role) -> str:
    return f"CLINIC_{role.value.upper()}_EMAIL"


def password_env_var(role: Role) -> str:
    return f"CLINIC_{role.value.upper()}_PASSWORD"


def demo_credential(role: Role) -> Credential:
    """Return the seeded demo account for a role."""
    return Credential(
        role=role,
        email=f"{role.value}@{DEMO_EMAIL_DOMAIN}",
        password=DEMO_PASSWORD,
    )


def load_credentials(environ: Mapping[str, str] | None = None) -> dict[Role, Credential]:
    """Build the credential set for every role.

    Each role defaults to its demo account; CLINIC_<ROLE>_EMAIL and
    CLINIC_<ROLE>_PASSWORD override the email and password independently.

    Args:
        environ: Environment mapping to read; defaults to os.environ.

    Returns:
        Credentials keyed by role, in Role order.
    """
    env = os.environ if environ is None else environ
    credentials: dict[Role, Credential] = {}
    for role in Role:
        default = demo_credential(role)
        email = env.get(email_env_var(role)) or default.email
        password = env.get(password_env_var(role)) or default.password
        if email != default.email:
            logger.debug("Using %s for %s credential login", email, role.value)
        credentials[role] = Credential(role=role, email=email, password=password)
    return credentials
