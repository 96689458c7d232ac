# Minimal env-only secrets accessor for the CarePartner server

import os
from typing import Mapping, Optional

from ..exceptions import CredentialMissingError
from .settings import API_KEY_ENV


class Secrets:
    """Env-only OpenRouter key accessor. No keyring, no prompts, no logging."""

    @staticmethod
    def get_api_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
        """Return the OpenRouter key, or None when unset or blank."""
        env = os.environ if environ is None else environ
        raw = (env.get(API_KEY_ENV) or "").strip()
        return raw or None

    @staticmethod
    def require_api_key(environ: Optional[Mapping[str, str]] = None) -> str:
        """Like get_api_key, but raises CredentialMissingError when unset."""
        key = Secrets.get_api_key(environ)
        if key is None:
            raise CredentialMissingError(API_KEY_ENV)
        return key
