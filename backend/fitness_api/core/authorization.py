"""API Key Gate: shared-secret check guarding the protected route groups.

Invariants:
    - Header absent, empty, or different from the secret → rejected
    - Empty configured secret → every request rejected
    - The secret never appears in repr(), logs, or responses

Limitations:
    - Single global equality check: no expiry, per-key scoping, rotation,
      or protection against guessing
"""

import hmac

API_KEY_HEADER = "x-api-key"


class ApiKeyGate:
    """Compares a candidate header value with the configured secret."""

    def __init__(self, secret: str):
        self._secret = secret.encode("utf-8") if secret else b""

    @property
    def configured(self) -> bool:
        return bool(self._secret)

    def allows(self, candidate: str | None) -> bool:
        if not self._secret or not candidate:
            return False
        return hmac.compare_digest(candidate.encode("utf-8"), self._secret)

    def __repr__(self) -> str:
        return f"ApiKeyGate(configured={self.configured})"
