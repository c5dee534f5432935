from __future__ import annotations

import secrets

from file_temp.app.domain.files.value_objects import IdentifierPolicy


class SecretsIdentifierGenerator:
    def generate(self, policy: IdentifierPolicy) -> str:
        alphabet = policy.charset.alphabet
        return "".join(secrets.choice(alphabet) for _ in range(policy.length))
