"""Password hashing on scrypt from ``cryptography``."""

import base64
import secrets

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


class PasswordHasher:
    """Hash and verify passwords as ``scrypt$n$r$p$salt$key`` strings."""

    def __init__(self, n: int = 2 ** 14, r: int = 8, p: int = 1, length: int = 32):
        self.n = n
        self.r = r
        self.p = p
        self.length = length

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(16)
        key = self._kdf(salt, self.n, self.r, self.p, self.length).derive(password.encode("utf-8"))
        return f"scrypt${self.n}${self.r}${self.p}${_b64encode(salt)}${_b64encode(key)}"

    def verify(self, password: str, hashed: str) -> bool:
        try:
            scheme, n, r, p, salt, key = hashed.split("$")
        except ValueError:
            return False
        if scheme != "scrypt":
            return False

        expected = base64.b64decode(key)
        kdf = self._kdf(base64.b64decode(salt), int(n), int(r), int(p), len(expected))
        try:
            kdf.verify(password.encode("utf-8"), expected)
        except InvalidKey:
            return False
        return True

    @staticmethod
    def _kdf(salt: bytes, n: int, r: int, p: int, length: int) -> Scrypt:
        return Scrypt(salt=salt, length=length, n=n, r=r, p=p)
