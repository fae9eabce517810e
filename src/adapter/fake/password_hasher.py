"""Deterministic PasswordHasher for testing. Not a real hash."""

PREFIX = 'fake-hash:'


class FakePasswordHasher:
    def hash(self, password: str) -> str:
        return PREFIX + password[::-1]

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == self.hash(password)
