"""bcrypt implementation of PasswordHasher."""

import bcrypt

BCRYPT_ROUNDS = 12


class BcryptPasswordHasher:
    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
