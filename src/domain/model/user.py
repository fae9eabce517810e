from dataclasses import dataclass, field

from domain.model.email import is_email
from domain.model.errors import MalformedEntityError

MIN_PASSWORD_LENGTH = 8

MetadataValue = str | int | float | bool | None | list | dict
Metadata = dict[str, MetadataValue]


@dataclass
class User:
    """Domain model representing a user account, identified by its email."""
    email: str = ''
    password: str = ''
    metadata: Metadata = field(default_factory=dict)

    def validate(self) -> None:
        """Raise MalformedEntityError if email or password is unacceptable."""
        if not is_email(self.email):
            raise MalformedEntityError("Invalid email address")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise MalformedEntityError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
