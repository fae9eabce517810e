from typing import Protocol

from domain.model.user import User
from port.context import OperationContext


class UserRepository(Protocol):
    """Protocol defining the persistence API for user accounts.

    Implementations do not re-validate users; call User.validate() first.
    Every operation must honor ``ctx`` before and during I/O.
    """

    def save(self, ctx: OperationContext, user: User) -> None:
        """Persist a new user.

        Raises:
            ConflictError: a user with this email already exists
            InternalError: storage failure
        """
        ...

    def update_user(self, ctx: OperationContext, user: User) -> None:
        """Replace the metadata of the user identified by ``user.email``.

        Raises:
            NotFoundError: no user with this email
            InternalError: storage failure
        """
        ...

    def retrieve_by_id(self, ctx: OperationContext, email: str) -> User:
        """Retrieve a user by its unique identifier (the email).

        Raises:
            NotFoundError: no user with this email
            InternalError: storage failure
        """
        ...

    def update_password(self, ctx: OperationContext, email: str, password: str) -> None:
        """Replace the stored password for the given email.

        Raises:
            NotFoundError: no user with this email
            InternalError: storage failure
        """
        ...
