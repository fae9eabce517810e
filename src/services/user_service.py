"""User service: account registration and maintenance.

Pure business logic with no storage or HTTP dependencies. Validation
failures raise MalformedEntityError before the repository is touched;
repository errors propagate unchanged.
"""

import logging
from dataclasses import replace

from domain.model.email import is_email
from domain.model.errors import MalformedEntityError
from domain.model.user import MIN_PASSWORD_LENGTH, User
from port.context import OperationContext
from port.password_hasher import PasswordHasher
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def register(
    ctx: OperationContext,
    repo: UserRepository,
    hasher: PasswordHasher,
    user: User,
) -> User:
    """Register a new user.

    Returns the stored copy, whose password is the hash. ``user`` is left
    untouched.

    Raises:
        MalformedEntityError: invalid email or password too short
        ConflictError: email already registered
    """
    user.validate()
    stored = replace(user, password=hasher.hash(user.password), metadata=dict(user.metadata))
    repo.save(ctx, stored)
    logger.info("User registered", extra={"email": user.email})
    return stored


def view_user(ctx: OperationContext, repo: UserRepository, email: str) -> User:
    return repo.retrieve_by_id(ctx, email)


def update_user(ctx: OperationContext, repo: UserRepository, user: User) -> None:
    """Replace the metadata of an existing user.

    Raises:
        MalformedEntityError: invalid email
        NotFoundError: no such user
    """
    if not is_email(user.email):
        raise MalformedEntityError("Invalid email address")
    repo.update_user(ctx, user)


def update_password(
    ctx: OperationContext,
    repo: UserRepository,
    hasher: PasswordHasher,
    email: str,
    password: str,
) -> None:
    """Hash and store a new password for an existing user.

    Raises:
        MalformedEntityError: password too short
        NotFoundError: no such user
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise MalformedEntityError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    repo.update_password(ctx, email, hasher.hash(password))
    logger.info("Password updated", extra={"email": email})
