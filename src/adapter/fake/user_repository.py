"""In-memory implementation of UserRepository for testing."""

import copy
import threading

from domain.model.errors import ConflictError, InternalError, NotFoundError
from domain.model.user import User
from port.context import OperationContext


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        # Set to make every call fail with InternalError after the context check.
        self.fail_with: str | None = None
        self._lock = threading.Lock()

    def _begin(self, ctx: OperationContext) -> None:
        ctx.check()
        if self.fail_with:
            raise InternalError(self.fail_with)

    # ── write operations ─────────────────────────────────────

    def save(self, ctx: OperationContext, user: User) -> None:
        self._begin(ctx)
        with self._lock:
            if user.email in self.store:
                raise ConflictError(f"User {user.email} already exists")
            self.store[user.email] = copy.deepcopy(user)

    def update_user(self, ctx: OperationContext, user: User) -> None:
        self._begin(ctx)
        with self._lock:
            stored = self.store.get(user.email)
            if stored is None:
                raise NotFoundError(f"User {user.email} not found")
            stored.metadata = copy.deepcopy(user.metadata)

    def update_password(self, ctx: OperationContext, email: str, password: str) -> None:
        self._begin(ctx)
        with self._lock:
            stored = self.store.get(email)
            if stored is None:
                raise NotFoundError(f"User {email} not found")
            stored.password = password

    # ── read operations ──────────────────────────────────────

    def retrieve_by_id(self, ctx: OperationContext, email: str) -> User:
        self._begin(ctx)
        with self._lock:
            stored = self.store.get(email)
            if stored is None:
                raise NotFoundError(f"User {email} not found")
            return copy.deepcopy(stored)
