"""MongoDB implementation of UserRepository.

Users are stored one document per account with the email as ``_id``, so the
primary key index enforces email uniqueness and serializes concurrent saves.
"""

from datetime import datetime, timezone
from logging import getLogger

import pymongo
from pymongo.database import Database
from bson.errors import BSONError
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.errors import (
    ConflictError,
    DeadlineExceededError,
    InternalError,
    NotFoundError,
)
from domain.model.user import User
from port.context import OperationContext

logger = getLogger(__name__)


def _storage_error(message: str, email: str, error: PyMongoError) -> InternalError:
    if error.timeout:
        logger.warning(f"{message}: deadline exceeded", extra={"email": email})
        return DeadlineExceededError(message)
    logger.error(message, extra={"email": email, "error": str(error)})
    return InternalError(message)


# Documents are encoded client-side; unencodable metadata never reaches the server.
ENCODING_ERRORS = (BSONError, OverflowError)


def _encoding_error(message: str, email: str, error: Exception) -> InternalError:
    logger.error(f"{message}: document not encodable", extra={"email": email, "error": str(error)})
    return InternalError(message)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            email=doc['_id'],
            password=doc.get('password', ''),
            metadata=doc.get('metadata') or {},
        )

    def _bounded(self, ctx: OperationContext):
        """Check the context and bound the next driver call by its deadline."""
        return pymongo.timeout(ctx.check())

    def save(self, ctx: OperationContext, user: User) -> None:
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user.email,
            'password': user.password,
            'metadata': user.metadata,
            'created_at': now,
            'updated_at': now,
        }
        try:
            with self._bounded(ctx):
                self.collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            logger.warning("User save failed: email already exists", extra={"email": user.email})
            raise ConflictError(f"User {user.email} already exists") from e
        except ENCODING_ERRORS as e:
            raise _encoding_error("Failed to save user", user.email, e) from e
        except PyMongoError as e:
            raise _storage_error("Failed to save user", user.email, e) from e
        logger.info("User saved", extra={"email": user.email})

    def update_user(self, ctx: OperationContext, user: User) -> None:
        try:
            with self._bounded(ctx):
                result = self.collection.update_one(
                    {'_id': user.email},
                    {'$set': {'metadata': user.metadata, 'updated_at': datetime.now(timezone.utc)}},
                )
        except ENCODING_ERRORS as e:
            raise _encoding_error("Failed to update user", user.email, e) from e
        except PyMongoError as e:
            raise _storage_error("Failed to update user", user.email, e) from e
        if result.matched_count == 0:
            raise NotFoundError(f"User {user.email} not found")
        logger.debug("Updated user metadata", extra={"email": user.email})

    def retrieve_by_id(self, ctx: OperationContext, email: str) -> User:
        try:
            with self._bounded(ctx):
                doc = self.collection.find_one({'_id': email})
        except PyMongoError as e:
            raise _storage_error("Failed to retrieve user", email, e) from e
        if doc is None:
            raise NotFoundError(f"User {email} not found")
        return self._to_domain(doc)

    def update_password(self, ctx: OperationContext, email: str, password: str) -> None:
        try:
            with self._bounded(ctx):
                result = self.collection.update_one(
                    {'_id': email},
                    {'$set': {'password': password, 'updated_at': datetime.now(timezone.utc)}},
                )
        except ENCODING_ERRORS as e:
            raise _encoding_error("Failed to update password", email, e) from e
        except PyMongoError as e:
            raise _storage_error("Failed to update password", email, e) from e
        if result.matched_count == 0:
            raise NotFoundError(f"User {email} not found")
        logger.info("Updated password", extra={"email": email})
