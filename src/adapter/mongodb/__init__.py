from adapter.mongodb.connection import (
    DATABASE_NAME,
    USERS_COLLECTION_NAME,
    get_database,
    get_mongodb_client,
)
from adapter.mongodb.user_repository import MongoUserRepository

__all__ = [
    'DATABASE_NAME',
    'USERS_COLLECTION_NAME',
    'MongoUserRepository',
    'get_database',
    'get_mongodb_client',
]
