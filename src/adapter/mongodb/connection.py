import os
import logging
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are too chatty below WARNING
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'users')
USERS_COLLECTION_NAME = 'users'

_client_cache: MongoClient | None = None
_connection_failed = False


def reset_client():
    global _client_cache, _connection_failed
    _client_cache = None
    _connection_failed = False


def get_mongodb_client() -> MongoClient | None:
    """Get a MongoDB client, reusing the cached one while it answers ping.

    A missing MONGO_URL or a failed first connection is treated as a
    configuration problem: later calls return None without retrying until
    reset_client() is called.

    Returns:
        MongoDB client or None if connection fails
    """
    global _client_cache, _connection_failed

    if _client_cache is not None:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            _client_cache = None
            logger.debug("[MONGODB] Cached client failed ping, reconnecting")

    if _connection_failed:
        return None

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured")
        _connection_failed = True
        return None

    try:
        client = MongoClient(
            MONGO_URL,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            maxPoolSize=10,
            retryWrites=True,
            retryReads=True,
        )
        client.admin.command('ping')
    except PyMongoError as e:
        logger.error("[MONGODB] Initial connection failed", extra={"error": str(e)[:200]})
        _connection_failed = True
        return None

    logger.info(f"[MONGODB] Connected successfully to {DATABASE_NAME}")
    _client_cache = client
    return client


def get_database() -> Database | None:
    client = get_mongodb_client()
    if client is None:
        return None
    return client[DATABASE_NAME]
