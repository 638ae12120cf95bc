"""MongoDB client setup."""

import structlog
from pymongo import MongoClient
from pymongo.database import Database

from sueta.config import Settings

logger = structlog.get_logger(__name__)

CONNECT_TIMEOUT_MS = 10_000


def create_client(settings: Settings) -> MongoClient:
    logger.info("Connecting to MongoDB", database=settings.MONGO_DATABASE)
    return MongoClient(
        settings.MONGO_URL,
        connectTimeoutMS=CONNECT_TIMEOUT_MS,
        serverSelectionTimeoutMS=CONNECT_TIMEOUT_MS,
        tz_aware=True,
    )


def get_database(client: MongoClient, settings: Settings) -> Database:
    return client[settings.MONGO_DATABASE]
