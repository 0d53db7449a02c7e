# eventsync/core/database.py
from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database

from eventsync.core.logger import get_logger

load_dotenv()

logger = get_logger("database")


def connect(mongo_uri: str, db_name: str, timeout_ms: int = 5000) -> Database:
    """
    Open a client and return the EventSync database handle.
    The connection itself is lazy; the first query is what actually dials out.
    """
    client = MongoClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms)
    logger.info("Using MongoDB database '%s'", db_name)
    return client[db_name]
