#!/usr/bin/env python3
"""
MongoDB initialization script for the account store.

Creates the users and sessions collections and their unique indexes.

Usage:
    python -m account_store.scripts.setup_mongodb
"""

import asyncio
import sys
from typing import Any

import structlog
from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import CollectionInvalid, PyMongoError

from account_store.config import get_mongodb_database
from account_store.domain.errors import ConfigurationError
from account_store.infrastructure.mongodb import (
    MongoUserSessionRepository,
    create_client,
    get_database,
)
from account_store.logging_config import configure_logging

logger = structlog.get_logger(__name__)

EXPECTED_INDEXES = {
    MongoUserSessionRepository.USERS_COLLECTION: ["idx_email_unique"],
    MongoUserSessionRepository.SESSIONS_COLLECTION: ["idx_user_id_unique"],
}


async def create_collections(db: AsyncIOMotorDatabase[dict[str, Any]]) -> None:
    """Create the account collections if missing."""
    for collection_name in EXPECTED_INDEXES:
        try:
            await db.create_collection(collection_name)
            logger.info("Created collection", collection=collection_name)
        except CollectionInvalid:
            logger.info("Collection already exists", collection=collection_name)


async def verify_indexes(db: AsyncIOMotorDatabase[dict[str, Any]]) -> bool:
    """Check every expected index exists.

    Returns:
        True if all indexes are present
    """
    all_present = True
    for collection_name, index_names in EXPECTED_INDEXES.items():
        existing = await db[collection_name].index_information()
        for index_name in index_names:
            if index_name in existing:
                logger.info("Index present", collection=collection_name, index=index_name)
            else:
                logger.error("Index missing", collection=collection_name, index=index_name)
                all_present = False
    return all_present


async def main() -> int:
    """Main setup function."""
    load_dotenv()

    try:
        client = create_client()
    except ConfigurationError as e:
        logger.error("Setup failed", error=str(e))
        return 1

    logger.info("Account store setup starting", database=get_mongodb_database())

    try:
        await client.admin.command("ping")
        logger.info("MongoDB connection successful")

        db = get_database(client)
        await create_collections(db)
        await MongoUserSessionRepository(db).ensure_indexes()

        if not await verify_indexes(db):
            return 1

        logger.info("Account store setup completed")
        return 0

    except PyMongoError as e:
        logger.error("Setup failed", error=str(e))
        return 1

    finally:
        client.close()


if __name__ == "__main__":
    configure_logging()

    exit_code = asyncio.run(main())
    sys.exit(exit_code)
