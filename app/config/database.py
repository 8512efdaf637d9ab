"""
Database configuration and connection management.
Handles MongoDB connection lifecycle and hands the products collection to the stores.
"""
import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from .settings import get_settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the process-wide MongoDB client.

    The client is created once on the first ``connect()`` and reused until
    ``disconnect()``; the stores only consume the collection it exposes.
    """

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish connection to MongoDB."""
        if self.client is not None:
            return

        settings = get_settings()
        try:
            logger.info("Connecting to MongoDB...")

            self.client = AsyncIOMotorClient(
                settings.mongodb_url,
                serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
                connectTimeoutMS=settings.connect_timeout_ms,
                socketTimeoutMS=settings.socket_timeout_ms,
                maxPoolSize=settings.max_pool_size,
                minPoolSize=settings.min_pool_size,
                retryWrites=settings.retry_writes,
                directConnection=settings.direct_connection,
            )
            self.database = self.client[settings.database_name]

            await self.client.admin.command('ping')
            logger.info("Connected to MongoDB successfully")

        except Exception as db_error:
            # The app still starts; requests needing the store get a 503.
            logger.warning(f"MongoDB connection failed: {db_error}")
            await self.disconnect()

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self.database = None

    async def create_indexes(self) -> None:
        """Create the indexes used by product listing and review lookups."""
        if self.database is None:
            logger.warning("Database not connected, skipping index creation")
            return

        try:
            products = self.get_products_collection()
            await products.create_index("productName")
            await products.create_index("reviews._id")
            logger.info("Database indexes created successfully")

        except Exception as index_error:
            logger.warning(f"Failed to create indexes: {index_error}")

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self.database is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.database

    def get_products_collection(self) -> AsyncIOMotorCollection:
        """Get the collection holding product documents."""
        return self.get_database()[get_settings().products_collection]

    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self.database is not None


# Global database manager instance
db_manager = DatabaseManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for database connection."""
    logger.info("Starting up application...")
    await db_manager.connect()
    await db_manager.create_indexes()
    app.state.db_manager = db_manager

    yield

    await db_manager.disconnect()


def get_database_manager() -> DatabaseManager:
    """Get database manager instance."""
    return db_manager
