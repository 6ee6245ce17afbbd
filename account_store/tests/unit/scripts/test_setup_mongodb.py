"""Unit tests for the MongoDB setup script."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import CollectionInvalid, ServerSelectionTimeoutError

from account_store.scripts import setup_mongodb


def _mock_db(indexes: dict) -> MagicMock:
    collections = {}
    for name in ("users", "sessions"):
        collection = MagicMock()
        collection.create_index = AsyncMock()
        collection.index_information = AsyncMock(return_value=indexes.get(name, {}))
        collections[name] = collection
    db = MagicMock()
    db.__getitem__.side_effect = collections.__getitem__
    db.create_collection = AsyncMock()
    return db


class TestCreateCollections:
    @pytest.mark.asyncio
    async def test_existing_collections_are_tolerated(self) -> None:
        db = _mock_db({})
        db.create_collection.side_effect = CollectionInvalid("collection exists")

        await setup_mongodb.create_collections(db)

        assert db.create_collection.await_count == 2


class TestVerifyIndexes:
    @pytest.mark.asyncio
    async def test_all_present(self) -> None:
        db = _mock_db(
            {
                "users": {"_id_": {}, "idx_email_unique": {}},
                "sessions": {"_id_": {}, "idx_user_id_unique": {}},
            }
        )
        assert await setup_mongodb.verify_indexes(db) is True

    @pytest.mark.asyncio
    async def test_missing_index(self) -> None:
        db = _mock_db({"users": {"idx_email_unique": {}}})
        assert await setup_mongodb.verify_indexes(db) is False


class TestMain:
    @pytest.mark.asyncio
    async def test_missing_uri_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MONGODB_URI", raising=False)

        with patch.object(setup_mongodb, "load_dotenv"):
            assert await setup_mongodb.main() == 1

    @pytest.mark.asyncio
    async def test_unreachable_server_fails_and_closes(self) -> None:
        client = MagicMock()
        client.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("No servers found")
        )

        with patch.object(setup_mongodb, "load_dotenv"), patch.object(
            setup_mongodb, "create_client", return_value=client
        ):
            assert await setup_mongodb.main() == 1

        client.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        db = _mock_db(
            {
                "users": {"idx_email_unique": {}},
                "sessions": {"idx_user_id_unique": {}},
            }
        )
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1})

        with patch.object(setup_mongodb, "load_dotenv"), patch.object(
            setup_mongodb, "create_client", return_value=client
        ), patch.object(setup_mongodb, "get_database", return_value=db):
            assert await setup_mongodb.main() == 0

        db["users"].create_index.assert_awaited_once()
        client.close.assert_called_once()
