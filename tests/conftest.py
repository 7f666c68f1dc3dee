"""
Shared fixtures: in-memory SQLite Tortoise setup and a repository with cheap argon2 parameters.
"""

import pytest
import pytest_asyncio
from tortoise import Tortoise, connections

from marketplace_common.config import EncryptionConfig, TortoiseConfig
from marketplace_common.repositories import UserRepository
from marketplace_common.services import EncryptionService


@pytest.fixture
def encryption_config():
    return EncryptionConfig(time_cost=1, memory_cost=1024, parallelism=1, hash_len=32, salt_len=16)


@pytest.fixture
def encryption_service(encryption_config):
    return EncryptionService(encryption_config)


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database per test."""
    config = TortoiseConfig(db_url="sqlite://:memory:")
    await Tortoise.init(config=config.get_tortoise_orm())
    await Tortoise.generate_schemas()

    yield

    await connections.close_all()


@pytest_asyncio.fixture
async def repository(db, encryption_service):
    return UserRepository(encryption_service=encryption_service)
