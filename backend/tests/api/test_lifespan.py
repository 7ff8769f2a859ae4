"""Lifespan: store engine created on startup and disposed on shutdown."""

import fitness_api.infrastructure.database as db_module
from fitness_api.main import create_app


async def test_lifespan_opens_and_closes_store(settings):
    app = create_app(
        settings.model_copy(update={"database_create_tables": True}),
    )

    async with app.router.lifespan_context(app):
        manager = db_module.db_manager
        assert manager is not None
        assert await manager.health_check()

    assert db_module.db_manager is None
