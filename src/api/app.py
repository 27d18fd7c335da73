"""Litestar application exposing the leaderboards and the profile correction form."""

from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.datastructures import State
from loguru import logger

from api.routes import DocumentController, ProfileController
from application.log import setup_logging
from application.scheduler import RefreshScheduler
from application.settings import Settings
from infrastructure.document_store import DocumentStore
from infrastructure.http_client import AsyncHTTPClient
from services import MergeService, UpdateService, create_services


def create_app(
    settings: Settings | None = None,
    *,
    merge_service: MergeService | None = None,
    update_service: UpdateService | None = None,
    start_scheduler: bool = True,
) -> Litestar:
    """Build the app. Services can be injected for tests."""
    settings = settings or Settings.from_env()

    http_client = None
    if merge_service is None or update_service is None:
        http_client = AsyncHTTPClient(timeout=settings.request_timeout)
        merge_service, update_service = create_services(settings, http_client)

    scheduler = RefreshScheduler(merge_service, settings.refresh_interval)

    async def on_startup(app: Litestar) -> None:
        if not settings.admin_password:
            logger.warning("ADMIN_PASSWORD is not set, profile updates are disabled")
        if start_scheduler:
            scheduler.start()

    async def on_shutdown(app: Litestar) -> None:
        await scheduler.stop()
        if http_client is not None:
            await http_client.close()

    return Litestar(
        route_handlers=[DocumentController, ProfileController],
        cors_config=CORSConfig(allow_origins=["*"]),
        state=State(
            {
                "settings": settings,
                "document_store": DocumentStore(settings.documents_dir),
                "update_service": update_service,
                "scheduler": scheduler,
            }
        ),
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
    )


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logger.info(f"Server is running at http://{settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
