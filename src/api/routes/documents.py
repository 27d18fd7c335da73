"""API routes serving merged leaderboard documents."""

from litestar import Controller, MediaType, Response, get
from litestar.datastructures import State
from litestar.exceptions import NotFoundException
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from domain.exceptions import DocumentReadFailed


def _document_response(state: State, dataset: str) -> Response[bytes]:
    if dataset not in state.settings.datasets:
        raise NotFoundException(f"Unknown dataset: {dataset}")

    document_store = state.document_store
    if not document_store.exists(dataset):
        raise NotFoundException(f"No data yet for dataset: {dataset}")

    try:
        content = document_store.read_bytes(dataset)
    except DocumentReadFailed as e:
        logger.error(str(e))
        raise NotFoundException(f"No data available for dataset: {dataset}") from e

    return Response(content=content, media_type=MediaType.JSON, status_code=HTTP_200_OK)


class DocumentController(Controller):
    """Controller for leaderboard documents."""

    path = "/"

    @get("/data/{dataset:str}")
    async def get_document(self, state: State, dataset: str) -> Response[bytes]:
        """
        Get the merged leaderboard of a dataset.

        Path parameters:
        - dataset: Dataset name (e.g., "September")
        """
        logger.debug(f"API request for document: dataset={dataset}")
        return _document_response(state, dataset)

    # Routes kept from the original deployment.

    @get("/dataSep")
    async def get_september(self, state: State) -> Response[bytes]:
        return _document_response(state, "September")

    @get("/dataJan")
    async def get_january(self, state: State) -> Response[bytes]:
        return _document_response(state, "January")

    @get("/dataSecond")
    async def get_second(self, state: State) -> Response[bytes]:
        return _document_response(state, "Second")
