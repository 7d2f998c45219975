"""Datasets API adapter."""

import structlog
from pydantic import ValidationError

from honeycomb_client.application.dto.datasets import Dataset
from honeycomb_client.domain.errors import DatasetExistsError, SerializationError
from honeycomb_client.domain.ports import DatasetsPort
from honeycomb_client.infrastructure.http.error_decoder import decode_error
from honeycomb_client.infrastructure.http.executor import RequestExecutor, url_encode_dataset

logger = structlog.get_logger()


class DatasetsAPI(DatasetsPort):
    """Datasets backed by the Honeycomb API."""

    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor

    async def list(self) -> list[Dataset]:
        return await self.executor.do("GET", "/1/datasets", response_type=list[Dataset])

    async def get(self, slug: str) -> Dataset:
        return await self.executor.do("GET", f"/1/datasets/{url_encode_dataset(slug)}", response_type=Dataset)

    async def create(self, dataset: Dataset) -> Dataset:
        """Create a new dataset.

        The API answers 200 with the existing dataset when the name is taken
        and 201 when it creates one; only the latter counts as success.

        Raises:
            DatasetExistsError: A dataset with this name already exists.
        """
        response = await self.executor.send("POST", "/1/datasets", dataset)

        if response.status_code == 200:
            logger.info("dataset_already_exists", dataset=dataset.name)
            raise DatasetExistsError(f"dataset {dataset.name!r} already exists")
        if response.status_code != 201:
            raise decode_error(response)

        try:
            return Dataset.model_validate_json(response.content)
        except ValidationError as e:
            raise SerializationError(f"failed to decode created dataset: {e}") from e

    async def update(self, dataset: Dataset) -> Dataset:
        path = f"/1/datasets/{url_encode_dataset(dataset.slug or '')}"
        return await self.executor.do("PUT", path, dataset, response_type=Dataset)

    async def delete(self, slug: str) -> None:
        await self.executor.do("DELETE", f"/1/datasets/{url_encode_dataset(slug)}")
