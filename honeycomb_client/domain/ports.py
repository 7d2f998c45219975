"""Ports (interfaces) for the API resource adapters."""

from abc import ABC, abstractmethod

from honeycomb_client.application.dto.alerting import SLO, BurnAlert, Recipient, Trigger
from honeycomb_client.application.dto.auth import AuthMetadata
from honeycomb_client.application.dto.boards import Board
from honeycomb_client.application.dto.datasets import Column, Dataset, DerivedColumn
from honeycomb_client.application.dto.markers import Marker
from honeycomb_client.application.dto.queries import QueryAnnotation, QueryResult, QueryResultRequest
from honeycomb_client.application.dto.query_spec import QuerySpec


class AuthPort(ABC):
    """Port for listing the authorizations of the API key."""

    @abstractmethod
    async def list(self) -> AuthMetadata:
        """List all authorizations for this API key in this team and environment."""


class BoardsPort(ABC):
    """Port for boards."""

    @abstractmethod
    async def list(self) -> list[Board]:
        """List all boards."""

    @abstractmethod
    async def get(self, board_id: str) -> Board:
        """Get a board by its ID."""

    @abstractmethod
    async def create(self, board: Board) -> Board:
        """Create a new board. The ID may not be set."""

    @abstractmethod
    async def update(self, board: Board) -> Board:
        """Update an existing board."""

    @abstractmethod
    async def delete(self, board_id: str) -> None:
        """Delete a board."""


class ColumnsPort(ABC):
    """Port for dataset columns."""

    @abstractmethod
    async def list(self, dataset: str) -> list[Column]:
        """List all columns in a dataset."""

    @abstractmethod
    async def get(self, dataset: str, column_id: str) -> Column:
        """Get a column by its ID."""

    @abstractmethod
    async def get_by_key_name(self, dataset: str, key_name: str) -> Column:
        """Search a column by its key name."""

    @abstractmethod
    async def create(self, dataset: str, column: Column) -> Column:
        """Create a new column. The key name must be unique in the dataset."""

    @abstractmethod
    async def update(self, dataset: str, column: Column) -> Column:
        """Update an existing column."""

    @abstractmethod
    async def delete(self, dataset: str, column_id: str) -> None:
        """Delete a column."""


class DatasetsPort(ABC):
    """Port for datasets."""

    @abstractmethod
    async def list(self) -> list[Dataset]:
        """List all datasets."""

    @abstractmethod
    async def get(self, slug: str) -> Dataset:
        """Get a dataset by its slug."""

    @abstractmethod
    async def create(self, dataset: Dataset) -> Dataset:
        """Create a new dataset, raising DatasetExistsError if it already exists."""

    @abstractmethod
    async def update(self, dataset: Dataset) -> Dataset:
        """Update an existing dataset."""

    @abstractmethod
    async def delete(self, slug: str) -> None:
        """Delete a dataset by its slug."""


class DerivedColumnsPort(ABC):
    """Port for derived columns."""

    @abstractmethod
    async def list(self, dataset: str) -> list[DerivedColumn]:
        """List all derived columns in a dataset."""

    @abstractmethod
    async def get(self, dataset: str, column_id: str) -> DerivedColumn:
        """Get a derived column by its ID."""

    @abstractmethod
    async def get_by_alias(self, dataset: str, alias: str) -> DerivedColumn:
        """Search a derived column by its alias."""

    @abstractmethod
    async def create(self, dataset: str, column: DerivedColumn) -> DerivedColumn:
        """Create a new derived column. The alias must be unique in the dataset."""

    @abstractmethod
    async def update(self, dataset: str, column: DerivedColumn) -> DerivedColumn:
        """Update an existing derived column."""

    @abstractmethod
    async def delete(self, dataset: str, column_id: str) -> None:
        """Delete a derived column."""


class MarkersPort(ABC):
    """Port for markers."""

    @abstractmethod
    async def list(self, dataset: str) -> list[Marker]:
        """List all markers in a dataset."""

    @abstractmethod
    async def get(self, dataset: str, marker_id: str) -> Marker:
        """Get a marker by its ID."""

    @abstractmethod
    async def create(self, dataset: str, marker: Marker) -> Marker:
        """Create a new marker."""

    @abstractmethod
    async def update(self, dataset: str, marker: Marker) -> Marker:
        """Update an existing marker."""

    @abstractmethod
    async def delete(self, dataset: str, marker_id: str) -> None:
        """Delete a marker."""


class QueriesPort(ABC):
    """Port for saved queries."""

    @abstractmethod
    async def get(self, dataset: str, query_id: str) -> QuerySpec:
        """Get a query by its ID."""

    @abstractmethod
    async def create(self, dataset: str, query: QuerySpec) -> QuerySpec:
        """Create a new query. The ID may not be set."""


class QueryAnnotationsPort(ABC):
    """Port for query annotations."""

    @abstractmethod
    async def list(self, dataset: str) -> list[QueryAnnotation]:
        """List all query annotations in a dataset."""

    @abstractmethod
    async def get(self, dataset: str, annotation_id: str) -> QueryAnnotation:
        """Get a query annotation by its ID."""

    @abstractmethod
    async def create(self, dataset: str, annotation: QueryAnnotation) -> QueryAnnotation:
        """Create a new query annotation."""

    @abstractmethod
    async def update(self, dataset: str, annotation: QueryAnnotation) -> QueryAnnotation:
        """Update an existing query annotation."""

    @abstractmethod
    async def delete(self, dataset: str, annotation_id: str) -> None:
        """Delete a query annotation."""


class QueryResultsPort(ABC):
    """Port for query results."""

    @abstractmethod
    async def create(self, dataset: str, request: QueryResultRequest) -> QueryResult:
        """Start running a saved query."""

    @abstractmethod
    async def get(self, dataset: str, result_id: str, *, timeout: float | None = None) -> QueryResult:
        """Get a query result, waiting until it is complete."""


class TriggersPort(ABC):
    """Port for triggers."""

    @abstractmethod
    async def list(self, dataset: str) -> list[Trigger]:
        """List all triggers in a dataset."""

    @abstractmethod
    async def get(self, dataset: str, trigger_id: str) -> Trigger:
        """Get a trigger by its ID."""

    @abstractmethod
    async def create(self, dataset: str, trigger: Trigger) -> Trigger:
        """Create a new trigger."""

    @abstractmethod
    async def update(self, dataset: str, trigger: Trigger) -> Trigger:
        """Update an existing trigger."""

    @abstractmethod
    async def delete(self, dataset: str, trigger_id: str) -> None:
        """Delete a trigger."""


class SLOsPort(ABC):
    """Port for SLOs."""

    @abstractmethod
    async def list(self, dataset: str) -> list[SLO]:
        """List all SLOs in a dataset."""

    @abstractmethod
    async def get(self, dataset: str, slo_id: str) -> SLO:
        """Get an SLO by its ID."""

    @abstractmethod
    async def create(self, dataset: str, slo: SLO) -> SLO:
        """Create a new SLO."""

    @abstractmethod
    async def update(self, dataset: str, slo: SLO) -> SLO:
        """Update an existing SLO."""

    @abstractmethod
    async def delete(self, dataset: str, slo_id: str) -> None:
        """Delete an SLO."""


class BurnAlertsPort(ABC):
    """Port for SLO burn alerts."""

    @abstractmethod
    async def list_for_slo(self, dataset: str, slo_id: str) -> list[BurnAlert]:
        """List all burn alerts of an SLO."""

    @abstractmethod
    async def get(self, dataset: str, alert_id: str) -> BurnAlert:
        """Get a burn alert by its ID."""

    @abstractmethod
    async def create(self, dataset: str, alert: BurnAlert) -> BurnAlert:
        """Create a new burn alert."""

    @abstractmethod
    async def update(self, dataset: str, alert: BurnAlert) -> BurnAlert:
        """Update an existing burn alert."""

    @abstractmethod
    async def delete(self, dataset: str, alert_id: str) -> None:
        """Delete a burn alert."""


class RecipientsPort(ABC):
    """Port for notification recipients."""

    @abstractmethod
    async def list(self) -> list[Recipient]:
        """List all recipients."""

    @abstractmethod
    async def get(self, recipient_id: str) -> Recipient:
        """Get a recipient by its ID."""

    @abstractmethod
    async def create(self, recipient: Recipient) -> Recipient:
        """Create a new recipient."""

    @abstractmethod
    async def update(self, recipient: Recipient) -> Recipient:
        """Update an existing recipient."""

    @abstractmethod
    async def delete(self, recipient_id: str) -> None:
        """Delete a recipient."""
