"""Dataset, column and derived column DTOs."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from honeycomb_client.domain.enums import ColumnType


class DatasetSettings(BaseModel):
    """Dataset settings."""

    # Defaults to true server-side, cannot be set on creation
    delete_protected: bool | None = None


class Dataset(BaseModel):
    """A Honeycomb dataset.

    API docs: https://docs.honeycomb.io/api/datasets/
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str | None = None
    slug: str | None = None
    expand_json_depth: int | None = None
    settings: DatasetSettings | None = None
    # Read only
    last_written_at: datetime | None = None
    created_at: datetime | None = None


class Column(BaseModel):
    """A column in a dataset.

    API docs: https://docs.honeycomb.io/api/columns/
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    key_name: str
    hidden: bool | None = None
    description: str | None = None
    # Defaults to string server-side
    type: ColumnType | None = None
    # Read only
    last_written_at: datetime | None = Field(None, alias="last_written")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DerivedColumn(BaseModel):
    """A derived column, a named expression over event fields.

    API docs: https://docs.honeycomb.io/api/derived_columns/
    """

    id: str | None = None
    # Alias and expression cannot be updated
    alias: str
    expression: str
    description: str | None = None
