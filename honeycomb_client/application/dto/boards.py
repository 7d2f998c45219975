"""Board DTOs.

API docs: https://docs.honeycomb.io/api/boards-api/
"""

from pydantic import BaseModel, ConfigDict, Field

from honeycomb_client.application.dto.alerting import Tag
from honeycomb_client.domain.enums import BoardPanelType, BoardQueryStyle, LayoutGeneration


class BoardPanelPosition(BaseModel):
    """Position of a panel on the board grid."""

    model_config = ConfigDict(populate_by_name=True)

    x: int = Field(0, alias="x_coordinate")
    y: int = Field(0, alias="y_coordinate")
    height: int = 0
    width: int = 0


class ChartSettings(BaseModel):
    """Per-chart visualization settings."""

    chart_type: str | None = None
    chart_index: int = 0
    omit_missing_values: bool | None = None
    log_scale: bool | None = None


class BoardQueryVisualizationSettings(BaseModel):
    """Visualization settings of a query panel."""

    utc_xaxis: bool | None = None
    hide_markers: bool | None = None
    hide_hovers: bool | None = None
    overlaid_charts: bool | None = None
    hide_compare: bool | None = None
    charts: list[ChartSettings] | None = None


class BoardQueryPanel(BaseModel):
    """A query displayed on a board."""

    model_config = ConfigDict(populate_by_name=True)

    dataset: str | None = None
    query_id: str | None = None
    query_annotation_id: str | None = None
    visualization_settings: BoardQueryVisualizationSettings | None = None
    style: BoardQueryStyle | None = Field(None, alias="query_style")


class BoardSLOPanel(BaseModel):
    """An SLO displayed on a board."""

    slo_id: str | None = None


class BoardTextPanel(BaseModel):
    """Markdown text displayed on a board."""

    content: str | None = None


class BoardPanel(BaseModel):
    """A single panel on a board."""

    model_config = ConfigDict(populate_by_name=True)

    type: BoardPanelType | None = None
    position: BoardPanelPosition | None = None
    query_panel: BoardQueryPanel | None = None
    slo_panel: BoardSLOPanel | None = None
    text_panel: BoardTextPanel | None = None


class PresetFilter(BaseModel):
    """Column and alias of a preset board filter."""

    column: str | None = None
    alias: str | None = None


class BoardLinks(BaseModel):
    """Links returned by the board API."""

    board_url: str | None = None


class Board(BaseModel):
    """A Honeycomb board."""

    id: str | None = None
    name: str
    description: str | None = None
    type: str | None = None
    layout_generation: LayoutGeneration | None = None
    panels: list[BoardPanel] | None = None
    links: BoardLinks | None = None
    tags: list[Tag] | None = None
    preset_filters: list[PresetFilter] | None = None
