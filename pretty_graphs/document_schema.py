from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union, Any, Dict
from enum import Enum


class ChartToolType(str, Enum):
    """Known chart kinds.

    Keeps a canonical list but entries may use arbitrary strings.
    """

    BAR_CHART = "bar_chart"


def _tupleize_rows(data):
    """YAML has no tuples: turn [label, value(, opts)] rows into tuples."""
    if isinstance(data, list):
        return [tuple(row) if isinstance(row, list) else row for row in data]
    if isinstance(data, dict):
        return {k: tuple(v) if isinstance(v, list) else v for k, v in data.items()}
    return data


class ChartEntry(BaseModel):
    """Single entry in `charts[]`."""

    tool: Union[ChartToolType, str] = Field(
        ChartToolType.BAR_CHART,
        description="Chart kind (e.g. 'bar_chart')",
    )
    id: Optional[str] = Field(None, description="Chart id")
    data: Any = Field(
        default_factory=list,
        description="Chart data (pairs, numbers or label->value mapping)",
    )
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Chart options, layered over the document theme",
    )
    output: Optional[str] = Field(
        None,
        description="Output file name (defaults to <id>.svg)",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("data", mode="before")
    @classmethod
    def _rows_to_tuples(cls, v):
        return _tupleize_rows(v)

    @field_validator("options", mode="before")
    @classmethod
    def _options_default(cls, v):
        return {} if v is None else v

    @property
    def tool_name(self) -> str:
        return self.tool.value if isinstance(self.tool, ChartToolType) else str(self.tool)


class DocumentMetadata(BaseModel):
    """Top-level metadata object (`meta`)."""

    title: Optional[str] = Field(None, description="Document title")
    author: Optional[str] = Field(None, description="Document author")
    description: Optional[str] = Field(None, description="Brief description")

    model_config = ConfigDict(extra="allow")


class ChartDocument(BaseModel):
    """Top-level chart document read by `render.py`.

    Expected top-level keys: version, meta, theme, charts
    """

    version: int = Field(1, description="Document version")
    meta: DocumentMetadata = Field(
        default_factory=DocumentMetadata,
        description="Document metadata (meta)",
    )
    theme: Dict[str, Any] = Field(
        default_factory=dict,
        description="Default chart options shared by every chart",
    )
    charts: List[ChartEntry] = Field(
        default_factory=list,
        description="Ordered charts",
    )

    model_config = ConfigDict(extra="allow")

    @field_validator("meta", "theme", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return {} if v is None else v

    def get_chart_count(self) -> int:
        return len(self.charts)

    def get_tools_used(self) -> List[str]:
        return sorted({chart.tool_name for chart in self.charts})

    def options_for(self, chart: ChartEntry) -> Dict[str, Any]:
        """Theme defaults overlaid with the chart's own options."""
        return {**self.theme, **chart.options}


# Backwards-compatible export name
Schema = ChartDocument
