from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ColumnKind(str, Enum):
    numeric = "numeric"
    categorical = "categorical"


class ChartKind(str, Enum):
    bar = "bar"
    line = "line"
    pie = "pie"


class Dataset(BaseModel):
    name: str = Field(min_length=1)
    rows: list[dict[str, Any]] = Field(default_factory=list)


class ColumnProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: ColumnKind


class DatasetSummary(BaseModel):
    row_count: int = Field(ge=0)
    column_count: int = Field(ge=0)
    numeric_column_count: int = Field(ge=0)
    categorical_column_count: int = Field(ge=0)
    columns: list[ColumnProfile]


class _ColumnStatisticsBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    column: str
    count: int = Field(ge=0)
    empty_count: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def completeness(self) -> float:
        """Share of rows holding a usable value for this column."""
        total = self.count + self.empty_count
        if total == 0:
            return 0.0
        return self.count / total


class NumericStatistics(_ColumnStatisticsBase):
    type: Literal["numeric"] = "numeric"

    min: float
    max: float
    range: float
    sum: float
    mean: float
    median: float
    std_dev: float = Field(ge=0)
    q1: float
    q3: float


class FrequencyEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    count: int = Field(ge=1)


class CategoricalStatistics(_ColumnStatisticsBase):
    type: Literal["categorical"] = "categorical"

    unique_count: int = Field(ge=0)
    mode: str | None = None
    mode_frequency: int = Field(default=0, ge=0)
    frequencies: list[FrequencyEntry] = Field(default_factory=list)


ColumnStatistics = Annotated[
    NumericStatistics | CategoricalStatistics,
    Field(discriminator="type"),
]


class ChartSeries(BaseModel):
    kind: ChartKind
    x_field: str | None = None
    y_fields: list[str] = Field(default_factory=list)
    rows: list[dict[str, str | float]] = Field(default_factory=list)
    notices: list[str] = Field(default_factory=list)


class ColumnAnalysis(BaseModel):
    dataset_name: str
    column: str
    kind: ColumnKind
    statistics: ColumnStatistics | None = None
