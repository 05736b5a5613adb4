"""Table configuration models.

A :class:`TableConfig` describes a whole table up front, as an alternative
to configuring a :class:`~colonnade.table.Colonnade` call by call.  Field
names are snake_case with camelCase aliases so configs can be kept in JSON.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from colonnade.column import Column
from colonnade.types import Alignment, VerticalAlignment


class ColumnConfig(BaseModel):
    """Settings for one column.  Unset fields keep the column's defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    alignment: Alignment | None = None
    vertical_alignment: VerticalAlignment | None = Field(default=None, alias="verticalAlignment")
    left_margin: int | None = Field(default=None, ge=0, alias="leftMargin")
    priority: int | None = Field(default=None, ge=0)
    min_width: int | None = Field(default=None, ge=0, alias="minWidth")
    max_width: int | None = Field(default=None, ge=0, alias="maxWidth")
    padding_left: int | None = Field(default=None, ge=0, alias="paddingLeft")
    padding_right: int | None = Field(default=None, ge=0, alias="paddingRight")
    padding_top: int | None = Field(default=None, ge=0, alias="paddingTop")
    padding_bottom: int | None = Field(default=None, ge=0, alias="paddingBottom")
    hyphenate: bool | None = None


class TableConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    width: int = Field(ge=0)
    columns: list[ColumnConfig]
    defaults: ColumnConfig | None = None
    spaces_between_rows: int = Field(default=0, ge=0, alias="spacesBetweenRows")
    pad_short_rows: bool = Field(default=True, alias="padShortRows")
    keep_nbsp: bool = Field(default=False, alias="keepNbsp")


def apply_column_config(column: Column, config: ColumnConfig) -> Column:
    """Copy the fields set in *config* onto *column*.

    Bounds are applied min first, after clearing the old ones when both are
    given, so a config that raises both limits past the current ones works.
    """
    if config.alignment is not None:
        column.set_alignment(config.alignment)
    if config.vertical_alignment is not None:
        column.set_vertical_alignment(config.vertical_alignment)
    if config.left_margin is not None:
        column.set_left_margin(config.left_margin)
    if config.priority is not None:
        column.set_priority(config.priority)
    if config.min_width is not None and config.max_width is not None:
        column.clear_limits()
    if config.min_width is not None:
        column.set_min_width(config.min_width)
    if config.max_width is not None:
        column.set_max_width(config.max_width)
    if config.padding_left is not None:
        column.set_padding_left(config.padding_left)
    if config.padding_right is not None:
        column.set_padding_right(config.padding_right)
    if config.padding_top is not None:
        column.set_padding_top(config.padding_top)
    if config.padding_bottom is not None:
        column.set_padding_bottom(config.padding_bottom)
    if config.hyphenate is not None:
        column.set_hyphenate(config.hyphenate)
    return column


def load_config(path: str | Path) -> TableConfig:
    """Read a JSON table configuration from *path*."""
    return TableConfig.model_validate_json(Path(path).read_text())
