"""Pydantic configuration schema models for wardrobe specifications.

This module defines the schema for JSON wardrobe configuration files and
for edit scripts replayed against a configuration. It uses Pydantic v2 for
validation and serialization.

The WardrobeShape and SectionKey enums are reused from the domain layer to
keep a single definition of the allowed values.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wardrobes.domain.value_objects import SectionKey, WardrobeShape

# Supported schema versions for configuration files
# Version 1.0: Initial schema with sections, columns and shelf spacings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _check_schema_version(v: str) -> str:
    if v in SUPPORTED_VERSIONS:
        return v

    # Newer minor versions of a supported major version are accepted
    major_version = int(v.split(".")[0])
    supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
    if major_version in supported_majors:
        return v

    raise ValueError(
        f"Unsupported schema version '{v}'. "
        f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
    )


class ColumnConfig(BaseModel):
    """Configuration for a single column.

    Attributes:
        id: Stable column id. Generated from the section key when omitted.
        width: Column width in cm. When omitted for every column of a
            section, widths are laid out automatically.
        shelves: Number of evenly spaced shelves.
        spacings: Explicit gap heights from floor to ceiling. Takes
            precedence over ``shelves``.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    width: float | None = Field(default=None, gt=0)
    shelves: int | None = Field(default=None, ge=0)
    spacings: list[float] | None = Field(default=None, min_length=2)

    @field_validator("spacings")
    @classmethod
    def validate_spacings_non_negative(cls, v: list[float] | None) -> list[float] | None:
        """Reject negative gap heights."""
        if v is not None and any(s < 0 for s in v):
            raise ValueError("Shelf spacings cannot be negative")
        return v

    @model_validator(mode="after")
    def validate_shelves_match_spacings(self) -> "ColumnConfig":
        """Validate that shelves and spacings agree when both are set."""
        if self.shelves is not None and self.spacings is not None:
            if self.shelves != len(self.spacings) - 1:
                raise ValueError(
                    f"shelves ({self.shelves}) does not match the "
                    f"{len(self.spacings)} spacings given"
                )
        return self


class SectionConfig(BaseModel):
    """Configuration for a wardrobe section.

    A section can be configured in two ways:
    1. Implicit layout: give ``column_count`` (or nothing) and let the
       layout engine generate the columns.
    2. Explicit layout: list the ``columns``, with or without widths.

    Attributes:
        width: Section width in cm.
        depth: Section depth in cm.
        column_count: Requested column count, clamped into the feasible
            range for the section.
        columns: Explicit columns, left to right.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    depth: float = Field(default=60, gt=0)
    column_count: int | None = Field(default=None, ge=1)
    columns: list[ColumnConfig] | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def validate_columns(self) -> "SectionConfig":
        """Validate column count and width consistency."""
        if self.columns is None:
            return self

        if self.column_count is not None and self.column_count != len(self.columns):
            raise ValueError(
                f"column_count ({self.column_count}) does not match the "
                f"{len(self.columns)} columns given"
            )

        with_width = [c.width is not None for c in self.columns]
        if any(with_width) and not all(with_width):
            raise ValueError("Give a width for every column or for none of them")

        ids = [c.id for c in self.columns if c.id is not None]
        if len(ids) != len(set(ids)):
            raise ValueError("Column ids must be unique within a section")
        return self

    @property
    def has_explicit_widths(self) -> bool:
        return bool(self.columns) and all(c.width is not None for c in self.columns)


class WardrobeConfig(BaseModel):
    """Wardrobe dimensions and sections.

    Attributes:
        shape: Overall shape (linear, angle, forme_u).
        height: Overall height in cm, base bar included.
        thickness: Panel thickness in cm.
        base_bar_height: Plinth height in cm.
        sections: Sections by key. Must hold exactly the keys of the shape.
    """

    model_config = ConfigDict(extra="forbid")

    shape: WardrobeShape = WardrobeShape.LINEAR
    height: float = Field(default=180, gt=0)
    thickness: float = Field(default=2, gt=0)
    base_bar_height: float = Field(default=7, ge=0)
    sections: dict[SectionKey, SectionConfig]

    @model_validator(mode="after")
    def validate_sections_match_shape(self) -> "WardrobeConfig":
        """Validate that the section keys are those of the shape."""
        expected = set(self.shape.section_keys)
        if set(self.sections) != expected:
            names = ", ".join(k.value for k in self.shape.section_keys)
            raise ValueError(
                f"Shape '{self.shape.value}' requires exactly sections: {names}"
            )
        return self

    @model_validator(mode="after")
    def validate_interior_height(self) -> "WardrobeConfig":
        """Validate that the panels and base bar leave interior space."""
        if self.height - self.base_bar_height - 2 * self.thickness <= 0:
            raise ValueError(
                f"height ({self.height}) leaves no interior space above the base "
                f"bar ({self.base_bar_height}) and panels"
            )
        return self


class LimitsConfig(BaseModel):
    """Dimensional limits of the layout engine, in cm."""

    model_config = ConfigDict(extra="forbid")

    min_column_width: float = Field(default=30, gt=0)
    max_column_width: float = Field(default=120, gt=0)
    min_shelf_spacing: float = Field(default=10, gt=0)
    corner_clearance: float = Field(default=30, ge=0)
    min_section_width: float = Field(default=36, gt=0)
    max_section_width: float = Field(default=600, gt=0)
    min_section_depth: float = Field(default=20, gt=0)
    max_section_depth: float = Field(default=110, gt=0)

    @model_validator(mode="after")
    def validate_ranges(self) -> "LimitsConfig":
        """Validate that every maximum is at least its minimum."""
        pairs = [
            ("min_column_width", "max_column_width"),
            ("min_section_width", "max_section_width"),
            ("min_section_depth", "max_section_depth"),
        ]
        for low_name, high_name in pairs:
            if getattr(self, high_name) < getattr(self, low_name):
                raise ValueError(
                    f"{high_name} ({getattr(self, high_name)}) must be greater than "
                    f"or equal to {low_name} ({getattr(self, low_name)})"
                )
        return self


class WardrobeConfigSchema(BaseModel):
    """Root configuration model for wardrobe specifications.

    Example:
        >>> config = WardrobeConfigSchema(
        ...     schema_version="1.0",
        ...     wardrobe=WardrobeConfig(sections={"A": SectionConfig(width=60)}),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    wardrobe: WardrobeConfig
    limits: LimitsConfig = Field(default_factory=LimitsConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        return _check_schema_version(v)


# --- Edit scripts ---------------------------------------------------------


class _EditBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


class SetColumnCountEdit(_EditBase):
    op: Literal["set_column_count"]
    section: SectionKey
    count: int


class AddColumnEdit(_EditBase):
    op: Literal["add_column"]
    section: SectionKey


class RemoveColumnEdit(_EditBase):
    op: Literal["remove_column"]
    section: SectionKey


class SetColumnWidthEdit(_EditBase):
    op: Literal["set_column_width"]
    column: str
    width: float


class RedistributeColumnsEdit(_EditBase):
    op: Literal["redistribute_columns"]
    section: SectionKey


class MoveSeparatorEdit(_EditBase):
    op: Literal["move_separator"]
    section: SectionKey
    index: int = Field(..., ge=0)
    position: float


class SetSectionWidthEdit(_EditBase):
    op: Literal["set_section_width"]
    section: SectionKey
    width: float


class SetSectionDepthEdit(_EditBase):
    op: Literal["set_section_depth"]
    section: SectionKey
    depth: float


class SetShelfCountEdit(_EditBase):
    """Target is a column id or a merged corner key such as ``angle-ab``."""

    op: Literal["set_shelf_count"]
    target: str
    count: int


class EditSpacingEdit(_EditBase):
    op: Literal["edit_spacing"]
    target: str
    index: int = Field(..., ge=0)
    value: float


class RedistributeShelvesEdit(_EditBase):
    op: Literal["redistribute_shelves"]
    target: str


class SwitchShapeEdit(_EditBase):
    op: Literal["switch_shape"]
    shape: WardrobeShape


class UndoEdit(_EditBase):
    op: Literal["undo"]


EditOperation = Annotated[
    Union[
        SetColumnCountEdit,
        AddColumnEdit,
        RemoveColumnEdit,
        SetColumnWidthEdit,
        RedistributeColumnsEdit,
        MoveSeparatorEdit,
        SetSectionWidthEdit,
        SetSectionDepthEdit,
        SetShelfCountEdit,
        EditSpacingEdit,
        RedistributeShelvesEdit,
        SwitchShapeEdit,
        UndoEdit,
    ],
    Field(discriminator="op"),
]


class EditScriptSchema(BaseModel):
    """A sequence of edits replayed through the editor, in order."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    edits: list[EditOperation] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        return _check_schema_version(v)
