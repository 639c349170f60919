#!/usr/bin/env python3
"""
Purpose:
    Defines BuildOptions, the options recognized by the model schema builder.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BuildOptions(BaseModel):
    """
    Options for `build_schema`.

    Fields
    ------
    always_required:
        Mark every included attribute as required, regardless of nullability.
        Also accepted as `alwaysRequired`.
    attributes:
        Explicit ordered allow-list. None means every attribute of the model.
    exclude:
        Names removed from the candidate list.
    private:
        Same as `exclude`; only used when `exclude` is not given.

    Unrecognized keys are ignored.

    Example
    -------
    >>> BuildOptions.coerce({"alwaysRequired": True, "exclude": ["secret"], "pretty": 1})
    BuildOptions(always_required=True, attributes=None, exclude=['secret'], private=None)
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    always_required: bool = Field(default=False, alias="alwaysRequired")
    attributes: Optional[List[str]] = Field(default=None, description="Ordered allow-list of attribute names.")
    exclude: Optional[List[str]] = Field(default=None, description="Attribute names to leave out.")
    private: Optional[List[str]] = Field(default=None, description="Fallback for `exclude`.")

    @classmethod
    def coerce(cls, value: Union[BuildOptions, Mapping[str, Any], None]) -> BuildOptions:
        """Accept a BuildOptions, a plain mapping, or None (all defaults)."""
        if isinstance(value, BuildOptions):
            return value
        if value is None:
            return cls()
        return cls.model_validate(dict(value))

    @property
    def excluded(self) -> List[str]:
        """Effective exclusion list (`exclude` wins over `private`, even when empty)."""
        if self.exclude is not None:
            return list(self.exclude)
        if self.private is not None:
            return list(self.private)
        return []
