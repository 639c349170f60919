#!/usr/bin/env python3
"""
Purpose:
    Defines the ModelDefinition model: a named, read-only mapping of
    attribute name to Attribute, loadable from JSON or YAML files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from modelschema.core.annotated_types import AttributeName, ModelName
from modelschema.core.attribute.attribute import Attribute
from modelschema.core.constants import SUPPORTED_MODEL_EXT
from modelschema.core.utils import load_mapping_file


# --- Model --- #

class ModelDefinition(BaseModel):
    """
    A model's attribute metadata.

    Fields:
    -------
    name:
        Model identifier, normalized to lowercase and validated against
        `MODEL_NAME_ALLOWED_RE`.
    attributes:
        Attribute name -> Attribute. Values may be authored as full mappings
        or as shorthand type strings ("STRING(50)").

    Example file (YAML):
    --------------------
        name: user
        attributes:
          id: {type: INTEGER, allowNull: false}
          email: STRING(tiny)
          tags: {type: ARRAY(STRING), allowNull: true}
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: ModelName = Field(..., description="Model identifier (lowercased, validated).")
    attributes: Dict[AttributeName, Attribute] = Field(default_factory=dict, description="Attribute metadata by name.")

    # --- Convenience --- #

    def names(self) -> list[str]:
        """Attribute names in declaration order."""
        return list(self.attributes.keys())

    def get(self, name: str) -> Attribute | None:
        """Attribute by name, or None."""
        return self.attributes.get(name)

    # --- Construction --- #

    @classmethod
    def from_mapping(cls, name: str, attributes: Mapping[str, Any]) -> "ModelDefinition":
        """Build a definition from a plain mapping of name -> attribute payload."""
        return cls.model_validate({"name": name, "attributes": dict(attributes)})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ModelDefinition":
        """
        Load a ModelDefinition from a JSON or YAML file.

        A missing `name` defaults to the file stem.

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if the file extension is not supported or content is unparsable
            ValidationError: if the payload fails model validation
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"The file {str(p)!r} does not exist")
        if p.suffix.lower() not in SUPPORTED_MODEL_EXT:
            raise ValueError(
                f"Invalid model file extension for {p.name!r}; expected one of {sorted(SUPPORTED_MODEL_EXT)}"
            )
        data = load_mapping_file(p)
        data.setdefault("name", p.stem)
        return cls.model_validate(data)
