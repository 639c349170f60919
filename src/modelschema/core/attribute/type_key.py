#!/usr/bin/env python3
"""
Purpose:
    Defines the TypeKey enumeration of canonical attribute type identifiers,
    along with helpers for normalizing and parsing raw type keys.
"""

from __future__ import annotations

from enum import Enum


class TypeKey(str, Enum):
    """
    Canonical type identifiers understood by the type registry.

    Values are the uppercase keys used by the model's column types. Anything
    not listed here has no transform and resolves to the loose "any" schema.
    """

    ARRAY = "ARRAY"
    BIGINT = "BIGINT"
    BLOB = "BLOB"
    BOOLEAN = "BOOLEAN"
    CHAR = "CHAR"
    CIDR = "CIDR"
    CITEXT = "CITEXT"
    DATE = "DATE"
    DATEONLY = "DATEONLY"
    DECIMAL = "DECIMAL"
    # The key DOUBLE columns carry
    DOUBLE_PRECISION = "DOUBLE PRECISION"
    ENUM = "ENUM"
    FLOAT = "FLOAT"
    INET = "INET"
    INTEGER = "INTEGER"
    JSON = "JSON"
    JSONB = "JSONB"
    MACADDR = "MACADDR"
    MEDIUMINT = "MEDIUMINT"
    NUMBER = "NUMBER"
    REAL = "REAL"
    SMALLINT = "SMALLINT"
    STRING = "STRING"
    TEXT = "TEXT"
    TIME = "TIME"
    TINYINT = "TINYINT"
    UUID = "UUID"
    UUIDV1 = "UUIDV1"
    UUIDV4 = "UUIDV4"
    VIRTUAL = "VIRTUAL"

    # --- Parsing helpers --- #

    @staticmethod
    def normalize(value: object) -> str:
        """
        Canonical text form of a raw key: trimmed, uppercased, inner
        whitespace collapsed to single spaces.

        >>> TypeKey.normalize("  double   precision ")
        'DOUBLE PRECISION'
        """
        return " ".join(str(value).split()).upper()

    @classmethod
    def try_parse(cls, value: str | TypeKey | None) -> TypeKey | None:
        """
        Coerce arbitrary input to a `TypeKey`, or None when unknown.

        Examples
        --------
        >>> TypeKey.try_parse(" string ")
        <TypeKey.STRING: 'STRING'>
        >>> TypeKey.try_parse("GEOMETRY") is None
        True
        """
        if isinstance(value, TypeKey):
            return value
        if value is None:
            return None
        try:
            return cls(cls.normalize(value))
        except ValueError:
            return None
