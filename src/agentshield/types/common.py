"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["critical", "high", "medium", "info"]
Confidence: TypeAlias = Literal["definite", "likely", "possible"]
ScoringMode: TypeAlias = Literal["dimensional", "flat"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
