"""Grammar constants for field annotations."""

from __future__ import annotations

import re

# Metadata key under which a dataclass field stores its annotation.
ENV_TAG = "env"

# Separates the environment name from validator clauses and clauses from each other.
ENV_SEP = ","

# An annotation equal to this disables binding for the field.
SKIP_TAG = "-"

REQUIRED_FLAG = "required"
EXPECTED_VALUES_FLAG = "expectedValues"

# name[=args], e.g. "required" or "expectedValues=development production"
VALIDATOR_CLAUSE_RE = re.compile(r"\s*(?P<name>\w+)\s*(?:=(?P<args>.*))?", re.DOTALL)

__all__: tuple[str, ...] = (
    "ENV_SEP",
    "ENV_TAG",
    "EXPECTED_VALUES_FLAG",
    "REQUIRED_FLAG",
    "SKIP_TAG",
    "VALIDATOR_CLAUSE_RE",
)
