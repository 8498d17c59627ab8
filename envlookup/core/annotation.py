"""Parsing of field annotations such as ``"ENV,required,expectedValues=dev prod"``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from envlookup.config import ENV_SEP, SKIP_TAG, VALIDATOR_CLAUSE_RE
from envlookup.core.errors import ErrorKind
from envlookup.core.validators import Validator, ValidatorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatorSpec:
    name: str
    args: str = ""


@dataclass(frozen=True)
class ParseProblem:
    """A validator clause that could not be turned into a validator."""

    kind: ErrorKind
    message: str


@dataclass
class AnnotationSpec:
    """Parsed annotation of one field.

    Attributes:
        env_name: Environment variable name; empty when the field is to be ignored.
        validators: Validator instances in declared order, freshly built.
        specs: The clauses the validators were built from.
        problems: Unknown or malformed clauses, in declared order.
    """

    env_name: str = ""
    validators: list[Validator] = field(default_factory=list)
    specs: list[ValidatorSpec] = field(default_factory=list)
    problems: list[ParseProblem] = field(default_factory=list)

    @property
    def ignored(self) -> bool:
        return self.env_name == ""


def split_tag(tag: str, sep: str = ENV_SEP) -> tuple[str, list[str]]:
    """Split an annotation into its environment name and raw validator clauses."""
    if tag in ("", SKIP_TAG):
        return "", []

    env_name, found, options = tag.partition(sep)
    if not found:
        return tag, []
    return env_name, options.split(sep)


def parse_clause(clause: str) -> ValidatorSpec | None:
    """Match one clause against ``name[=args]``; ``None`` if it does not fit."""
    match = VALIDATOR_CLAUSE_RE.fullmatch(clause)
    if match is None:
        return None
    return ValidatorSpec(name=match.group("name"), args=match.group("args") or "")


def parse_tag(
    tag: str, registry: ValidatorRegistry, sep: str = ENV_SEP
) -> AnnotationSpec:
    """Parse an annotation and instantiate its validators through ``registry``.

    Unknown validator names and clauses that do not match the grammar are reported in
    ``problems`` instead of raising; the remaining clauses are still instantiated.

    Args:
        tag: Raw annotation text.
        registry: Source of validator factories.
        sep: Clause separator.

    Returns:
        The parsed annotation. ``env_name`` is empty for an empty or ``"-"`` tag.
    """
    env_name, clauses = split_tag(tag, sep)
    spec = AnnotationSpec(env_name=env_name)
    if spec.ignored:
        return spec

    for clause in clauses:
        validator_spec = parse_clause(clause)
        if validator_spec is None:
            spec.problems.append(
                ParseProblem(
                    ErrorKind.MALFORMED_VALIDATOR,
                    f'malformed validator "{clause}" for {env_name}',
                )
            )
            continue

        factory = registry.get(validator_spec.name)
        if factory is None:
            spec.problems.append(
                ParseProblem(
                    ErrorKind.UNKNOWN_VALIDATOR,
                    f'unknown validator "{validator_spec.name}" for {env_name}',
                )
            )
            continue

        spec.specs.append(validator_spec)
        spec.validators.append(factory(validator_spec.args))

    if spec.problems:
        logger.debug("Annotation for %s has %d problem(s)", env_name, len(spec.problems))
    return spec
