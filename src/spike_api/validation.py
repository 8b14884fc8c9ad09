"""
Argument validation shared by every client operation.

Each operation declares an ordered signature of ``ArgSpec`` entries. Values
are checked before any request is built: the first ``min_args`` values must
be present (not ``None``) and every present value must match its kind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from spike_api.errors import InvalidArgumentsError

logger = logging.getLogger(__name__)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


KIND_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": _is_string,
    "number": _is_number,
    "integer": _is_integer,
    "boolean": _is_boolean,
    "array": _is_array,
}


@dataclass(frozen=True)
class ArgSpec:
    name: str
    kind: str

    def __post_init__(self) -> None:
        if self.kind not in KIND_CHECKS:
            raise ValueError(f"Unknown argument kind '{self.kind}' for '{self.name}'")


def validate_args(
    specs: Sequence[ArgSpec],
    args: Sequence[Any],
    min_args: Optional[int] = None,
) -> List[str]:
    """
    Return a list of validation problems.
    Empty list means the arguments are valid.
    """
    problems: List[str] = []
    required = len(specs) if min_args is None else min_args

    if len(args) > len(specs):
        problems.append(f"expected at most {len(specs)} arguments, got {len(args)}")

    for index, spec in enumerate(specs):
        value = args[index] if index < len(args) else None
        if value is None:
            if index < required:
                problems.append(f"{spec.name} is required")
            continue
        if not KIND_CHECKS[spec.kind](value):
            problems.append(f"{spec.name} must be {spec.kind}, got {type(value).__name__}")

    return problems


def check_args(
    specs: Sequence[ArgSpec],
    args: Sequence[Any],
    min_args: Optional[int] = None,
) -> Optional[InvalidArgumentsError]:
    """Validate and wrap any problems in a single InvalidArgumentsError."""
    problems = validate_args(specs, args, min_args)
    if not problems:
        return None
    logger.debug("Rejected arguments: %s", "; ".join(problems))
    return InvalidArgumentsError(problems=problems)
