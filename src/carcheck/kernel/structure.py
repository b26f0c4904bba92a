"""Structural validator for CAR documents.

A flat, ordered sequence of presence checks. This is a basic sanity pass,
not a schema validation: field types, enums and formats are not inspected.
"""

from typing import Any, List

from carcheck.contracts import (
    PROCESS_MATCH_KIND,
    PROCESS_MISSING_MESSAGE,
    REQUIRED_FIELDS,
    SEQUENTIAL_CHECKPOINTS_EMPTY_MESSAGE,
    SEQUENTIAL_CHECKPOINTS_REQUIRED_MESSAGE,
    SNAKE_CASE_STEP_KEYS,
    STEP_NAMING_MESSAGE,
    missing_field_message,
)


def _is_present(value: Any) -> bool:
    """JSON-level presence: null, false, 0, NaN and "" count as absent.

    Empty objects and empty arrays are present.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and (value == 0 or value != value):
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def check_required_fields(document: Any) -> List[str]:
    """Key existence only; a null or empty value still satisfies the check."""
    keys = document.keys() if isinstance(document, dict) else ()
    return [missing_field_message(field) for field in REQUIRED_FIELDS if field not in keys]


def check_process_proof(document: Any) -> List[str]:
    """At most one violation: the checks form an else-if chain."""
    if not isinstance(document, dict):
        return []
    proof = document.get("proof")
    if not isinstance(proof, dict) or proof.get("match_kind") != PROCESS_MATCH_KIND:
        return []

    process = proof.get("process")
    if not _is_present(process):
        return [PROCESS_MISSING_MESSAGE]

    checkpoints = process.get("sequential_checkpoints") if isinstance(process, dict) else None
    if not _is_present(checkpoints):
        return [SEQUENTIAL_CHECKPOINTS_REQUIRED_MESSAGE]
    if isinstance(checkpoints, list) and len(checkpoints) == 0:
        return [SEQUENTIAL_CHECKPOINTS_EMPTY_MESSAGE]
    return []


def check_step_naming(document: Any) -> List[str]:
    """Inspect run.steps[0] only; later steps are not looked at."""
    if not isinstance(document, dict):
        return []
    run = document.get("run")
    if not isinstance(run, dict):
        return []
    steps = run.get("steps")
    if not isinstance(steps, list) or not steps:
        return []

    first_step = steps[0]
    if not isinstance(first_step, dict):
        return []
    if any(key in first_step for key in SNAKE_CASE_STEP_KEYS):
        return [STEP_NAMING_MESSAGE]
    return []


def validate(document: Any) -> List[str]:
    """
    Run every structural rule against a parsed CAR document.

    Rules never short-circuit each other. Order of the result:
    1. missing required fields (in REQUIRED_FIELDS order)
    2. process-proof requirement
    3. run.steps naming convention

    Args:
        document: Parsed JSON value (normally a dict, but any value is accepted)

    Returns:
        Violation messages; empty list means the basic check passed
    """
    violations: List[str] = []
    violations.extend(check_required_fields(document))
    violations.extend(check_process_proof(document))
    violations.extend(check_step_naming(document))
    return violations
