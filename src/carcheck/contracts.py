"""Fixed structural contract for CAR documents.

Field names and message texts are part of the public output: pipelines
grep for them, so they must not drift.
"""

from typing import Tuple

# Checked and reported in this order
REQUIRED_FIELDS: Tuple[str, ...] = (
    "id",
    "run_id",
    "created_at",
    "run",
    "proof",
    "policy_ref",
    "budgets",
    "provenance",
    "checkpoints",
    "sgrade",
    "signer_public_key",
    "signatures",
)

PROCESS_MATCH_KIND = "process"

# Any of these on run.steps[0] triggers the naming violation
SNAKE_CASE_STEP_KEYS: Tuple[str, ...] = ("run_id", "order_index", "checkpoint_type")

MISSING_FIELD_TEMPLATE = "Missing required field: {field}"
PROCESS_MISSING_MESSAGE = 'match_kind is "process" but proof.process is missing'
SEQUENTIAL_CHECKPOINTS_REQUIRED_MESSAGE = "proof.process.sequential_checkpoints is required"
SEQUENTIAL_CHECKPOINTS_EMPTY_MESSAGE = "proof.process.sequential_checkpoints must have at least 1 checkpoint"
STEP_NAMING_MESSAGE = "run.steps should use camelCase (runId, orderIndex, checkpointType), not snake_case"


def missing_field_message(field: str) -> str:
    """Violation text for an absent top-level field."""
    return MISSING_FIELD_TEMPLATE.format(field=field)
