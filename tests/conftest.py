"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed carcheck package.
"""

import copy

import pytest

from carcheck.contracts import REQUIRED_FIELDS


_MINIMAL_CAR = {
    "id": "car:test",
    "run_id": "run:test",
    "created_at": "2024-01-01T00:00:00Z",
    "run": {},
    "proof": {},
    "policy_ref": None,
    "budgets": {},
    "provenance": [],
    "checkpoints": [],
    "sgrade": {},
    "signer_public_key": "key",
    "signatures": [],
}

assert tuple(_MINIMAL_CAR) == REQUIRED_FIELDS


@pytest.fixture
def minimal_car():
    """All 12 required fields, no match_kind, no run.steps."""
    return copy.deepcopy(_MINIMAL_CAR)
