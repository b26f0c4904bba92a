"""Public API for carcheck.

High-level functions that return complete, structured results.
Callers should use these functions instead of importing from _internal.
"""

import os
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from carcheck.kernel.structure import validate
from carcheck._internal.io import load_car_json


class CarSummary(BaseModel):
    """Short description of a CAR that passed the basic check."""
    id: Any = None
    run_id: Any = None
    match_kind: Optional[Any] = None  # None when proof.match_kind is absent
    checkpoint_count: int = 0


class CarValidationResult(BaseModel):
    """Result of the basic structural check."""
    ok: bool  # True iff no violations
    violations: List[str] = Field(default_factory=list)  # In rule evaluation order
    summary: Optional[CarSummary] = None  # Only populated when ok


def _is_path(car: Any) -> bool:
    return isinstance(car, (str, os.PathLike))


def load_car(path: Union[str, os.PathLike, Path]) -> Any:
    """Load a CAR document from a JSON file ("-" reads stdin)."""
    return load_car_json(path)


def summarize_car(document: Any) -> CarSummary:
    """Extract id, run_id, proof.match_kind and the checkpoint count."""
    if not isinstance(document, dict):
        return CarSummary()
    proof = document.get("proof")
    checkpoints = document.get("checkpoints")
    return CarSummary(
        id=document.get("id"),
        run_id=document.get("run_id"),
        match_kind=proof.get("match_kind") if isinstance(proof, dict) else None,
        checkpoint_count=len(checkpoints) if isinstance(checkpoints, list) else 0,
    )


def validate_car(car: Union[str, os.PathLike, Path, Any]) -> CarValidationResult:
    """
    Run the basic structural check on a CAR document.

    Args:
        car: Path to a CAR JSON file, or an already-parsed JSON value.
             A str is always treated as a path.

    Returns:
        CarValidationResult with ok, violations and (on success) summary

    Raises:
        CarLoadError: path given and the file could not be read or parsed
        ArchiveInputError: path names a .zip bundle
    """
    document = load_car(car) if _is_path(car) else car
    violations = validate(document)
    if violations:
        return CarValidationResult(ok=False, violations=violations)
    return CarValidationResult(ok=True, violations=[], summary=summarize_car(document))
