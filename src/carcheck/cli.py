"""carcheck CLI: basic structural check of a CAR JSON file."""

import argparse
import json
import sys
from importlib.metadata import version as get_version, PackageNotFoundError


def _display(value) -> str:
    """Render a JSON value the way it appears in the document."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _print_success(summary) -> None:
    print("[OK] CAR appears valid (basic check)")
    print(f"  ID: {_display(summary.id)}")
    print(f"  Run: {_display(summary.run_id)}")
    if summary.match_kind is not None:
        print(f"  Match kind: {_display(summary.match_kind)}")
    print(f"  Checkpoints: {summary.checkpoint_count}")
    print()
    print("Note: this is not a full schema validation. Use a JSON Schema validator")
    print("  against the CAR schema for type, enum and format checks.")


def _print_violations(violations) -> None:
    print("[FAILED] CAR validation errors:")
    for i, message in enumerate(violations, start=1):
        print(f"  {i}. {message}")


def _print_archive_note() -> None:
    print("Note: ZIP file detected. Please extract car.json first or use the full validator.")
    print("  unzip -p bundle.car.zip car.json | carcheck -")


def main():
    """Main CLI entry point for carcheck."""
    try:
        carcheck_version = get_version("carcheck")
    except PackageNotFoundError:
        carcheck_version = "dev"

    parser = argparse.ArgumentParser(
        prog="carcheck",
        description="Basic structural check for CAR (Compliance/Certification Audit Record) JSON documents"
    )
    parser.add_argument("--version", action="version", version=f"carcheck {carcheck_version}")
    parser.add_argument(
        "car_path",
        nargs="?",
        default=None,
        help="Path to CAR JSON ('-' reads stdin). ZIP bundles must be extracted first."
    )

    args = parser.parse_args()

    if args.car_path is None:
        parser.print_usage(sys.stderr)
        print("Error: missing CAR path (car.json or '-')", file=sys.stderr)
        sys.exit(1)

    from .api import validate_car
    from ._internal.io import ArchiveInputError, CarLoadError

    try:
        result = validate_car(args.car_path)
    except ArchiveInputError:
        _print_archive_note()
        sys.exit(1)
    except CarLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if not result.ok:
        _print_violations(result.violations)
        sys.exit(1)
    _print_success(result.summary)
    sys.exit(0)


if __name__ == "__main__":
    main()
