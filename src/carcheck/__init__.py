"""carcheck: basic structural check for CAR documents."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("carcheck")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from carcheck.api import validate_car, load_car, summarize_car, CarSummary, CarValidationResult
from carcheck._internal.io import CarLoadError, ArchiveInputError

__all__ = [
    "__version__",
    "validate_car",
    "load_car",
    "summarize_car",
    "CarSummary",
    "CarValidationResult",
    "CarLoadError",
    "ArchiveInputError",
]
