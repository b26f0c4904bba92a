"""Test public API surface - ensure imports work correctly and no side effects."""

import types


def test_root_exports():
    import carcheck

    for name in ("validate_car", "load_car", "summarize_car", "CarValidationResult", "CarSummary",
                 "CarLoadError", "ArchiveInputError"):
        assert name in carcheck.__all__
        assert hasattr(carcheck, name)


def test_kernel_validate_not_exported_from_root():
    """Root exposes validate_car; the raw list-returning validator stays in the kernel."""
    import carcheck
    from carcheck.kernel.structure import validate

    assert "validate" not in carcheck.__all__
    assert isinstance(validate, types.FunctionType)


def test_load_errors_are_value_errors():
    from carcheck import ArchiveInputError, CarLoadError

    assert issubclass(CarLoadError, ValueError)
    assert issubclass(ArchiveInputError, CarLoadError)


def test_version_string():
    import carcheck

    assert isinstance(carcheck.__version__, str)
    assert carcheck.__version__
