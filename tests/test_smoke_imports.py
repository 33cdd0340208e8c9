"""Smoke tests for importability and basic public API."""


def test_import_sigmutsim():
    """Import the top-level package."""
    import sigmutsim  # noqa: F401


def test_public_api_symbols():
    """Expose core public symbols at package level."""
    import sigmutsim

    assert hasattr(sigmutsim, "simulate_spectra")
    assert hasattr(sigmutsim, "SimulatedSpectra")
    assert hasattr(sigmutsim, "sample_fat_nbinom")
    assert hasattr(sigmutsim, "dilute_ultra_mutated")
    assert hasattr(sigmutsim, "row_to_column")
    assert hasattr(sigmutsim, "locations")


def test_can_import_core_modules():
    """Import core modules without side effects raising."""
    from sigmutsim import locations  # noqa: F401
    from sigmutsim import simulation  # noqa: F401
    from sigmutsim import dilution  # noqa: F401
