"""sigmutsim: Simulation of synthetic mutational spectra.

This package generates artificial mutation catalogs from reference
mutational signatures with a zero-inflated exposure model, to
validate signature inference methods. It also provides the dilution
of ultra-mutated samples and the conversion of catalogs to the
sample-major layout used by signature fitting tools.

"""

__version__ = "0.1.0"

from sigmutsim.simulation import simulate_spectra, SimulatedSpectra
from sigmutsim.dispersed_counts import sample_fat_nbinom
from sigmutsim.dilution import dilute_ultra_mutated
from sigmutsim.reformat import row_to_column
from sigmutsim.load_signature_matrix import (
    load_signature_matrix,
    load_process_weights,
)
from sigmutsim import locations

__all__ = [
    "simulate_spectra",
    "SimulatedSpectra",
    "sample_fat_nbinom",
    "dilute_ultra_mutated",
    "row_to_column",
    "load_signature_matrix",
    "load_process_weights",
    "locations",
]
