"""Simulate a synthetic mutation catalog.

This script draws random signatures and process weights, simulates a
catalog of 100 samples, dilutes ultra-mutated samples and writes the
catalog in the sample-major layout used by signature fitting tools.
"""

import logging
from pathlib import Path

from sigmutsim import simulate_spectra, row_to_column
from sigmutsim.utils import random_process_weights
from sigmutsim.utils import random_signature_matrix


def main():
    logging.basicConfig(level=logging.INFO)

    W = random_signature_matrix(5, random_state=135)
    h = random_process_weights(W.columns, random_state=135)
    print("Average proportion of mutations per signature:")
    print(h.round(3).to_string())

    sim = simulate_spectra(W, h, pzero=0.3, nmut=100, N=100,
                           dilute_ultra=True, random_state=135)
    print(sim)

    output = Path(__file__).parent / "simulated_catalog.txt"
    row_to_column(sim.catalog).to_csv(output, sep="\t", index=False)
    print(f"Catalog written to {output}")


if __name__ == "__main__":
    main()
