"""Location of reference data files for sigmutsim.

The simulator falls back to the COSMIC SBS signature matrix when no
signature matrix is given. The reference files are not bundled; place
them in the data directory (the package `data/` folder, or the folder
given by the SIGMUTSIM_DATA_DIR environment variable).
"""

import os
from pathlib import Path


# Package data directory
_PKG_DATA_DIR = Path(__file__).parent / "data"

# Allow override via environment variable
DATA_DIR = Path(os.environ.get("SIGMUTSIM_DATA_DIR", _PKG_DATA_DIR))


# COSMIC SBS signatures, as exported by SigProfiler (tab-delimited,
# 'Type' column with mutation types, one column per signature)
location_cosmic_signatures = (
    DATA_DIR / "cosmic_sigProfiler_SBS_signatures.txt"
)

# Average proportion of mutations per signature by cancer type
# (tab-delimited, one row per cancer type, one column per signature)
location_mean_exposures = (
    DATA_DIR / "hmean_breast_lung_skin_pancr.txt"
)


def check_data_file(file_path: Path, name: str = None) -> Path:
    """Check if a data file exists, provide helpful error if not.

    Parameters
    ----------
    file_path : Path
        Path to check
    name : str, optional
        Human-readable name of the file for error messages

    Returns
    -------
    Path
        The file path if it exists

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    """
    file_path = Path(file_path)
    if not file_path.exists():
        name = name or file_path.name
        raise FileNotFoundError(
            f"{name} not found at {file_path}.\n"
            f"Place the file in {DATA_DIR} or point SIGMUTSIM_DATA_DIR "
            f"to the folder that contains it."
        )
    return file_path


def list_data_files() -> dict[str, bool]:
    """List all reference data files and their availability."""
    files = {
        "cosmic_signatures": location_cosmic_signatures,
        "mean_exposures": location_mean_exposures,
    }
    return {name: path.exists() for name, path in files.items()}
