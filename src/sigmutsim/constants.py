"""Constants that we use in multiple modules."""

# Random seed, set to a value if you want to replicate the results,
# this seed would be used in all the random draws of the simulations
random_seed = None
# random_seed = 135


# Default parameters of the simulation of mutational spectra. These
# follow Omichessan et al. DOI: 10.1371/journal.pone.0221235
default_pzero = 0.3  # proportion of extra zero counts
default_nmut = 100  # mean number of mutations per sample
default_n_samples = 10
default_min_mut = 1  # minimum mutation load for a sample to be kept
default_distribution = "nbinom"
default_alpha = 0.2  # standard deviation to mean ratio of exposures
default_max_iter = 100  # cap of the dilution of ultra-mutated samples

# Distributions of the exposure counts
distributions = ("nbinom", "pois")


# SBS signatures canonical order. These come directly from COSMIC
# https://cancer.sanger.ac.uk/signatures/downloads/
# Current release v3.4
sbs_signatures = ["SBS1", "SBS2", "SBS3", "SBS4", "SBS5", "SBS6",
                  "SBS7a", "SBS7b", "SBS7c", "SBS7d", "SBS8", "SBS9",
                  "SBS10a", "SBS10b", "SBS10c", "SBS10d", "SBS11",
                  "SBS12", "SBS13", "SBS14", "SBS15", "SBS16",
                  "SBS17a", "SBS17b", "SBS18", "SBS19", "SBS20",
                  "SBS21", "SBS22a", "SBS22b", "SBS23", "SBS24",
                  "SBS25", "SBS26", "SBS27", "SBS28", "SBS29",
                  "SBS30", "SBS31", "SBS32", "SBS33", "SBS34",
                  "SBS35", "SBS36", "SBS37", "SBS38", "SBS39",
                  "SBS40a", "SBS40b", "SBS40c", "SBS41", "SBS42",
                  "SBS43", "SBS44", "SBS45", "SBS46", "SBS47",
                  "SBS48", "SBS49", "SBS50", "SBS51", "SBS52",
                  "SBS53", "SBS54", "SBS55", "SBS56", "SBS57",
                  "SBS58", "SBS59", "SBS60", "SBS84", "SBS85",
                  "SBS86", "SBS87", "SBS88", "SBS89", "SBS90",
                  "SBS91", "SBS92", "SBS93", "SBS94", "SBS95",
                  "SBS96", "SBS97", "SBS98", "SBS99"]

# Trinucleotide contexts canonical order. Order first by mutation,
# then by previous nucleotide and then by next nucleotide.
canonical_types_order = [f"{first}[{mid_from}>{mid_to}]{third}"
                         for mid_from in "CT"
                         for mid_to in "ACGT".replace(mid_from, "")
                         for first in "ACGT"
                         for third in "ACGT"]

# Same order, but as the 4-letter class tokens expected by the
# Mutation-Signatures input format: previous nucleotide, reference,
# alternative and next nucleotide.
canonical_class_tokens = [f"{first}{mid_from}{mid_to}{third}"
                          for mid_from in "CT"
                          for mid_to in "ACGT".replace(mid_from, "")
                          for first in "ACGT"
                          for third in "ACGT"]

# Name of the sample identifier column in the sample-major output
sample_id_column = "Tumor_Sample_Barcode"


def extract_class_token(mutation_type):
    """Extract the 4-letter class token from a mutation type.

    Parameters
    ----------
    mutation_type : str
        Mutation type in COSMIC format, e.g., 'G[C>T]G'.

    Returns
    -------
    str
        Characters 1, 3, 5 and 7 of the label, e.g., 'GCTG'.

    Raises
    ------
    ValueError
        If the label is too short to carry a token.

    Examples
    --------
    >>> extract_class_token('G[C>T]G')
    'GCTG'
    >>> extract_class_token('A[T>C]A')
    'ATCA'
    """
    label = str(mutation_type)
    if len(label) < 7:
        raise ValueError(
            f"Mutation type {label!r} cannot be parsed into a class "
            "token.")
    return label[0] + label[2] + label[4] + label[6]

