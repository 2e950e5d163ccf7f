"""Sorted subject code tables for the archives with large subject sets.

The tables are searched with `bisect`, so each one must stay sorted.
"""

COMPSCI_TABLE: tuple[str, ...] = (
    "AI", "AR", "CC", "CE", "CG", "CL", "CR", "CV", "CY", "DB", "DC", "DL", "DM", "DS", "ET", "FL",
    "GL", "GR", "GT", "HC", "IR", "IT", "LG", "LO", "MA", "MM", "MS", "NA", "NI", "OH", "OS", "PF",
    "PL", "RO", "SC", "SD", "SE", "SI", "SY",
)  # fmt: skip

MATH_TABLE: tuple[str, ...] = (
    "AC", "AG", "AP", "AT", "CA", "CO", "CT", "CV", "DG", "DS", "FA", "GM", "GN", "GR", "GT", "HO",
    "IT", "KT", "LO", "MG", "MP", "NA", "NT", "OA", "OC", "PR", "QA", "RA", "RT", "SG", "SP", "ST",
)  # fmt: skip

PHYSICS_TABLE: tuple[str, ...] = (
    "acc-ph", "ao-ph", "app-ph", "atm-clus", "atom-ph", "bio-ph", "chem-ph", "class-ph", "comp-ph",
    "data-an", "ed-ph", "flu-dyn", "gen-ph", "geo-ph", "hist-ph", "ins-det", "med-ph", "optics",
    "plasm-ph", "pop-ph", "soc-ph", "space-ph",
)  # fmt: skip
