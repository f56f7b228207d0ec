"""Unicode caseless matching over code point streams.

Provides default, canonical and compatibility caseless matching
(Unicode Standard, section 3.13) built from lazy case folding and
decomposition transforms.
"""

from caseless.decomposition import (
    DecompositionKind,
    DecompositionProvider,
    UnicodeDataProvider,
)
from caseless.exceptions import CaselessError, ConfigError, FoldTableError
from caseless.fold_table import (
    UNICODE_VERSION,
    FoldEntry,
    FoldTable,
    get_fold_table,
    load_fold_table,
    parse_case_folding,
    unicode_version,
)
from caseless.matching import (
    Algorithm,
    Ordering,
    canonical_caseless_compare,
    canonical_caseless_compare_str,
    canonical_caseless_key,
    canonical_caseless_match,
    canonical_caseless_match_str,
    canonical_caseless_starts_with,
    canonical_caseless_starts_with_str,
    caseless_compare,
    caseless_key,
    caseless_match,
    caseless_starts_with,
    caseless_stream,
    compatibility_caseless_compare,
    compatibility_caseless_compare_str,
    compatibility_caseless_key,
    compatibility_caseless_match,
    compatibility_caseless_match_str,
    compatibility_caseless_starts_with,
    compatibility_caseless_starts_with_str,
    default_case_fold_str,
    default_caseless_compare,
    default_caseless_compare_str,
    default_caseless_match,
    default_caseless_match_str,
    default_caseless_starts_with,
    default_caseless_starts_with_str,
)
from caseless.transforms import CaseFold, Decompose, default_case_fold, nfd, nfkd

__version__ = "0.1.0"

__all__ = [
    "UNICODE_VERSION",
    "Algorithm",
    "CaseFold",
    "CaselessError",
    "ConfigError",
    "Decompose",
    "DecompositionKind",
    "DecompositionProvider",
    "FoldEntry",
    "FoldTable",
    "FoldTableError",
    "Ordering",
    "UnicodeDataProvider",
    "canonical_caseless_compare",
    "canonical_caseless_compare_str",
    "canonical_caseless_key",
    "canonical_caseless_match",
    "canonical_caseless_match_str",
    "canonical_caseless_starts_with",
    "canonical_caseless_starts_with_str",
    "caseless_compare",
    "caseless_key",
    "caseless_match",
    "caseless_starts_with",
    "caseless_stream",
    "compatibility_caseless_compare",
    "compatibility_caseless_compare_str",
    "compatibility_caseless_key",
    "compatibility_caseless_match",
    "compatibility_caseless_match_str",
    "compatibility_caseless_starts_with",
    "compatibility_caseless_starts_with_str",
    "default_case_fold",
    "default_case_fold_str",
    "default_caseless_compare",
    "default_caseless_compare_str",
    "default_caseless_match",
    "default_caseless_match_str",
    "default_caseless_starts_with",
    "default_caseless_starts_with_str",
    "get_fold_table",
    "load_fold_table",
    "nfd",
    "nfkd",
    "parse_case_folding",
    "unicode_version",
]
