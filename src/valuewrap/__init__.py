"""valuewrap — derive JSON formats and URL binders for value wrapper types."""

from valuewrap.derivation import (
    DerivedConverters,
    derive_all,
    formats,
    path_bindable,
    query_string_bindable,
    reads,
    writes,
)
from valuewrap.domain.result import ConversionError, Err, Ok, Result
from valuewrap.domain.wrapper import ValueWrapper, always_wrap, value_wrapper

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "DerivedConverters",
    "Err",
    "Ok",
    "Result",
    "ValueWrapper",
    "always_wrap",
    "derive_all",
    "formats",
    "path_bindable",
    "query_string_bindable",
    "reads",
    "value_wrapper",
    "writes",
]
