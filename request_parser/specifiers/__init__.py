"""Specifier compiler.

Validates the shape of a parse call and turns specifier strings into
Specifier directives for the extraction engine.

Usage:
    from request_parser.specifiers import check_input, iter_specifiers

    check_input(request, ["Bid", "H*lang?"], config)
    for spec in iter_specifiers(["Bid", "H*lang?"], config):
        print(spec.source, spec.field_name)
"""

from request_parser.specifiers.compiler import compile_specifier, iter_specifiers
from request_parser.specifiers.grammar import check_input, is_valid_specifier

__all__ = [
    "check_input",
    "compile_specifier",
    "is_valid_specifier",
    "iter_specifiers",
]
