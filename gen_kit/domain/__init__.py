"""
Domain objects for gen-kit.

Arbitrary instances pairing generators with shrinkers, the stock shrinkers,
and ready-made Arbitrary values for common types.
"""

from .arbitraries import bool_arbitrary, int_arbitrary, list_arbitrary, text_arbitrary
from .arbitrary import Arbitrary, from_gen, from_gen_shrink, no_shrink
from .shrinkers import (
    shrink_bool,
    shrink_char,
    shrink_int,
    shrink_list,
    shrink_text,
    shrink_tuple,
)

__all__ = [
    "Arbitrary",
    "bool_arbitrary",
    "from_gen",
    "from_gen_shrink",
    "int_arbitrary",
    "list_arbitrary",
    "no_shrink",
    "shrink_bool",
    "shrink_char",
    "shrink_int",
    "shrink_list",
    "shrink_text",
    "shrink_tuple",
    "text_arbitrary",
]
