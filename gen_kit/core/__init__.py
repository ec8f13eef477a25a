"""
Core generator engine: splittable random state, the Gen type and its
combinator library.
"""

from .combinators import (
    apply,
    array2d_of,
    array2d_of_dim,
    array_of,
    array_of_length,
    booleans,
    characters,
    choose,
    elements,
    floats,
    four,
    frequency,
    growing_elements,
    integers,
    list_of,
    list_of_length,
    non_empty_list_of,
    oneof,
    or_null,
    sequence,
    shuffle,
    sub_list_of,
    text,
    three,
    two,
    zip,
    zip3,
)
from .gen import (
    Gen,
    bind,
    bind_project,
    constant,
    eval_gen,
    map_gen,
    pure,
    resize,
    sample,
    sized,
    try_where,
    where,
    where_bounded,
)
from .random import Rnd

__all__ = [
    "Gen",
    "Rnd",
    "apply",
    "array2d_of",
    "array2d_of_dim",
    "array_of",
    "array_of_length",
    "bind",
    "bind_project",
    "booleans",
    "characters",
    "choose",
    "constant",
    "elements",
    "eval_gen",
    "floats",
    "four",
    "frequency",
    "growing_elements",
    "integers",
    "list_of",
    "list_of_length",
    "map_gen",
    "non_empty_list_of",
    "oneof",
    "or_null",
    "pure",
    "resize",
    "sample",
    "sequence",
    "shuffle",
    "sized",
    "sub_list_of",
    "text",
    "three",
    "try_where",
    "two",
    "where",
    "where_bounded",
    "zip",
    "zip3",
]
