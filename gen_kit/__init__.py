"""
gen-kit: sized random generators and shrinkers for property-based testing.

Gen values are pure functions of a size and a splittable random state, built
up with a library of combinators. Arbitrary pairs a Gen with a shrinker for
counterexample minimization.
"""

from .config import GenConfig, get_config, reset_config
from .core import (
    Gen,
    Rnd,
    apply,
    array2d_of,
    array2d_of_dim,
    array_of,
    array_of_length,
    bind,
    bind_project,
    booleans,
    characters,
    choose,
    constant,
    elements,
    eval_gen,
    floats,
    four,
    frequency,
    growing_elements,
    integers,
    list_of,
    list_of_length,
    map_gen,
    non_empty_list_of,
    oneof,
    or_null,
    pure,
    resize,
    sample,
    sequence,
    shuffle,
    sized,
    sub_list_of,
    text,
    three,
    try_where,
    two,
    where,
    where_bounded,
    zip,
    zip3,
)
from .domain import (
    Arbitrary,
    bool_arbitrary,
    from_gen,
    from_gen_shrink,
    int_arbitrary,
    list_arbitrary,
    text_arbitrary,
)
from .utilities.constants import (
    EmptyChoiceSetError,
    ExhaustedRetriesError,
    GenKitError,
    InvalidArgumentError,
    InvalidWeightError,
)

__version__ = "1.0.0"

__all__ = [
    "Arbitrary",
    "EmptyChoiceSetError",
    "ExhaustedRetriesError",
    "Gen",
    "GenConfig",
    "GenKitError",
    "InvalidArgumentError",
    "InvalidWeightError",
    "Rnd",
    "apply",
    "array2d_of",
    "array2d_of_dim",
    "array_of",
    "array_of_length",
    "bind",
    "bind_project",
    "bool_arbitrary",
    "booleans",
    "characters",
    "choose",
    "constant",
    "elements",
    "eval_gen",
    "floats",
    "four",
    "frequency",
    "from_gen",
    "from_gen_shrink",
    "get_config",
    "growing_elements",
    "int_arbitrary",
    "integers",
    "list_arbitrary",
    "list_of",
    "list_of_length",
    "map_gen",
    "non_empty_list_of",
    "oneof",
    "or_null",
    "pure",
    "reset_config",
    "resize",
    "sample",
    "sequence",
    "shuffle",
    "sized",
    "sub_list_of",
    "text",
    "text_arbitrary",
    "three",
    "try_where",
    "two",
    "where",
    "where_bounded",
    "zip",
    "zip3",
]
