"""
Sample command - print values drawn from a named stock generator.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..config import get_config
from ..core import combinators
from ..core.gen import Gen
from ..core.random import Rnd
from ..utilities.console import print_error, print_info, print_section_header, print_success
from ..utilities.constants import ExhaustedRetriesError, GenKitError
from ..utilities.formatters import format_grid, format_sample
from .core.command_result import CommandResult

logger = logging.getLogger(__name__)

# name -> (description, generator factory)
GENERATORS: dict[str, tuple[str, Callable[[], Gen[Any]]]] = {
    "int": ("integers in [-size, size]", combinators.integers),
    "bool": ("True or False", combinators.booleans),
    "float": ("floats in [-size, size)", combinators.floats),
    "char": ("printable ASCII characters", combinators.characters),
    "text": ("printable strings up to size characters", combinators.text),
    "list": ("lists of integers, length in [0, size]", lambda: combinators.list_of(combinators.integers())),
    "grid": ("2D grids of digits, sides up to sqrt(size)", lambda: combinators.array2d_of(combinators.choose(0, 9))),
    "maybe-int": ("integers, or None one time in eight", lambda: combinators.or_null(combinators.integers())),
    "positive-int": (
        "positive integers, giving up after max_retries rejections",
        lambda: combinators.integers().where_bounded(lambda x: x > 0),
    ),
}


def sample_values(
    name: str, size: int | None = None, count: int | None = None, seed: int | None = None
) -> list[Any]:
    """
    Draw values from the stock generator called `name`.

    Missing arguments fall back to the configured defaults.

    Raises:
        KeyError: If no generator has that name
        ExhaustedRetriesError: If a filtered generator runs out of retries
        GenKitError: If size or count is invalid
    """
    if name not in GENERATORS:
        raise KeyError(name)
    config = get_config().with_overrides(default_size=size, sample_count=count, seed=seed)
    generator = GENERATORS[name][1]()
    rnd = Rnd.create() if config.seed is None else Rnd.from_seed(config.seed)
    logger.debug(f"Sampling generator {name!r} with {config.to_dict()}")
    return generator.sample(config.default_size, config.sample_count, rnd)


def sample_command(
    name: str, size: int | None = None, count: int | None = None, seed: int | None = None
) -> CommandResult:
    """Sample command wrapper printing the values."""
    try:
        values = sample_values(name, size, count, seed)
    except KeyError:
        message = f"Unknown generator: {name}. Available: {', '.join(GENERATORS)}"
        print_error(message)
        return CommandResult.validation_error(message)
    except ExhaustedRetriesError as e:
        logger.error(f"Sampling {name!r} gave up: {e}")
        print_error(str(e))
        return CommandResult.failure(str(e))
    except GenKitError as e:
        logger.error(f"Sampling {name!r} failed: {e}")
        print_error(str(e))
        return CommandResult.validation_error(str(e))

    print_section_header(f"{len(values)} samples from '{name}'")
    if name == "grid":
        for index, grid in enumerate(values):
            print(f"[{index}]")
            print(format_grid(grid))
    else:
        for line in format_sample(values):
            print(line)
    print_success(f"Sampled {len(values)} values")
    return CommandResult.success(values, generator=name)


def list_command() -> CommandResult:
    """Print the names of the stock generators."""
    print_section_header("Available generators")
    for name, (description, _) in GENERATORS.items():
        print_info(f"{name:<10} {description}")
    return CommandResult.success(list(GENERATORS))
