__all__ = [
    "__version__",
    "Constant",
    "Cycle",
    "Dice",
    "FullyNamed",
    "GeneratesRandomNumbers",
    "InvalidConfiguration",
    "OddThroughNineteen",
    "OneThroughHundred",
    "OneThroughTen",
    "Person",
    "ProtoplayError",
    "Starship",
    "make_generator",
    "same_full_name",
]
__version__ = "0.1.0"

from .dice import Dice
from .errors import InvalidConfiguration, ProtoplayError
from .naming import FullyNamed, Person, Starship, same_full_name
from .rng import (
    Constant,
    Cycle,
    GeneratesRandomNumbers,
    OddThroughNineteen,
    OneThroughHundred,
    OneThroughTen,
    make_generator,
)
