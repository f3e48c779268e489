import pytest

from protoplay.errors import InvalidConfiguration
from protoplay.models import DiceConfig, load_dice_config
from protoplay.rng import OddThroughNineteen, OneThroughTen


def test_defaults_build_a_d6():
    dice = DiceConfig().build()
    assert dice.sides == 6
    assert isinstance(dice.generator, OneThroughTen)
    assert dice.fair is False


def test_load_coerces_strings():
    cfg = load_dice_config({"sides": "20", "generator": "odd-through-nineteen", "seed": "3"})
    assert cfg.sides == 20 and cfg.seed == 3
    dice = cfg.build()
    assert isinstance(dice.generator, OddThroughNineteen)
    assert dice.generator.seed == 3


@pytest.mark.parametrize("data", [{"sides": 0}, {"sides": "six"}, {"times": -2}, {"seed": "x"}])
def test_bad_values_raise_invalid_configuration(data):
    with pytest.raises(InvalidConfiguration):
        load_dice_config(data)


def test_unknown_generator_fails_on_build():
    cfg = load_dice_config({"generator": "nope"})
    with pytest.raises(InvalidConfiguration):
        cfg.build()


@pytest.mark.parametrize("field", ["sides", "times", "seed"])
def test_bool_rejected_for_int_fields(field):
    with pytest.raises(InvalidConfiguration, match=field):
        load_dice_config({field: True})
