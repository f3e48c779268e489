import pytest

from protoplay.errors import InvalidConfiguration
from protoplay.rng import (
    GENERATORS,
    Constant,
    Cycle,
    GeneratesRandomNumbers,
    OddThroughNineteen,
    OneThroughHundred,
    OneThroughTen,
    make_generator,
)


@pytest.mark.parametrize("gen_cls", [OneThroughTen, OneThroughHundred, OddThroughNineteen])
def test_outputs_within_support(gen_cls):
    gen = gen_cls(seed=42)
    assert all(gen.random() in gen_cls.support for _ in range(500))


def test_odd_generator_only_odd():
    gen = OddThroughNineteen(seed=5)
    values = {gen.random() for _ in range(500)}
    assert all(v % 2 == 1 for v in values)
    assert values <= set(range(1, 20, 2))


def test_seed_makes_sequence_repeatable():
    a, b = OneThroughHundred(seed=9), OneThroughHundred(seed=9)
    assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]


def test_sources_satisfy_protocol():
    for gen in (OneThroughTen(), OneThroughHundred(), OddThroughNineteen(), Constant(3), Cycle([1])):
        assert isinstance(gen, GeneratesRandomNumbers)


def test_constant_and_cycle():
    assert Constant(10).random() == 10
    seq = Cycle([1, 2])
    assert [seq.random() for _ in range(5)] == [1, 2, 1, 2, 1]


def test_empty_cycle_rejected():
    with pytest.raises(InvalidConfiguration):
        Cycle([])


def test_make_generator_by_name():
    for key, cls in GENERATORS.items():
        gen = make_generator(key, seed=1)
        assert isinstance(gen, cls)
        assert gen.seed == 1


def test_make_generator_unknown():
    with pytest.raises(InvalidConfiguration, match="Unknown generator"):
        make_generator("d-infinity")


def test_package_root_exports():
    import protoplay

    for name in ("Constant", "Cycle", "make_generator", "same_full_name", "ProtoplayError"):
        assert hasattr(protoplay, name)
    assert issubclass(protoplay.InvalidConfiguration, protoplay.ProtoplayError)
