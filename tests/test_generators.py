"""Golden vectors and construction invariants for every Romu variant."""

import copy

import pytest

from romu import (
    C1,
    Duo,
    DuoJr,
    Mono32,
    Quad,
    Quad32,
    RomuGenerator,
    SplitMix32,
    SplitMix64,
    Trio,
    Trio32,
)
from romu.generators import quad_step
from romu.quality import chi_square_uniformity

ALL_VARIANTS = [Quad, Trio, Duo, DuoJr, Quad32, Trio32, Mono32]

# (class, start state, expected output, expected state after one call)
GOLDEN = [
    (Quad, (1, 2, 3, 4), 2, (5624144917907463468, 4503599627370500, 1, 2097152)),
    (Trio, (1, 2, 3), 1, (8829794706857985505, 4096, 17592186044416)),
    (
        Trio,
        (5, 3, 1),
        5,
        (15241094284759029579, 18446744073709547519, 18446726481523507199),
    ),
    (Duo, (1, 2), 1, (12035444495808507542, 137439019007)),
    (DuoJr, (1, 2), 1, (12035444495808507542, 134217728)),
    (DuoJr, (7, 3), 7, (8829794706857985505, 18446744073306898431)),
    (Quad32, (1, 2, 3, 4), 2, (410361004, 67108868, 1, 2048)),
    (Trio32, (1, 2, 3), 1, (3991209441, 4096, 4096)),
    (Trio32, (5, 3, 1), 5, (1330403147, 4294963199, 4294963199)),
    (Mono32, (0x12345678,), 0x1234, (2522516987,)),
]


@pytest.mark.parametrize("cls, start, output, after", GOLDEN)
def test_golden_vectors(cls, start, output, after):
    rng = cls(state=start)
    assert rng.next() == output
    assert rng.state() == after


def test_quad_golden_vector_matches_formula():
    new_state, output = quad_step((1, 2, 3, 4))
    assert output == 2
    assert new_state == ((C1 * 4) % 2**64, 4 + 2**52, 1, 2**21)


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_same_seed_same_sequence(cls):
    first = cls(0xDEADBEEF)
    second = cls(0xDEADBEEF)
    assert first.outputs(64) == second.outputs(64)
    assert first == second


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_same_state_same_sequence(cls):
    seeded = cls(12345)
    resumed = cls.from_state(seeded.state())
    assert seeded.outputs(32) == resumed.outputs(32)


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_state_size_is_fixed(cls):
    instances = [
        cls(),
        cls(7),
        cls(entropy=lambda: 99),
        cls(state=tuple(range(1, cls.words + 1))),
    ]
    for rng in instances:
        assert len(rng.state()) == cls.words
        rng.outputs(5)
        assert len(rng.state()) == cls.words
        rng.seed(3)
        assert len(rng.state()) == cls.words


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_output_fits_output_width(cls):
    rng = cls(2024)
    limit = 1 << cls.output_bits
    assert all(0 <= value < limit for value in rng.outputs(200))
    word_limit = 1 << cls.bits
    assert all(0 <= word < word_limit for word in rng.state())


@pytest.mark.parametrize("cls", [Quad, Trio, Duo, DuoJr, Quad32, Trio32])
def test_seeded_state_comes_from_expander(cls):
    expander = SplitMix64 if cls.bits == 64 else SplitMix32
    smix = expander(0xA2B94D10)
    expected = tuple(smix.next() for _ in range(cls.words))
    assert cls(0xA2B94D10).state() == expected


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_seed_sensitivity(cls):
    first = cls(1000)
    second = cls(1001)
    assert first.outputs(4) != second.outputs(4)


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_reseed_matches_seeded_construction(cls):
    rng = cls(1)
    rng.outputs(10)
    rng.seed(0xC0FFEE)
    assert rng == cls(0xC0FFEE)
    assert rng.outputs(8) == cls(0xC0FFEE).outputs(8)


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_default_construction_uses_injected_entropy(cls):
    assert cls(entropy=lambda: 0x5EED) == cls(0x5EED)

    rng = cls(1)
    rng.seed(entropy=lambda: 0x5EED)
    assert rng == cls(0x5EED)


def test_output_is_previous_designated_word():
    rng = Quad(77)
    for _ in range(10):
        before = rng.state()
        assert rng.next() == before[1]

    mono = Mono32(77)
    for _ in range(10):
        (s,) = mono.state()
        assert mono.next() == s >> 16


def test_state_returns_a_copy():
    rng = Trio(5)
    snapshot = rng.state()
    rng.next()
    assert rng.state() != snapshot
    assert Trio(state=snapshot).next() == snapshot[0]


def test_duo_random_is_next():
    first = Duo(31)
    second = Duo(31)
    assert [first.random() for _ in range(10)] == second.outputs(10)


def test_mono32_seed_is_masked_and_offset():
    assert Mono32(0xFFFFFFFF).state() == ((0xFFFFFFFF & 0x1FFFFFFF) + 1156979152,)
    assert Mono32(0).state() == (1156979152,)

    rng = Mono32(state=0xFFFFFFFF)
    assert rng.state() == (0xFFFFFFFF,)
    rng.seed(0xFFFFFFFF)
    assert rng.state() == (1693850063,)


def test_mono32_default_construction_is_seeded():
    rng = Mono32(entropy=lambda: 0xFFFFFFFF)
    assert rng.state() == (1693850063,)
    assert 1156979152 <= Mono32().state()[0] <= 1156979152 + 0x1FFFFFFF


def test_explicit_state_is_reduced_to_word_width():
    assert Quad32(state=(1 << 32, 1, 2, 3)).state() == (0, 1, 2, 3)
    assert DuoJr(state=[-1, 0]).state() == (2**64 - 1, 0)


def test_degenerate_zero_state_is_accepted():
    rng = Quad(state=(0, 0, 0, 0))
    assert rng.outputs(5) == [0] * 5


def test_wrong_state_length_raises():
    with pytest.raises(ValueError):
        Quad(state=(1, 2, 3))
    with pytest.raises(ValueError):
        Duo(state=5)


def test_seed_and_state_together_raise():
    with pytest.raises(TypeError):
        Trio(1, state=(1, 2, 3))


def test_non_integer_seed_raises():
    with pytest.raises(TypeError):
        Quad(1.5)
    with pytest.raises(TypeError):
        Mono32("7")


def test_copy_checkpoints_stream():
    rng = Trio32(8)
    rng.outputs(3)
    checkpoint = copy.copy(rng)
    expected = rng.outputs(10)
    assert checkpoint.outputs(10) == expected


def test_repr_shows_state():
    assert repr(DuoJr(state=(1, 2))) == "DuoJr(state=(1, 2))"


def test_instances_of_different_variants_differ():
    assert Duo(state=(1, 2)) != DuoJr(state=(1, 2))


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_uniform_and_randint_ranges(cls):
    rng = cls(4242)
    for _ in range(200):
        assert 0.0 <= rng.uniform() < 1.0
        assert 1 <= rng.randint(1, 6) <= 6
    assert rng.randint(3, 3) == 3
    with pytest.raises(ValueError):
        rng.randint(5, 4)


def test_randint_reaches_odd_values_over_wide_span():
    rng = Quad(1)
    draws = [rng.randint(0, 2**64) for _ in range(200)]
    assert {value % 2 for value in draws} == {0, 1}
    assert all(0 <= value <= 2**64 for value in draws)


def test_randint_wider_than_mono32_output():
    rng = Mono32(0xBEEF)
    draws = [rng.randint(0, 2**20) for _ in range(200)]
    assert any(value % 16 for value in draws)
    assert all(0 <= value <= 2**20 for value in draws)


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_randbits_width(cls):
    rng = cls(11)
    assert rng.randbits(0) == 0
    assert all(0 <= rng.randbits(70) < 2**70 for _ in range(50))
    with pytest.raises(ValueError):
        rng.randbits(-1)


def test_randbits_takes_top_bits_of_outputs():
    first = Quad32(3)
    second = Quad32(3)
    assert first.randbits(8) == second.next() >> 24
    assert first.randbits(40) == ((second.next() << 32) | second.next()) >> 24


@pytest.mark.parametrize(
    "cls, width", [(Quad, 64), (Trio, 64), (Duo, 64), (DuoJr, 64), (Quad32, 32), (Trio32, 32), (Mono32, 32)]
)
def test_wide_seeds_wrap_to_word_width(cls, width):
    assert cls(2**width + 5) == cls(5)
    assert cls(-1) == cls(2**width - 1)


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError, match="variant"):
        RomuGenerator(5)
    with pytest.raises(TypeError):
        RomuGenerator(state=(1, 2, 3, 4))


def test_mono32_seeding_bypasses_expander():
    assert Mono32.expander is None
    assert Mono32(5).state() == (5 + 1156979152,)


@pytest.mark.slow
@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_output_frequencies_look_uniform(cls):
    rng = cls(0x9E3779B9)
    result = chi_square_uniformity(rng.outputs(10**6), cls.output_bits, bins=256)
    assert result.samples == 10**6
    assert result.is_uniform()
