import pytest

from voxelworld.perlin import (
    DEFAULT_Y,
    DEFAULT_Z,
    Mt19937,
    PerlinNoise,
    clamp_11,
    fade,
    grad,
    lerp,
    max_amplitude,
    remap_01,
    remap_clamp_01,
)

SAMPLES = [(x * 0.37 - 20.0, x * 0.53 + 3.1, x * 0.11 - 7.7) for x in range(120)]


def test_mt19937_first_output_default_seed():
    assert Mt19937()() == 3499211612


def test_mt19937_ten_thousandth_output_default_seed():
    engine = Mt19937(5489)
    value = None
    for _ in range(10000):
        value = engine()
    assert value == 4123659995


def test_mt19937_same_seed_same_sequence():
    a, b = Mt19937(99), Mt19937(99)
    assert [a() for _ in range(700)] == [b() for _ in range(700)]


def test_mt19937_outputs_are_32_bit():
    engine = Mt19937(7)
    assert all(0 <= engine() <= 0xFFFFFFFF for _ in range(1000))


def test_fade_endpoints_and_midpoint():
    assert fade(0.0) == 0.0
    assert fade(1.0) == 1.0
    assert fade(0.5) == pytest.approx(0.5)


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


@pytest.mark.parametrize("x,y,z", [(1.0, 2.0, 3.0), (-0.5, 0.25, 4.0)])
def test_grad_directions(x, y, z):
    assert grad(0, x, y, z) == x + y
    assert grad(1, x, y, z) == -x + y
    assert grad(3, x, y, z) == -x - y
    assert grad(12, x, y, z) == y + x
    assert grad(16, x, y, z) == grad(0, x, y, z)


def test_remap_and_clamp():
    assert remap_01(-1.0) == 0.0
    assert remap_01(1.0) == 1.0
    assert clamp_11(5.0) == 1.0
    assert clamp_11(-5.0) == -1.0
    assert clamp_11(0.25) == 0.25
    assert remap_clamp_01(-3.0) == 0.0
    assert remap_clamp_01(3.0) == 1.0
    assert remap_clamp_01(0.0) == remap_01(0.0)


def test_max_amplitude():
    assert max_amplitude(0, 0.5) == 0.0
    assert max_amplitude(1, 0.5) == 1.0
    assert max_amplitude(4, 1.0) == 4.0


def test_default_permutation_matches_reference_table():
    state = PerlinNoise().serialize()
    assert state[:6] == bytes([151, 160, 137, 91, 90, 15])
    assert state[-1] == 180
    assert sorted(state) == list(range(256))


def test_seeded_permutation_is_a_permutation():
    assert sorted(PerlinNoise(12345).serialize()) == list(range(256))


def test_seeding_is_deterministic_and_seed_dependent():
    assert PerlinNoise(12345).serialize() == PerlinNoise(12345).serialize()
    assert PerlinNoise(12345).serialize() != PerlinNoise(54321).serialize()


def test_engine_seed_equals_integer_seed():
    assert PerlinNoise(Mt19937(42)).serialize() == PerlinNoise(42).serialize()


def test_reseed_replaces_state():
    noise = PerlinNoise()
    noise.reseed(77)
    assert noise.serialize() == PerlinNoise(77).serialize()


def test_serialize_deserialize_round_trip():
    source = PerlinNoise(3)
    target = PerlinNoise()
    target.deserialize(source.serialize())
    assert target.serialize() == source.serialize()
    assert target.noise3d(1.3, 2.7, -0.4) == source.noise3d(1.3, 2.7, -0.4)


def test_deserialize_rejects_wrong_length():
    with pytest.raises(ValueError):
        PerlinNoise().deserialize([0] * 10)


def test_deserialize_rejects_out_of_range():
    with pytest.raises(ValueError):
        PerlinNoise().deserialize([300] + [0] * 255)


@pytest.mark.parametrize("point", [(0, 0, 0), (1, 2, 3), (-5, 17, 300)])
def test_noise_is_zero_on_lattice(point):
    assert PerlinNoise(12345).noise3d(*point) == 0.0


def test_noise_range():
    noise = PerlinNoise(12345)
    assert all(-1.0 <= noise.noise3d(*p) <= 1.0 for p in SAMPLES)
    assert all(0.0 <= noise.noise3d_01(*p) <= 1.0 for p in SAMPLES)


def test_lower_dimensions_use_default_offsets():
    noise = PerlinNoise(8)
    assert noise.noise1d(1.7) == noise.noise3d(1.7, DEFAULT_Y, DEFAULT_Z)
    assert noise.noise2d(1.7, -2.2) == noise.noise3d(1.7, -2.2, DEFAULT_Z)
    assert noise.noise2d_01(1.7, -2.2) == remap_01(noise.noise2d(1.7, -2.2))
    assert noise.noise1d_01(1.7) == remap_01(noise.noise1d(1.7))


def test_noise_period_256():
    noise = PerlinNoise(12345)
    for x, y, z in SAMPLES[:20]:
        assert noise.noise3d(x + 256, y, z) == pytest.approx(noise.noise3d(x, y, z), abs=1e-9)


def test_single_octave_equals_noise():
    noise = PerlinNoise(1)
    assert noise.octave2d(0.3, 0.9, 1) == noise.noise2d(0.3, 0.9)
    assert noise.octave3d(0.3, 0.9, 1.4, 1, 0.7) == noise.noise3d(0.3, 0.9, 1.4)
    assert noise.octave1d(0.3, 1) == noise.noise1d(0.3)


def test_zero_octaves_give_zero():
    assert PerlinNoise(1).octave2d(0.3, 0.9, 0) == 0.0


def test_octave_variants_stay_in_range():
    noise = PerlinNoise(12345)
    for x, y, z in SAMPLES:
        assert -1.0 <= noise.octave3d_11(x, y, z, 6, 0.9) <= 1.0
        assert 0.0 <= noise.octave2d_01(x, y, 6, 0.9) <= 1.0
        assert -1.0 <= noise.octave1d_11(x, 6, 0.9) <= 1.0
        assert 0.0 <= noise.octave1d_01(x, 6, 0.9) <= 1.0
        assert 0.0 <= noise.octave3d_01(x, y, z, 6, 0.9) <= 1.0
        assert -1.0 <= noise.octave2d_11(x, y, 6, 0.9) <= 1.0
        assert -1.0 <= noise.normalized_octave3d(x, y, z, 4, 0.7) <= 1.0
        assert 0.0 <= noise.normalized_octave2d_01(x, y, 4, 0.7) <= 1.0


def test_normalized_octave_divides_by_max_amplitude():
    noise = PerlinNoise(5)
    raw = noise.octave2d(0.4, 1.9, 4, 0.7)
    assert noise.normalized_octave2d(0.4, 1.9, 4, 0.7) == pytest.approx(
        raw / max_amplitude(4, 0.7)
    )
    assert noise.normalized_octave1d_01(0.4, 3) == pytest.approx(
        remap_01(noise.normalized_octave1d(0.4, 3))
    )
    assert noise.normalized_octave3d_01(0.4, 1.9, 2.2, 3) == pytest.approx(
        remap_01(noise.normalized_octave3d(0.4, 1.9, 2.2, 3))
    )


def test_clamped_octave_matches_clamp_of_raw():
    noise = PerlinNoise(9)
    raw = noise.octave3d(1.1, 2.2, 3.3, 8, 1.5)
    assert noise.octave3d_11(1.1, 2.2, 3.3, 8, 1.5) == clamp_11(raw)
    assert noise.octave3d_01(1.1, 2.2, 3.3, 8, 1.5) == remap_clamp_01(raw)