import pytest

from cephalopod import easing

SAMPLES = [0.05, 0.2, 0.35, 0.5, 0.65, 0.8, 0.95]


def test_starts_at_zero():
    values = {
        "back_in": easing.back_in(0.0),
        "back_out": easing.back_out(0.0),
        "back_in_out": easing.back_in_out(0.0),
        "bounce_in": easing.bounce_in(0.0),
        "bounce_out": easing.bounce_out(0.0),
        "bounce_in_out": easing.bounce_in_out(0.0),
        "circ_in": easing.circ_in(0.0),
        "circ_out": easing.circ_out(0.0),
        "circ_in_out": easing.circ_in_out(0.0),
        "cubic_in": easing.cubic_in(0.0),
        "cubic_out": easing.cubic_out(0.0),
        "cubic_in_out": easing.cubic_in_out(0.0),
        "elastic_in": easing.elastic_in(0.0),
        "elastic_out": easing.elastic_out(0.0),
        "elastic_in_out": easing.elastic_in_out(0.0),
        "expo_in": easing.expo_in(0.0),
        "expo_out": easing.expo_out(0.0),
        "expo_in_out": easing.expo_in_out(0.0),
        "quad_in": easing.quad_in(0.0),
        "quad_out": easing.quad_out(0.0),
        "quad_in_out": easing.quad_in_out(0.0),
        "quart_in": easing.quart_in(0.0),
        "quart_out": easing.quart_out(0.0),
        "quart_in_out": easing.quart_in_out(0.0),
        "quint_in": easing.quint_in(0.0),
        "quint_out": easing.quint_out(0.0),
        "quint_in_out": easing.quint_in_out(0.0),
        "sine_in": easing.sine_in(0.0),
        "sine_out": easing.sine_out(0.0),
        "sine_in_out": easing.sine_in_out(0.0),
    }
    for name, value in values.items():
        assert value == pytest.approx(0.0, abs=1e-9), name


def test_ends_at_one():
    values = {
        "back_in": easing.back_in(1.0),
        "back_out": easing.back_out(1.0),
        "back_in_out": easing.back_in_out(1.0),
        "bounce_in": easing.bounce_in(1.0),
        "bounce_out": easing.bounce_out(1.0),
        "bounce_in_out": easing.bounce_in_out(1.0),
        "circ_in": easing.circ_in(1.0),
        "circ_out": easing.circ_out(1.0),
        "circ_in_out": easing.circ_in_out(1.0),
        "cubic_in": easing.cubic_in(1.0),
        "cubic_out": easing.cubic_out(1.0),
        "cubic_in_out": easing.cubic_in_out(1.0),
        "elastic_in": easing.elastic_in(1.0),
        "elastic_out": easing.elastic_out(1.0),
        "elastic_in_out": easing.elastic_in_out(1.0),
        "expo_in": easing.expo_in(1.0),
        "expo_out": easing.expo_out(1.0),
        "expo_in_out": easing.expo_in_out(1.0),
        "quad_in": easing.quad_in(1.0),
        "quad_out": easing.quad_out(1.0),
        "quad_in_out": easing.quad_in_out(1.0),
        "quart_in": easing.quart_in(1.0),
        "quart_out": easing.quart_out(1.0),
        "quart_in_out": easing.quart_in_out(1.0),
        "quint_in": easing.quint_in(1.0),
        "quint_out": easing.quint_out(1.0),
        "quint_in_out": easing.quint_in_out(1.0),
        "sine_in": easing.sine_in(1.0),
        "sine_out": easing.sine_out(1.0),
        "sine_in_out": easing.sine_in_out(1.0),
    }
    for name, value in values.items():
        assert value == pytest.approx(1.0, abs=1e-9), name


def test_in_out_passes_through_midpoint():
    values = {
        "back": easing.back_in_out(0.5),
        "bounce": easing.bounce_in_out(0.5),
        "circ": easing.circ_in_out(0.5),
        "cubic": easing.cubic_in_out(0.5),
        "elastic": easing.elastic_in_out(0.5),
        "expo": easing.expo_in_out(0.5),
        "quad": easing.quad_in_out(0.5),
        "quart": easing.quart_in_out(0.5),
        "quint": easing.quint_in_out(0.5),
        "sine": easing.sine_in_out(0.5),
    }
    for name, value in values.items():
        assert value == pytest.approx(0.5, abs=1e-9), name


@pytest.mark.parametrize("t", SAMPLES)
def test_out_mirrors_in(t):
    pairs = {
        "back": (easing.back_out(t), easing.back_in(1.0 - t)),
        "bounce": (easing.bounce_out(t), easing.bounce_in(1.0 - t)),
        "circ": (easing.circ_out(t), easing.circ_in(1.0 - t)),
        "cubic": (easing.cubic_out(t), easing.cubic_in(1.0 - t)),
        "elastic": (easing.elastic_out(t), easing.elastic_in(1.0 - t)),
        "expo": (easing.expo_out(t), easing.expo_in(1.0 - t)),
        "quad": (easing.quad_out(t), easing.quad_in(1.0 - t)),
        "quart": (easing.quart_out(t), easing.quart_in(1.0 - t)),
        "quint": (easing.quint_out(t), easing.quint_in(1.0 - t)),
        "sine": (easing.sine_out(t), easing.sine_in(1.0 - t)),
    }
    for name, (out_value, in_value) in pairs.items():
        assert out_value == pytest.approx(1.0 - in_value, abs=1e-9), name


@pytest.mark.parametrize("t", SAMPLES)
def test_monotone_families_stay_in_unit_range(t):
    values = [
        easing.cubic_in(t), easing.cubic_out(t), easing.cubic_in_out(t),
        easing.quad_in(t), easing.quad_out(t), easing.quad_in_out(t),
        easing.quart_in(t), easing.quart_out(t), easing.quart_in_out(t),
        easing.quint_in(t), easing.quint_out(t), easing.quint_in_out(t),
        easing.sine_in(t), easing.sine_out(t), easing.sine_in_out(t),
        easing.circ_in(t), easing.circ_out(t), easing.circ_in_out(t),
        easing.expo_in(t), easing.expo_out(t), easing.expo_in_out(t),
    ]
    assert all(0.0 <= value <= 1.0 for value in values)


@pytest.mark.parametrize("t", SAMPLES)
def test_power_curves_are_ordered(t):
    assert easing.quint_in(t) <= easing.quart_in(t) <= easing.cubic_in(t) <= easing.quad_in(t)


def test_back_in_undershoots_and_back_out_overshoots():
    assert easing.back_in(0.2) < 0.0
    assert easing.back_out(0.8) > 1.0


def test_elastic_out_overshoots():
    assert max(easing.elastic_out(t / 100) for t in range(1, 100)) > 1.0


def test_bounce_out_segment_values():
    assert easing.bounce_out(2.0 / 2.75) == pytest.approx(1.0, abs=1e-9)
    assert easing.bounce_out(1.5 / 2.75) == pytest.approx(0.75, abs=1e-9)


def test_quad_in_half():
    assert easing.quad_in(0.5) == 0.25