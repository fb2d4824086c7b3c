import pytest

from spectral_graph.validate import ValidationError, parse_coordinates


def test_parse_coordinates_accepts_numbers():
    ex, ey = parse_coordinates(["0", " -0.5 ", "1e-1"], ["1", "2", "3"], 3)

    assert ex == [0.0, -0.5, 0.1]
    assert ey == [1.0, 2.0, 3.0]


def test_every_bad_field_is_reported():
    with pytest.raises(ValidationError) as exc:
        parse_coordinates(["0", "abc"], ["", "1"], 2)

    message = str(exc.value)
    assert 'x2: expected a number, got "abc"' in message
    assert 'y1: expected a number, got ""' in message


@pytest.mark.parametrize("text", ["nan", "inf", "-inf"])
def test_non_finite_values_are_rejected(text):
    with pytest.raises(ValidationError) as exc:
        parse_coordinates([text], ["0"], 1)

    assert "x1: value must be finite" in str(exc.value)


def test_count_mismatch_is_rejected():
    with pytest.raises(ValidationError) as exc:
        parse_coordinates(["0", "1"], ["0"], 2)

    assert "expected 2 x and 2 y values" in str(exc.value)
