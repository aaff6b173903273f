import pytest

from cyclic_encoder_decoder import (
    burst_length,
    cyclic_shifts,
    enumerate_cyclic_bursts,
    enumerate_weight_errors,
    hamming_distance,
    hamming_weight,
    parity,
    poly_as_str,
    poly_divmod,
    rotate_left,
    rotate_right,
    transpose,
    word_as_str,
)


def test_weight_distance_and_parity():
    assert hamming_weight(0) == 0
    assert hamming_weight(0b1011) == 3
    # Only the low width bits count
    assert hamming_weight(0b11110000, width=4) == 0
    assert hamming_distance(0b111, 0b011) == 1
    assert hamming_distance(0b1010, 0b0101, width=3) == 3
    assert parity(0b111) == 1
    assert parity(0b1001) == 0


def test_rotations_wrap_within_width():
    assert rotate_left(0b100, 3) == 0b001
    assert rotate_left(0b001, 3, 2) == 0b100
    assert rotate_right(0b001, 3) == 0b100
    assert rotate_right(0b1100, 4, 2) == 0b0011
    # Rotating by the width (or a multiple) is the identity
    assert rotate_left(0b1011, 7, 7) == 0b1011
    assert rotate_right(0b1011, 7, 14) == 0b1011
    for amount in range(7):
        assert rotate_right(rotate_left(0b0110101, 7, amount), 7, amount) == 0b0110101


def test_cyclic_shifts_order():
    assert cyclic_shifts(0b001, 3) == [0b001, 0b010, 0b100]
    shifts = cyclic_shifts(0b0001011, 7)
    assert len(shifts) == 7
    assert shifts[0] == 0b0001011
    assert shifts[5] == 0b1100010  # x^5 * (x^3 + x + 1) mod x^7 - 1
    assert all(hamming_weight(s) == 3 for s in shifts)


@pytest.mark.parametrize("pattern,width,expected", [
    (0, 5, 0),
    (0b1, 5, 1),
    (0b110, 5, 2),
    (0b1001, 4, 2),        # end-around
    (0b0101, 4, 3),
    (0b10101, 5, 4),
    (0b100000001, 9, 2),
    (0b111, 3, 3),
    (0b1000101, 7, 4),
])
def test_burst_length(pattern, width, expected):
    assert burst_length(pattern, width) == expected


def test_burst_length_rotation_invariant():
    for pattern in (0b0010110, 0b1000011, 0b0101000):
        lengths = {burst_length(p, 7) for p in cyclic_shifts(pattern, 7)}
        assert len(lengths) == 1


def test_transpose_columns_msb_first():
    # Column c of the input ends up at index width-1-c
    t = transpose([0b011, 0b101], 3)
    assert t == [0b01, 0b10, 0b11]
    # Transposing twice gives back the original rows
    rows = [0b1101000, 0b0110100, 0b0011010]
    assert transpose(transpose(rows, 7), 3) == rows


def test_enumerate_cyclic_bursts_exact_counts():
    # Length 1: singles; length 2: adjacent doubles incl. end-around
    assert enumerate_cyclic_bursts(7, 1, exact=True) == [1 << i for i in range(7)]
    doubles = enumerate_cyclic_bursts(7, 2, exact=True)
    assert len(doubles) == 7
    assert 0b1000001 in doubles
    # Length 3: endpoints plus optional middle bit, 2 variants per start
    triples = enumerate_cyclic_bursts(15, 3, exact=True)
    assert len(triples) == 30
    assert 0b101 in triples and 0b111 in triples


def test_enumerate_cyclic_bursts_classifies_by_minimal_span():
    # In 3 bits 101 is an end-around 2-burst, never a 3-burst
    assert 0b101 not in enumerate_cyclic_bursts(3, 3, exact=True)
    assert 0b101 in enumerate_cyclic_bursts(3, 2, exact=True)
    upto = enumerate_cyclic_bursts(15, 3)
    assert len(upto) == 60
    assert upto == sorted(upto)
    assert all(1 <= burst_length(p, 15) <= 3 for p in upto)


def test_enumerate_cyclic_bursts_out_of_range_lengths():
    assert enumerate_cyclic_bursts(5, 0, exact=True) == []
    assert enumerate_cyclic_bursts(5, 6, exact=True) == []


def test_enumerate_weight_errors():
    assert enumerate_weight_errors(4, 0) == [0]
    assert enumerate_weight_errors(3, 2) == [0b011, 0b101, 0b110]
    assert len(enumerate_weight_errors(15, 2)) == 105


def test_polynomial_helpers():
    # x^7 - 1 = (x^3 + x + 1)(x^4 + x^2 + x + 1)
    q, rem = poly_divmod((1 << 7) | 1, 0b1011)
    assert rem == 0
    assert q == 0b10111
    assert poly_as_str(0b1011) == "x^3 + x + 1"
    assert poly_as_str(1) == "1"
    with pytest.raises(ZeroDivisionError):
        poly_divmod(0b101, 0)


def test_word_as_str_msb_first():
    assert word_as_str(0b0001011, 7) == "0001011"
    assert word_as_str(0b11, 2) == "11"
