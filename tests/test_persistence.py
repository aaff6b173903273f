import csv
import json

import pytest

from cyclic_encoder_decoder import (
    STRATEGY_BURST,
    CyclicCode,
    CyclicCodeBuilder,
    burst_length,
    enumerate_cyclic_bursts,
)


def build_sample_code():
    return CyclicCodeBuilder(7, 0b11101).build(strategy=STRATEGY_BURST, max_burst_length=2)


def test_save_load_roundtrip(tmp_path):
    code = build_sample_code()
    path = tmp_path / "code.json"
    code.save_json(str(path))
    assert path.exists()

    loaded = CyclicCode.load_json(str(path))
    # Basic structural equality checks
    assert loaded.n == code.n
    assert loaded.k == code.k
    assert loaded.generator == code.generator
    assert loaded.parity_check == code.parity_check
    assert loaded.strategy == code.strategy
    assert loaded.max_burst_length == code.max_burst_length
    assert loaded.codebook() == code.codebook()

    # Inject bursts and ensure both decode identically
    cw = code.encode(0b101)
    assert loaded.encode(0b101) == cw
    for e in enumerate_cyclic_bursts(code.n, 3):
        assert code.decode_detailed(cw ^ e) == loaded.decode_detailed(cw ^ e)


def test_from_dict_defaults_and_version():
    d = {"n": 3, "generator": [7], "parity_check": [3, 5]}
    code = CyclicCode.from_dict(d)
    assert code.codebook() == (0, 7)
    with pytest.raises(ValueError):
        CyclicCode.from_dict(dict(d, version=2))
    with pytest.raises(TypeError):
        CyclicCode.from_dict(dict(d, generator="7"))


def test_json_is_plain_data(tmp_path):
    path = tmp_path / "code.json"
    build_sample_code().save_json(str(path))
    with open(path, encoding="utf-8") as f:
        d = json.load(f)
    assert d["version"] == 1
    assert d["n"] == 7
    assert d["generator"] == [0b1110100, 0b0111010, 0b0011101]
    assert d["strategy"] == "burst_length"


def test_codebook_csv(tmp_path):
    code = build_sample_code()
    path = tmp_path / "codebook.csv"
    code.codebook_to_csv(str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == len(code.codebook())
    for row, word in zip(rows, code.codebook()):
        assert int(row["value"]) == word
        assert int(row["bits"], 2) == word
        assert code.encode(int(row["message"])) == word


def test_lut_csv_covers_all_syndromes(tmp_path):
    code = build_sample_code()
    path = tmp_path / "lut.csv"
    code.to_lut_csv(str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1 << code.r
    for row in rows:
        s = int(row["syndrome_dec"])
        pattern = int(row["error_bin"], 2)
        assert code.syndrome(pattern) == s
        assert int(row["burst_length"]) == burst_length(pattern, code.n)


def test_matrix_numpy():
    np = pytest.importorskip("numpy")
    code = build_sample_code()
    h = code.matrix_numpy("H")
    assert h.shape == (code.r, code.n)
    assert h.dtype == np.uint8
    g = code.matrix_numpy("G")
    # G H^T = 0 over GF(2)
    assert not ((g.astype(int) @ h.T.astype(int)) % 2).any()
    with pytest.raises(ValueError):
        code.matrix_numpy("X")
