"""
Binary cyclic code encoder and decoder.

Summary
-------
This module implements binary cyclic error-correcting codes of short length n.
A code is described by a generator matrix G (k rows) and a parity-check matrix
H (n-k rows); words are plain Python ints where bit i is the coefficient of x^i
in GF(2)[x]/(x^n - 1). From (G, H, n) the code enumerates its codebook, derives
the minimum distance, encodes messages and decodes received words.

Decoding computes the syndromes of all n cyclic shifts of the received word and
tries to "trap" the error in the r = n-k high-order positions of one of the
shifts. Two acceptance policies are available:

- 'weight_bound': accept the first shift whose trapped pattern has weight
  <= (d_min - 1) // 2; fall back to nearest-neighbour (coset leader) decoding.
- 'burst_length': accept the trapped pattern with the largest burst length
  <= max_burst_length (lowest shift first); report failure otherwise.

Every syndrome-decoded word is checked against the code. A word that fails the
check is reported with status 'inconsistent', which is distinct from
'uncorrectable'.

Notes and scope
---------------
- n is limited to MAX_CODE_LENGTH bits and the codebook is enumerated
  exhaustively (2^n candidates), so this targets small teaching/lab codes.
- Matrices are not checked for rank or for G's rows being codewords; a
  non-cyclic H shows up as 'inconsistent' decodes rather than at construction.
- CyclicCodeBuilder derives systematic G and H from a generator polynomial.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import csv
import itertools
import json
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple


log = logging.getLogger(__name__)

Word = int

MAX_CODE_LENGTH = 32
DEFAULT_MAX_BURST_LENGTH = 3

STRATEGY_WEIGHT = "weight_bound"
STRATEGY_BURST = "burst_length"
STRATEGIES = (STRATEGY_WEIGHT, STRATEGY_BURST)

STATUS_NO_ERROR = "no_error"
STATUS_CORRECTED = "corrected"
STATUS_NEAREST_NEIGHBOR = "nearest_neighbor"
STATUS_UNCORRECTABLE = "uncorrectable"
STATUS_INCONSISTENT = "inconsistent"


# --- GF(2) word arithmetic ---------------------------------------------------

def _mask(width: int) -> int:
    return (1 << width) - 1


def hamming_weight(word: Word, width: Optional[int] = None) -> int:
    if width is not None:
        word &= _mask(width)
    return bin(word).count("1")


def hamming_distance(a: Word, b: Word, width: Optional[int] = None) -> int:
    return hamming_weight(a ^ b, width)


def parity(word: Word) -> int:
    return hamming_weight(word) & 1


def rotate_left(word: Word, width: int, amount: int = 1) -> Word:
    """Cyclic left rotation within a width-bit field (multiplication by x^amount)."""
    word &= _mask(width)
    amount %= width
    if amount == 0:
        return word
    return ((word << amount) | (word >> (width - amount))) & _mask(width)


def rotate_right(word: Word, width: int, amount: int = 1) -> Word:
    """Cyclic right rotation within a width-bit field; low bits wrap to the top."""
    return rotate_left(word, width, -amount % width)


def cyclic_shifts(word: Word, width: int) -> List[Word]:
    """Return [word, x*word, x^2*word, ...] as width left rotations (index 0 unshifted)."""
    return [rotate_left(word, width, i) for i in range(width)]


def burst_length(pattern: Word, width: int) -> int:
    """Minimal cyclic span covering all set bits of pattern in a width-bit field.

    Zero pattern -> 0; a single bit -> 1; bits 0 and width-1 -> 2 (end-around).
    """
    pattern &= _mask(width)
    if pattern == 0:
        return 0
    best = width
    for rotated in cyclic_shifts(pattern, width):
        lowest = (rotated & -rotated).bit_length() - 1
        span = rotated.bit_length() - lowest
        if span < best:
            best = span
    return best


def transpose(matrix: Sequence[Word], width: int) -> List[Word]:
    """Transpose a (rows x width) matrix, keeping rows listed MSB first.

    Entry (width-1-c) of the result is column c of the input; its bit (rows-1-j)
    is bit c of input row j.
    """
    rows = len(matrix)
    out = [0] * width
    for j, row in enumerate(matrix):
        for c in range(width):
            if (row >> c) & 1:
                out[width - 1 - c] |= 1 << (rows - 1 - j)
    return out


# --- GF(2)[x] polynomials -----------------------------------------------------

def poly_degree(p: int) -> int:
    return p.bit_length() - 1


def poly_divmod(a: int, b: int) -> Tuple[int, int]:
    if b == 0:
        raise ZeroDivisionError("polynomial division by zero")
    q = 0
    db = poly_degree(b)
    while a and poly_degree(a) >= db:
        shift = poly_degree(a) - db
        q |= 1 << shift
        a ^= b << shift
    return q, a


def poly_mod(a: int, b: int) -> int:
    return poly_divmod(a, b)[1]


def poly_as_str(p: int) -> str:
    if p == 0:
        return "0"
    terms: List[str] = []
    for i in range(poly_degree(p), -1, -1):
        if (p >> i) & 1:
            terms.append("1" if i == 0 else ("x" if i == 1 else f"x^{i}"))
    return " + ".join(terms)


# --- Error pattern enumeration ------------------------------------------------

def enumerate_cyclic_bursts(width: int, length: int, exact: bool = False) -> List[Word]:
    """Enumerate error patterns by cyclic burst length.

    A burst of length L has its first and last erroneous bits L-1 positions apart
    (end-around allowed) and any interior combination; L=1 is a single error.
    With exact=False, every burst of length 1..length is returned. Patterns are
    classified by their minimal cyclic span, so a pattern whose end-around span
    is shorter is only listed under that shorter length. Sorted ascending.
    """
    lengths = [length] if exact else list(range(1, length + 1))
    patterns = set()
    for L in lengths:
        if L < 1 or L > width:
            continue
        for start in range(width):
            if L == 1:
                patterns.add(1 << start)
                continue
            base = 1 | (1 << (L - 1))
            for interior in range(1 << (L - 2)):
                pat = rotate_left(base | (interior << 1), width, start)
                if burst_length(pat, width) == L:
                    patterns.add(pat)
    return sorted(patterns)


def enumerate_weight_errors(width: int, weight: int) -> List[Word]:
    """All width-bit patterns with exactly `weight` set bits, ascending."""
    out: List[Word] = []
    for positions in itertools.combinations(range(width), weight):
        pat = 0
        for i in positions:
            pat |= 1 << i
        out.append(pat)
    return sorted(out)


# --- Presentation helpers -----------------------------------------------------

def word_as_str(word: Word, width: int) -> str:
    """Bit string of word, most significant (x^(width-1)) first."""
    return format(word & _mask(width), f"0{width}b") if width else ""


def matrix_as_str(rows: Sequence[Word], width: int) -> str:
    return "\n".join(word_as_str(row, width) for row in rows)


@dataclass(frozen=True)
class DecodeResult:
    word: Word
    success: bool
    status: str
    shift: Optional[int] = None  # accepted cyclic shift, None when not syndrome-decoded
    error_pattern: Word = 0  # pattern XOR-ed into the received word


InconsistencyHook = Callable[[Word, DecodeResult], None]


class CyclicCode:
    """A binary cyclic code of length n given by its generator and parity-check matrices.

    Construction enumerates the codebook, the minimum distance, the parity
    transpose used for syndromes and the trapping table for the window [k, n).
    Nothing is mutated afterwards.
    """

    def __init__(self, generator: Sequence[Word], parity_check: Sequence[Word], n: int,
                 strategy: str = STRATEGY_WEIGHT, max_burst_length: int = DEFAULT_MAX_BURST_LENGTH,
                 on_inconsistent: Optional[InconsistencyHook] = None) -> None:
        n = int(n)
        if not 1 <= n <= MAX_CODE_LENGTH:
            raise ValueError(f"Code length n={n} outside supported range 1..{MAX_CODE_LENGTH}")
        if strategy not in STRATEGIES:
            raise ValueError(f"Unsupported strategy '{strategy}'")
        if int(max_burst_length) < 0:
            raise ValueError("max_burst_length must be non-negative")
        for name, matrix in (("generator", generator), ("parity_check", parity_check)):
            for j, row in enumerate(matrix):
                if int(row) < 0 or int(row) >> n:
                    raise ValueError(f"{name} row {j} ({row:#x}) does not fit in n={n} bits")
        if len(generator) + len(parity_check) != n:
            raise ValueError(
                f"Expected k + r == n, got k={len(generator)}, r={len(parity_check)}, n={n}"
            )

        self.n = n
        self.k = len(generator)
        self.r = len(parity_check)
        self.generator: Tuple[Word, ...] = tuple(int(x) for x in generator)
        self.parity_check: Tuple[Word, ...] = tuple(int(x) for x in parity_check)
        self.strategy = strategy
        self.max_burst_length = int(max_burst_length)
        self.on_inconsistent = on_inconsistent

        self.parity_transpose: Tuple[Word, ...] = tuple(transpose(self.parity_check, n))
        self._codebook: Tuple[Word, ...] = tuple(w for w in range(1 << n) if self.is_codeword(w))
        nonzero_weights = [hamming_weight(w) for w in self._codebook if w]
        self._min_distance: Optional[int] = min(nonzero_weights) if nonzero_weights else None
        self._messages: Dict[Word, int] = {}
        for m in range(1 << self.k):
            self._messages.setdefault(self.encode(m), m)
        self._trap_columns = self._build_trap_columns()

        log.info(
            f"CyclicCode(n={n},k={self.k},codewords={len(self._codebook)},"
            f"d_min={self._min_distance},strategy={strategy})"
        )

    # --- Codebook ---
    def is_codeword(self, word: Word) -> bool:
        return all(parity(word & row) == 0 for row in self.parity_check)

    def codebook(self) -> Tuple[Word, ...]:
        return self._codebook

    def min_distance(self) -> Optional[int]:
        return self._min_distance

    @property
    def correction_bound(self) -> int:
        """Guaranteed random-error correction t = (d_min - 1) // 2."""
        if self._min_distance is None:
            return 0
        return (self._min_distance - 1) // 2

    # --- Encoding ---
    def encode(self, message: int) -> Word:
        if not 0 <= message < (1 << self.k):
            raise ValueError(f"Message {message} does not fit in k={self.k} bits")
        encoded = 0
        for i in range(self.k):
            if (message >> i) & 1:
                encoded ^= self.generator[self.k - 1 - i]
        return encoded

    def decode_to_message(self, received: Word) -> Tuple[Optional[int], bool]:
        """Decode and map the codeword back to its message (None when decoding failed)."""
        word, ok = self.decode(received)
        if not ok:
            return None, False
        return self._messages.get(word), ok

    # --- Syndromes ---
    def syndrome(self, word: Word) -> Word:
        s = 0
        for j in range(self.n):
            if (word >> j) & 1:
                s ^= self.parity_transpose[self.n - 1 - j]
        return s

    def syndromes_for(self, received: Word) -> List[Word]:
        return [self.syndrome(shifted) for shifted in cyclic_shifts(received, self.n)]

    def _build_trap_columns(self) -> Optional[List[Word]]:
        """Solve H e^T = 1 << b for e confined to positions [k, n), for every syndrome bit b.

        Gaussian elimination over the window columns of H, keyed by pivot bit.
        Returns None when the window columns are linearly dependent.
        """
        basis: Dict[int, Tuple[int, Word]] = {}
        for pos in range(self.k, self.n):
            vec, pattern = self.syndrome(1 << pos), 1 << pos
            while vec:
                top = vec.bit_length() - 1
                if top not in basis:
                    basis[top] = (vec, pattern)
                    break
                vec ^= basis[top][0]
                pattern ^= basis[top][1]
            if vec == 0:
                log.warning(
                    f"Parity-check columns {self.k}..{self.n - 1} are dependent; "
                    "syndrome trapping disabled"
                )
                return None

        columns: List[Word] = []
        for b in range(self.r):
            vec, pattern = 1 << b, 0
            while vec:
                top_vec, top_pattern = basis[vec.bit_length() - 1]
                vec ^= top_vec
                pattern ^= top_pattern
            columns.append(pattern)
        return columns

    def error_pattern_for(self, syndrome: Word) -> Optional[Word]:
        """The word confined to positions [k, n) whose syndrome is `syndrome`.

        For a systematic H (see CyclicCodeBuilder) this is syndrome << k.
        None when the trapping window is unusable.
        """
        if self._trap_columns is None:
            return None
        pattern = 0
        for b, column in enumerate(self._trap_columns):
            if (syndrome >> b) & 1:
                pattern ^= column
        return pattern

    # --- Decoding ---
    def nearest_neighbor(self, received: Word) -> Word:
        """Codeword closest to received; ties go to the smallest codeword."""
        return min(self._codebook, key=lambda c: hamming_weight(received ^ c))

    def decode(self, received: Word) -> Tuple[Word, bool]:
        result = self.decode_detailed(received)
        return result.word, result.success

    def decode_detailed(self, received: Word) -> DecodeResult:
        if not 0 <= received < (1 << self.n):
            raise ValueError(f"Received word {received} does not fit in n={self.n} bits")
        syndromes = self.syndromes_for(received)
        trapped = None
        if self._trap_columns is not None:
            trapped = [self.error_pattern_for(s) for s in syndromes]
        if self.strategy == STRATEGY_BURST:
            result = self._decode_burst(received, trapped)
        else:
            result = self._decode_weight(received, trapped)
        return self._post_check(received, result)

    def _realign(self, received: Word, shift: int, pattern: Word) -> DecodeResult:
        # Shift i carries x^i * e; undo it to place the error where it was received.
        error = rotate_right(pattern, self.n, shift)
        status = STATUS_CORRECTED if error else STATUS_NO_ERROR
        log.debug(f"accepted shift {shift}: error={word_as_str(error, self.n)}")
        return DecodeResult(received ^ error, True, status, shift, error)

    def _decode_weight(self, received: Word, trapped: Optional[List[Word]]) -> DecodeResult:
        bound = self.correction_bound
        if trapped is not None:
            for shift, pattern in enumerate(trapped):
                if hamming_weight(pattern) <= bound:
                    return self._realign(received, shift, pattern)
        decoded = self.nearest_neighbor(received)
        log.debug(f"no syndrome within weight {bound}; used nearest-neighbor decoding")
        return DecodeResult(decoded, True, STATUS_NEAREST_NEIGHBOR, None, decoded ^ received)

    def _decode_burst(self, received: Word, trapped: Optional[List[Word]]) -> DecodeResult:
        if trapped is not None:
            lengths = [burst_length(p, self.n) for p in trapped]
            for desired in range(self.max_burst_length, -1, -1):
                if desired in lengths:
                    shift = lengths.index(desired)
                    return self._realign(received, shift, trapped[shift])
        log.debug(
            f"word {word_as_str(received, self.n)} failed to decode: "
            f"no burst of length <= {self.max_burst_length}"
        )
        return DecodeResult(received, False, STATUS_UNCORRECTABLE)

    def _post_check(self, received: Word, result: DecodeResult) -> DecodeResult:
        if result.status not in (STATUS_NO_ERROR, STATUS_CORRECTED) or self.is_codeword(result.word):
            return result
        result = replace(result, success=False, status=STATUS_INCONSISTENT)
        log.warning(
            f"decoded word {word_as_str(result.word, self.n)} from "
            f"{word_as_str(received, self.n)} (shift {result.shift}) is not a codeword"
        )
        if self.on_inconsistent is not None:
            self.on_inconsistent(received, result)
        return result

    # --- Capability analysis ---
    def burst_correcting_capability(self) -> int:
        """Largest b such that all cyclic bursts of length <= b have distinct syndromes.

        Searched up to the Reiger bound r // 2.
        """
        seen: Dict[Word, Word] = {0: 0}
        capability = 0
        for length in range(1, self.r // 2 + 1):
            for pattern in enumerate_cyclic_bursts(self.n, length, exact=True):
                s = self.syndrome(pattern)
                if s in seen:
                    return capability
                seen[s] = pattern
            capability = length
        return capability

    # --- Presentation ---
    def summary(self) -> str:
        lines = [
            f"n={self.n} k={self.k} r={self.r} codewords={len(self._codebook)} "
            f"d_min={self._min_distance} t={self.correction_bound}",
            f"strategy={self.strategy} max_burst_length={self.max_burst_length}",
        ]
        return "\n".join(lines)

    # --- Persistence helpers ---
    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dictionary describing this code."""
        return {
            "version": 1,
            "n": self.n,
            "generator": list(self.generator),
            "parity_check": list(self.parity_check),
            "strategy": self.strategy,
            "max_burst_length": self.max_burst_length,
        }

    @staticmethod
    def from_dict(d: Dict[str, object]) -> "CyclicCode":
        """Reconstruct a CyclicCode previously produced by to_dict()."""
        version = d.get("version", 1)
        if version != 1:
            raise ValueError(f"Unsupported persisted code version: {version}")
        for key in ("generator", "parity_check"):
            if not isinstance(d[key], list):
                raise TypeError(f"{key} must be a list in persisted data")
        return CyclicCode(
            generator=[int(x) for x in d["generator"]],  # type: ignore[union-attr]
            parity_check=[int(x) for x in d["parity_check"]],  # type: ignore[union-attr]
            n=int(d["n"]),  # type: ignore[arg-type]
            strategy=str(d.get("strategy", STRATEGY_WEIGHT)),
            max_burst_length=int(d.get("max_burst_length", DEFAULT_MAX_BURST_LENGTH)),  # type: ignore[arg-type]
        )

    def save_json(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @staticmethod
    def load_json(path: str) -> "CyclicCode":
        with open(path, "r", encoding="utf-8") as f:
            d = json.load(f)
        return CyclicCode.from_dict(d)

    # --- Export helpers ---
    def codebook_to_csv(self, path: str, include_header: bool = True, delimiter: str = ",") -> None:
        """Dump the codebook as CSV: index, value, bits (MSB first), weight, message."""
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter=delimiter)
            if include_header:
                writer.writerow(["index", "value", "bits", "weight", "message"])
            for idx, word in enumerate(self._codebook):
                message = self._messages.get(word)
                writer.writerow([idx, word, word_as_str(word, self.n), hamming_weight(word),
                                 "" if message is None else message])

    def to_lut_csv(self, path: str, include_header: bool = True, delimiter: str = ",") -> None:
        """Dump the syndrome -> trapped error pattern table for all 2^r syndromes.

        Columns: syndrome_dec, syndrome_bin, error_bin, weight, burst_length.
        The error columns are empty when trapping is disabled.
        """
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter=delimiter)
            if include_header:
                writer.writerow(["syndrome_dec", "syndrome_bin", "error_bin", "weight", "burst_length"])
            for s in range(1 << self.r):
                pattern = self.error_pattern_for(s)
                if pattern is None:
                    writer.writerow([s, word_as_str(s, self.r), "", "", ""])
                    continue
                writer.writerow([s, word_as_str(s, self.r), word_as_str(pattern, self.n),
                                 hamming_weight(pattern), burst_length(pattern, self.n)])

    def matrix_numpy(self, which: str = "H", dtype: Optional["np.dtype"] = None):  # type: ignore[name-defined]
        """Return G or H as a 0/1 array, one row per matrix row, column c = bit c."""
        try:
            import numpy as np  # type: ignore
        except Exception as e:  # pragma: no cover - runtime environment
            raise RuntimeError("NumPy is required for matrix_numpy; please install numpy") from e
        if which == "G":
            rows = self.generator
        elif which == "H":
            rows = self.parity_check
        else:
            raise ValueError("which must be 'G' or 'H'")
        bits = [[(row >> c) & 1 for c in range(self.n)] for row in rows]
        return np.array(bits, dtype=dtype if dtype is not None else np.uint8).reshape(len(rows), self.n)


class CyclicCodeBuilder:
    """Derive systematic G and H for the cyclic code generated by g(x).

    Generator row j is x^(k-1-j) g(x), so encode(u) = u(x) g(x). Column j of H is
    x^((j + r) mod n) mod g(x): positions k..n-1 map to the unit syndromes, which
    puts the trapping window in identity form.
    """

    def __init__(self, n: int, generator_poly: int) -> None:
        self.n = int(n)
        self.generator_poly = int(generator_poly)
        if not 1 <= self.n <= MAX_CODE_LENGTH:
            raise ValueError(f"Code length n={self.n} outside supported range 1..{MAX_CODE_LENGTH}")
        if self.generator_poly <= 0:
            raise ValueError("Generator polynomial must be non-zero")
        if poly_degree(self.generator_poly) > self.n:
            raise ValueError(f"Generator polynomial degree exceeds n={self.n}")
        x_n_minus_1 = (1 << self.n) | 1
        if poly_mod(x_n_minus_1, self.generator_poly) != 0:
            raise ValueError(
                f"g(x) = {poly_as_str(self.generator_poly)} does not divide x^{self.n} - 1"
            )
        self.r = poly_degree(self.generator_poly)
        self.k = self.n - self.r

    def check_polynomial(self) -> int:
        """h(x) = (x^n - 1) / g(x)."""
        return poly_divmod((1 << self.n) | 1, self.generator_poly)[0]

    def generator_matrix(self) -> List[Word]:
        return [self.generator_poly << (self.k - 1 - j) for j in range(self.k)]

    def parity_check_matrix(self) -> List[Word]:
        columns = [poly_mod(1 << ((c + self.r) % self.n), self.generator_poly) for c in range(self.n)]
        rows: List[Word] = []
        for j in range(self.r):
            row = 0
            for c, col in enumerate(columns):
                if (col >> (self.r - 1 - j)) & 1:
                    row |= 1 << c
            rows.append(row)
        return rows

    def build(self, strategy: str = STRATEGY_WEIGHT, max_burst_length: int = DEFAULT_MAX_BURST_LENGTH,
              on_inconsistent: Optional[InconsistencyHook] = None) -> CyclicCode:
        log.info(f"CyclicCodeBuilder: n={self.n}, k={self.k}, g(x)={poly_as_str(self.generator_poly)}")
        return CyclicCode(
            generator=self.generator_matrix(),
            parity_check=self.parity_check_matrix(),
            n=self.n,
            strategy=strategy,
            max_burst_length=max_burst_length,
            on_inconsistent=on_inconsistent,
        )


def make_quick_code(strategy: str = STRATEGY_WEIGHT) -> CyclicCode:
    """(7, 4) Hamming code, g(x) = x^3 + x + 1, for demos."""
    return CyclicCodeBuilder(n=7, generator_poly=0b1011).build(strategy=strategy, max_burst_length=1)


def main_cli(argv: Optional[Sequence[str]] = None) -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Binary cyclic code encoder/decoder demo")
    parser.add_argument("--poly", type=lambda s: int(s, 0), default=None,
                        help="Generator polynomial as an int (bit i = coefficient of x^i), e.g. 0b1011")
    parser.add_argument("--n", type=int, default=None, help="Code length (required with --poly)")
    parser.add_argument("--load-json", dest="load_json", type=str, default=None, help="Load a code saved with --save-json")
    parser.add_argument("--strategy", choices=list(STRATEGIES), default=None, help="Decoding strategy")
    parser.add_argument("--max-burst", dest="max_burst", type=int, default=None,
                        help="Max correctable burst length for the burst_length strategy")
    parser.add_argument("--print-G", dest="print_G", action="store_true", help="Print the generator matrix")
    parser.add_argument("--print-H", dest="print_H", action="store_true", help="Print the parity-check matrix")
    parser.add_argument("--print-codebook", dest="print_codebook", action="store_true", help="Print all codewords")
    parser.add_argument("--capability", action="store_true", help="Print the burst-correcting capability")
    parser.add_argument("--encode", type=lambda s: int(s, 0), action="append", default=[],
                        help="Encode a message (repeatable)")
    parser.add_argument("--decode", type=lambda s: int(s, 0), action="append", default=[],
                        help="Decode a received word (repeatable)")
    parser.add_argument("--save-json", dest="save_json", type=str, default=None, help="Path to write the code as JSON")
    parser.add_argument("--dump-codebook-csv", dest="dump_codebook_csv", type=str, default=None,
                        help="Path to write the codebook as CSV")
    parser.add_argument("--dump-lut-csv", dest="dump_lut_csv", type=str, default=None,
                        help="Path to write the syndrome -> error pattern table as CSV")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.load_json:
        code = CyclicCode.load_json(args.load_json)
        if args.strategy is not None or args.max_burst is not None:
            code = CyclicCode(code.generator, code.parity_check, code.n,
                              strategy=args.strategy or code.strategy,
                              max_burst_length=code.max_burst_length if args.max_burst is None else args.max_burst)
        print(f"Loaded code from {args.load_json}")
    elif args.poly is not None:
        if args.n is None:
            parser.error("--poly requires --n")
        builder = CyclicCodeBuilder(n=args.n, generator_poly=args.poly)
        code = builder.build(
            strategy=args.strategy or STRATEGY_WEIGHT,
            max_burst_length=DEFAULT_MAX_BURST_LENGTH if args.max_burst is None else args.max_burst,
        )
        print(f"g(x) = {poly_as_str(builder.generator_poly)}")
        print(f"h(x) = {poly_as_str(builder.check_polynomial())}")
    else:
        print("No --poly given; using the (7, 4) Hamming code.")
        code = make_quick_code(strategy=args.strategy or STRATEGY_WEIGHT)

    print(code.summary())
    if args.print_G:
        print("Generator matrix:")
        print(matrix_as_str(code.generator, code.n))
    if args.print_H:
        print("Parity-check matrix:")
        print(matrix_as_str(code.parity_check, code.n))
    if args.print_codebook:
        print("Codewords:")
        for word in code.codebook():
            print(f"{word:>{len(str(1 << code.n))}d} {word_as_str(word, code.n)}")
        print(f"num codewords: {len(code.codebook())}")
    if args.capability:
        print(f"burst-correcting capability: {code.burst_correcting_capability()}")
    for message in args.encode:
        print(f"encode {message} -> {word_as_str(code.encode(message), code.n)}")
    for received in args.decode:
        result = code.decode_detailed(received)
        print(f"decode {word_as_str(received, code.n)} -> {word_as_str(result.word, code.n)} "
              f"ok={result.success} status={result.status}")
    if args.save_json:
        code.save_json(args.save_json)
        print(f"Wrote code JSON: {args.save_json}")
    if args.dump_codebook_csv:
        code.codebook_to_csv(args.dump_codebook_csv)
        print(f"Wrote codebook CSV: {args.dump_codebook_csv}")
    if args.dump_lut_csv:
        code.to_lut_csv(args.dump_lut_csv)
        print(f"Wrote LUT CSV to: {args.dump_lut_csv}")


if __name__ == "__main__":
    main_cli()
