from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

NEIGHBOR_COUNT = 8                       # Moore neighborhood
RULE_BIT_LEN = 2 * (NEIGHBOR_COUNT + 1)  # dead and live outcomes for sums 0..8


@dataclass(frozen=True)
class LifeRule:
    """
    Outer-totalistic binary rule for the 2-D Moore neighborhood.
    Bitstring layout (length 18):
        dead cell outcomes: indices 0 .. 8   (sum = 0-8)
        live cell outcomes: indices 9 .. 17
    """
    rule_bits: str

    def __post_init__(self) -> None:
        if len(self.rule_bits) != RULE_BIT_LEN:
            raise ValueError(
                f"rule_bits length {len(self.rule_bits)} "
                f"does not match expected {RULE_BIT_LEN} "
                f"(2 states × {NEIGHBOR_COUNT + 1} sums)."
            )
        if not set(self.rule_bits) <= {"0", "1"}:
            raise ValueError(f"rule_bits must be binary, got {self.rule_bits!r}")

    def __call__(self, is_alive: bool, neighbor_sum: int) -> bool:
        """Return whether the cell is alive next generation."""
        if not (0 <= neighbor_sum <= NEIGHBOR_COUNT):
            raise ValueError("invalid neighbor sum")

        idx = int(is_alive) * (NEIGHBOR_COUNT + 1) + neighbor_sum
        return self.rule_bits[idx] == "1"

    @classmethod
    def from_int(cls, code: int) -> "LifeRule":
        """
        Build a LifeRule from an integer in the range 0 .. 2**18 - 1.
        """
        rule_bits = f"{code:0{RULE_BIT_LEN}b}"          # zero-padded binary
        return cls(rule_bits)

    @classmethod
    def from_sets(cls, born: Iterable[int], survive: Iterable[int]) -> "LifeRule":
        born, survive = set(born), set(survive)
        sums = range(NEIGHBOR_COUNT + 1)
        bits = "".join("1" if n in born else "0" for n in sums)
        bits += "".join("1" if n in survive else "0" for n in sums)
        return cls(bits)

    @classmethod
    def from_notation(cls, notation: str) -> "LifeRule":
        """Parse birth/survival notation such as 'B3/S23'."""
        if not isinstance(notation, str):
            raise ValueError(f"rule notation must be a string, got {notation!r}")
        parts = notation.strip().upper().split("/")
        if len(parts) != 2 or not parts[0].startswith("B") or not parts[1].startswith("S"):
            raise ValueError(f"rule notation must look like 'B3/S23', got {notation!r}")
        born, survive = parts[0][1:], parts[1][1:]
        digits = born + survive
        if any(ch not in "012345678" for ch in digits):
            raise ValueError(f"rule notation must use digits 0-8, got {notation!r}")
        return cls.from_sets((int(ch) for ch in born), (int(ch) for ch in survive))

    @property
    def notation(self) -> str:
        sums = range(NEIGHBOR_COUNT + 1)
        born = "".join(str(n) for n in sums if self.rule_bits[n] == "1")
        survive = "".join(str(n) for n in sums if self.rule_bits[NEIGHBOR_COUNT + 1 + n] == "1")
        return f"B{born}/S{survive}"


CONWAY = LifeRule.from_notation("B3/S23")
