from typing import Callable, Sequence

import pytest

FNC1 = 102
CODE_B = 100
CODE_C = 99
START_C = 105
STOP = 106


def _decode(symbols: Sequence[int]) -> str:
    """
    Map an emitted symbol sequence back to its digit content.

    Pairs become two digits, a Code B digit becomes one digit and an FNC1
    separator becomes "|". Start, the leading FNC1, check and stop are
    verified and dropped.
    """
    assert symbols[0] == START_C
    assert symbols[1] == FNC1
    assert symbols[-1] == STOP

    body = list(symbols[2:-2])
    out = []
    i = 0
    while i < len(body):
        value = body[i]
        if value == FNC1:
            out.append("|")
            i += 1
        elif value == CODE_B:
            assert body[i + 2] == CODE_C, "Code B digit must be followed by Code C"
            digit = body[i + 1] - 16
            assert 0 <= digit <= 9
            out.append(str(digit))
            i += 3
        else:
            assert 0 <= value <= 99
            out.append(f"{value:02d}")
            i += 1
    return "".join(out)


def _expected_check(symbols: Sequence[int]) -> int:
    """Start value once, then position-weighted sum of everything before the check."""
    data = symbols[:-2]
    total = data[0] + sum(i * v for i, v in enumerate(data) if i >= 1)
    return total % 103


@pytest.fixture
def decode_symbols() -> Callable[[Sequence[int]], str]:
    return _decode


@pytest.fixture
def expected_check() -> Callable[[Sequence[int]], int]:
    return _expected_check
