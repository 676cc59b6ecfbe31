import pytest
from pytest import param

import permcalc


parametrize = pytest.mark.parametrize


@parametrize(
    "bits, expected",
    [
        param(0, "---"),
        param(1, "--x"),
        param(2, "-w-"),
        param(3, "-wx"),
        param(4, "r--"),
        param(5, "r-x"),
        param(6, "rw-"),
        param(7, "rwx"),
    ],
)
def test_format_triad(bits: int, expected: str):
    assert permcalc.format_triad(bits) == expected


@parametrize(
    "value, expected",
    [
        param(0, "---------"),
        param(420, "rw-r--r--"),
        param(0o755, "rwxr-xr-x"),
        param(0o600, "rw-------"),
        param(0o777, "rwxrwxrwx"),
        param(0o421, "r---w---x"),
        param(0o070, "---rwx---"),
    ],
)
def test_format_symbolic(value: int, expected: str):
    assert permcalc.format_symbolic(value) == expected


@parametrize(
    "mode, umask, expected",
    [
        param(0o644, 0o022, 0o644),
        param(0o777, 0o022, 0o755),
        param(0o666, 0o077, 0o600),
        param(0o777, 0o777, 0),
        param(0o777, 0, 0o777),
        param(0, 0o022, 0),
    ],
)
def test_compute_effective(mode: int, umask: int, expected: int):
    assert permcalc.compute_effective(mode, umask) == expected


def test_compute_effective__matches_masking_law_for_all_permission_pairs():
    for mode in range(0o1000):
        for umask in range(0o1000):
            effective = permcalc.compute_effective(mode, umask)
            assert effective == mode & ~umask & 0o777
            assert 0 <= effective <= 0o777


def test_compute_effective__stays_in_permission_range_for_all_octal_tokens():
    for mode in range(0, 0o10000, 0o11):
        for umask in range(0, 0o10000, 0o13):
            assert 0 <= permcalc.compute_effective(mode, umask) <= 0o777
