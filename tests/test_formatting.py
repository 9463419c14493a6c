import pytest

from mpbar.decor.formatting import (
    PercentageValue,
    SizeB1000,
    SizeB1024,
    fmt_as_speed,
    sprintf,
)

KIB, MIB, GIB, TIB = 1 << 10, 1 << 20, 1 << 30, 1 << 40
KB, MB, GB, TB = 10 ** 3, 10 ** 6, 10 ** 9, 10 ** 12

B1024 = [
    (12345678, "%d", "12MiB"), (12345678, "%s", "12MiB"), (12345678, "%f", "11.773756MiB"),
    (12345678, "%.6f", "11.773756MiB"), (12345678, "%.0f", "12MiB"),
    (12345678, "%.1f", "11.8MiB"), (12345678, "%.2f", "11.77MiB"),
    (12345678, "%.3f", "11.774MiB"), (12345678, "% d", "12 MiB"),
    (12345678, "% s", "12 MiB"), (12345678, "% f", "11.773756 MiB"),
    (12345678, "% .6f", "11.773756 MiB"), (12345678, "% .0f", "12 MiB"),
    (12345678, "% .1f", "11.8 MiB"), (12345678, "% .2f", "11.77 MiB"),
    (12345678, "% .3f", "11.774 MiB"),
    (1000, "%d", "1000b"), (1000, "%s", "1000b"), (1000, "%f", "1000.000000b"),
    (1000, "%.6f", "1000.000000b"), (1000, "%.0f", "1000b"), (1000, "%.1f", "1000.0b"),
    (1000, "%.2f", "1000.00b"), (1000, "%.3f", "1000.000b"),
    (1024, "%d", "1KiB"), (1024, "%s", "1KiB"), (1024, "%f", "1.000000KiB"),
    (1024, "%.6f", "1.000000KiB"), (1024, "%.0f", "1KiB"), (1024, "%.1f", "1.0KiB"),
    (1024, "%.2f", "1.00KiB"), (1024, "%.3f", "1.000KiB"),
    (3 * MIB + 100 * KIB, "%d", "3MiB"), (3 * MIB + 100 * KIB, "%s", "3MiB"),
    (3 * MIB + 100 * KIB, "%f", "3.097656MiB"), (3 * MIB + 100 * KIB, "%.6f", "3.097656MiB"),
    (3 * MIB + 100 * KIB, "%.0f", "3MiB"), (3 * MIB + 100 * KIB, "%.1f", "3.1MiB"),
    (3 * MIB + 100 * KIB, "%.2f", "3.10MiB"), (3 * MIB + 100 * KIB, "%.3f", "3.098MiB"),
    (2 * GIB, "%d", "2GiB"), (2 * GIB, "%s", "2GiB"), (2 * GIB, "%f", "2.000000GiB"),
    (2 * GIB, "%.6f", "2.000000GiB"), (2 * GIB, "%.0f", "2GiB"), (2 * GIB, "%.1f", "2.0GiB"),
    (2 * GIB, "%.2f", "2.00GiB"), (2 * GIB, "%.3f", "2.000GiB"),
    (4 * TIB, "%d", "4TiB"), (4 * TIB, "%s", "4TiB"), (4 * TIB, "%f", "4.000000TiB"),
    (4 * TIB, "%.6f", "4.000000TiB"), (4 * TIB, "%.0f", "4TiB"), (4 * TIB, "%.1f", "4.0TiB"),
    (4 * TIB, "%.2f", "4.00TiB"), (4 * TIB, "%.3f", "4.000TiB"),
]

B1000 = [
    (12345678, "%d", "12MB"), (12345678, "%s", "12MB"), (12345678, "%f", "12.345678MB"),
    (12345678, "%.6f", "12.345678MB"), (12345678, "%.0f", "12MB"),
    (12345678, "%.1f", "12.3MB"), (12345678, "%.2f", "12.35MB"),
    (12345678, "%.3f", "12.346MB"), (12345678, "% d", "12 MB"),
    (12345678, "% s", "12 MB"), (12345678, "% f", "12.345678 MB"),
    (12345678, "% .6f", "12.345678 MB"), (12345678, "% .0f", "12 MB"),
    (12345678, "% .1f", "12.3 MB"), (12345678, "% .2f", "12.35 MB"),
    (12345678, "% .3f", "12.346 MB"),
    (1000, "%d", "1KB"), (1000, "%s", "1KB"), (1000, "%f", "1.000000KB"),
    (1000, "%.6f", "1.000000KB"), (1000, "%.0f", "1KB"), (1000, "%.1f", "1.0KB"),
    (1000, "%.2f", "1.00KB"), (1000, "%.3f", "1.000KB"),
    (1024, "%d", "1KB"), (1024, "%s", "1KB"), (1024, "%f", "1.024000KB"),
    (1024, "%.6f", "1.024000KB"), (1024, "%.0f", "1KB"), (1024, "%.1f", "1.0KB"),
    (1024, "%.2f", "1.02KB"), (1024, "%.3f", "1.024KB"),
    (3 * MB + 100 * KB, "%d", "3MB"), (3 * MB + 100 * KB, "%s", "3MB"),
    (3 * MB + 100 * KB, "%f", "3.100000MB"), (3 * MB + 100 * KB, "%.6f", "3.100000MB"),
    (3 * MB + 100 * KB, "%.0f", "3MB"), (3 * MB + 100 * KB, "%.1f", "3.1MB"),
    (3 * MB + 100 * KB, "%.2f", "3.10MB"), (3 * MB + 100 * KB, "%.3f", "3.100MB"),
    (2 * GB, "%d", "2GB"), (2 * GB, "%s", "2GB"), (2 * GB, "%f", "2.000000GB"),
    (2 * GB, "%.6f", "2.000000GB"), (2 * GB, "%.0f", "2GB"), (2 * GB, "%.1f", "2.0GB"),
    (2 * GB, "%.2f", "2.00GB"), (2 * GB, "%.3f", "2.000GB"),
    (4 * TB, "%d", "4TB"), (4 * TB, "%s", "4TB"), (4 * TB, "%f", "4.000000TB"),
    (4 * TB, "%.6f", "4.000000TB"), (4 * TB, "%.0f", "4TB"), (4 * TB, "%.1f", "4.0TB"),
    (4 * TB, "%.2f", "4.00TB"), (4 * TB, "%.3f", "4.000TB"),
]

PERCENT = [
    (10, "%d", "10%"), (10, "%s", "10%"), (10, "%f", "10.000000%"), (10, "%.6f", "10.000000%"),
    (10, "%.0f", "10%"), (10, "%.1f", "10.0%"), (10, "%.2f", "10.00%"), (10, "%.3f", "10.000%"),
    (10, "% d", "10 %"), (10, "% s", "10 %"), (10, "% f", "10.000000 %"),
    (10, "% .6f", "10.000000 %"), (10, "% .0f", "10 %"), (10, "% .1f", "10.0 %"),
    (10, "% .2f", "10.00 %"), (10, "% .3f", "10.000 %"),
    (10.5, "%d", "10%"), (10.5, "%s", "10%"), (10.5, "%f", "10.500000%"),
    (10.5, "%.6f", "10.500000%"), (10.5, "%.0f", "10%"), (10.5, "%.1f", "10.5%"),
    (10.5, "%.2f", "10.50%"), (10.5, "%.3f", "10.500%"),
    (10.5, "% d", "10 %"), (10.5, "% s", "10 %"), (10.5, "% f", "10.500000 %"),
    (10.5, "% .6f", "10.500000 %"), (10.5, "% .0f", "10 %"), (10.5, "% .1f", "10.5 %"),
    (10.5, "% .2f", "10.50 %"), (10.5, "% .3f", "10.500 %"),
]


@pytest.mark.parametrize("value,verb,expected", B1024)
def test_size_b1024(value, verb, expected):
    assert sprintf(verb, SizeB1024(value)) == expected


@pytest.mark.parametrize("value,verb,expected", B1000)
def test_size_b1000(value, verb, expected):
    assert sprintf(verb, SizeB1000(value)) == expected


@pytest.mark.parametrize("value,verb,expected", PERCENT)
def test_percentage_value(value, verb, expected):
    assert sprintf(verb, PercentageValue(value)) == expected


def test_fmt_as_speed():
    assert sprintf("%.1f", fmt_as_speed(SizeB1024(2048))) == "2.0KiB/s"


def test_pair_format():
    assert sprintf("% d / % d", SizeB1000(1000000), SizeB1000(12000000)) == "1 MB / 12 MB"


def test_plain_integers():
    assert sprintf("%d / %d", 3, 10) == "3 / 10"


def test_missing_argument():
    assert sprintf("%d / %d", 3) == "3 / %!d(MISSING)"


def test_percent_literal():
    assert sprintf("100%%") == "100%"