import pytest

from computerroom.fpscalculator import FPSCalculator, duration_from_performance


def test_reports_after_one_second_of_sixtieths():
    calc = FPSCalculator()
    results = [calc.frame(16_666_667) for _ in range(60)]
    assert results[:59] == [None] * 59
    assert results[59] == 60


def test_counter_restarts_after_report():
    calc = FPSCalculator()
    for _ in range(60):
        calc.frame(16_666_667)
    results = [calc.frame(16_666_667) for _ in range(60)]
    assert results[-1] == 60
    assert results[:-1] == [None] * 59


def test_keeps_only_fraction_of_second_after_long_frame():
    calc = FPSCalculator()
    assert calc.frame(2_500_000_000) == 1
    assert calc.frame(499_999_999) is None
    assert calc.frame(1) == 2


def test_exactly_one_second_reports():
    calc = FPSCalculator()
    assert calc.frame(1_000_000_000) == 1


def test_performance_conversion_whole_second():
    assert duration_from_performance(1000, 1000) == 1_000_000_000


def test_performance_conversion_nanosecond_counter_is_identity():
    assert duration_from_performance(123_456, 1_000_000_000) == 123_456


def test_performance_conversion_rejects_zero_frequency():
    with pytest.raises(ValueError):
        duration_from_performance(10, 0)


def test_performance_conversion_rejects_negative_delta():
    with pytest.raises(ValueError):
        duration_from_performance(-1, 1000)