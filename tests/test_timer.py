import pytest

from rovercore.timer import (
    FCY,
    TimerConfig,
    timer_config,
    uart_brg_value,
    wait_chunks,
)


def test_one_ms_uses_largest_prescaler():
    config = timer_config(1)
    assert config.prescaler == 256
    assert config.tckps == 3
    assert config.period == 281


def test_zero_ms():
    assert timer_config(0) == TimerConfig(prescaler=1, tckps=0, period=0)


def test_period_scales_linearly():
    assert timer_config(20).period * 10 == timer_config(200).period


def test_period_is_monotonic():
    periods = [timer_config(ms).period for ms in range(0, 201, 10)]
    assert periods == sorted(periods)


def test_chunk_size_fits_register():
    assert timer_config(200).period <= 0xFFFF


@pytest.mark.parametrize("ms", [-1, 1000, 300])
def test_invalid_periods_raise(ms):
    with pytest.raises(ValueError):
        timer_config(ms)


def test_wait_chunks_remainder_first():
    assert list(wait_chunks(450)) == [50, 200, 200]


def test_wait_chunks_exact_multiple():
    assert list(wait_chunks(400)) == [200, 200]


def test_wait_chunks_zero():
    assert list(wait_chunks(0)) == []


@pytest.mark.parametrize("ms", [1, 199, 200, 201, 1234, 5000])
def test_wait_chunks_sum_and_bounds(ms):
    chunks = list(wait_chunks(ms))
    assert sum(chunks) == ms
    assert all(0 < c <= 200 for c in chunks)
    assert all(timer_config(c).period <= 0xFFFF for c in chunks)


def test_wait_chunks_negative_raises():
    with pytest.raises(ValueError):
        list(wait_chunks(-5))


def test_uart_brg_default():
    assert uart_brg_value() == 467
    assert uart_brg_value(FCY, 9600) == uart_brg_value()


def test_uart_brg_invalid():
    with pytest.raises(ValueError):
        uart_brg_value(FCY, 0)
    with pytest.raises(ValueError):
        uart_brg_value(1000, 9600)