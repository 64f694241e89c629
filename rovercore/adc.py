"""Conversion of raw ADC readings to battery voltage and IR distance."""

from __future__ import annotations

VDD = 3.3
ADC_RESOLUTION = 1024


def convert_to(adc_value: int, kind: str) -> float:
    """Convert a raw reading.

    ``kind`` 'V' gives the battery voltage (through a 1:3 divider),
    'M' gives the IR sensor distance in centimetres; anything else gives 0.
    """
    value = adc_value / ADC_RESOLUTION * VDD
    if kind == "V":
        return value * 3
    if kind == "M":
        return (
            2.34
            - 4.74 * value
            + 4.06 * value**2
            - 1.60 * value**3
            + 0.24 * value**4
        ) * 100
    return 0.0


def get_battery_voltage(adc_value: int) -> float:
    return convert_to(adc_value, "V")


def get_ir_distance(adc_value: int) -> float:
    return convert_to(adc_value, "M")