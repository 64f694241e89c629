"""State of the board's status LEDs and turn indicators."""

from __future__ import annotations

LD1 = 1
LD2 = 2
INDICATORS = 3


class LedBank:
    """LD1, LD2 and the left/right indicators; all start off.

    LED number 3 addresses both indicators together. Other numbers are ignored.
    """

    def __init__(self) -> None:
        self.ld1 = False
        self.ld2 = False
        self.left = False
        self.right = False

    def _set(self, led_number: int, value: bool) -> None:
        if led_number == LD1:
            self.ld1 = value
        elif led_number == LD2:
            self.ld2 = value
        elif led_number == INDICATORS:
            self.left = value
            self.right = value

    def turn_on(self, led_number: int) -> None:
        self._set(led_number, True)

    def turn_off(self, led_number: int) -> None:
        self._set(led_number, False)

    def toggle(self, led_number: int) -> None:
        if led_number == LD1:
            self.ld1 = not self.ld1
        elif led_number == LD2:
            self.ld2 = not self.ld2
        elif led_number == INDICATORS:
            self.left = not self.left
            self.right = not self.right

    def __repr__(self) -> str:
        return (
            f"LedBank(ld1={self.ld1}, ld2={self.ld2}, "
            f"left={self.left}, right={self.right})"
        )