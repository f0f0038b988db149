from __future__ import annotations

from ..common.numbers import round_half_up

PALE = 200


def color_for(value: float, max_value: float) -> tuple[int, int, int]:
    """Red ramp: pale (255, 200, 200) at 0, deep (255, 0, 0) at the maximum.

    ``max_value == 0`` is treated as ``value == 0``.
    """

    if not max_value:
        value, max_value = 0, 1
    intensity = int(round_half_up(value / max_value * 255, 0))
    channel = min(max(PALE - intensity, 0), PALE)
    return (255, channel, channel)


def to_css(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"
