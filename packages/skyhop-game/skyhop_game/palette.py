"""Day/night colour blending."""
from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]

# (day, night) endpoints
SKY = ((135, 206, 235), (10, 20, 40))
HILL = ((46, 125, 50), (20, 50, 30))
MOUNTAIN = ((85, 102, 119), (40, 45, 70))
PIPE = ((27, 94, 32), (10, 40, 15))

GROUND_DAY: Color = (222, 216, 149)
GROUND_NIGHT: Color = (77, 77, 77)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_color(day: Color, night: Color, t: float) -> Color:
    t = max(0.0, min(1.0, t))
    return (
        round(lerp(day[0], night[0], t)),
        round(lerp(day[1], night[1], t)),
        round(lerp(day[2], night[2], t)),
    )


@dataclass(frozen=True)
class Palette:
    sky: Color
    hill: Color
    mountain: Color
    pipe: Color
    ground: Color
    cloud_alpha: float
    stars_visible: bool


def palette_for(blend: float) -> Palette:
    night = blend > 0.5
    return Palette(
        sky=lerp_color(*SKY, blend),
        hill=lerp_color(*HILL, blend),
        mountain=lerp_color(*MOUNTAIN, blend),
        pipe=lerp_color(*PIPE, blend),
        ground=GROUND_NIGHT if night else GROUND_DAY,
        cloud_alpha=lerp(1.0, 0.3, max(0.0, min(1.0, blend))),
        stars_visible=night,
    )


def hex_to_rgb(value: str) -> Color:
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
