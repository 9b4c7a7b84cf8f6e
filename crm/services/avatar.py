"""Avatar colour assignment for new contacts."""

import random

AVATAR_PALETTE = (
    "#0071e3",
    "#bf5af2",
    "#ff375f",
    "#ff9f0a",
    "#30d158",
    "#64d2ff",
    "#5e5ce6",
)


def pick_avatar_color(rng: random.Random, palette: tuple[str, ...] = AVATAR_PALETTE) -> str:
    """Pick a palette colour using the given random source."""
    return rng.choice(palette)
