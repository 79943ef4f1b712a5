"""Common framerates seen in the wild."""

from __future__ import annotations

from fractions import Fraction
from types import MappingProxyType

from .errors import InvalidRateError
from .framerate import Framerate, Ntsc

#: 23.98 NTSC non-drop-frame.
F23_98 = Framerate.with_playback(Fraction(24000, 1001), Ntsc.NON_DROP_FRAME)
#: 24 fps.
F24 = Framerate.with_playback(24)
#: 25 fps (PAL).
F25 = Framerate.with_playback(25)
#: 29.97 NTSC non-drop-frame.
F29_97_NDF = Framerate.with_playback(Fraction(30000, 1001), Ntsc.NON_DROP_FRAME)
#: 29.97 NTSC drop-frame.
F29_97_DF = Framerate.with_playback(Fraction(30000, 1001), Ntsc.DROP_FRAME)
#: 30 fps.
F30 = Framerate.with_playback(30)
#: 47.95 NTSC non-drop-frame.
F47_95 = Framerate.with_playback(Fraction(48000, 1001), Ntsc.NON_DROP_FRAME)
#: 48 fps.
F48 = Framerate.with_playback(48)
#: 50 fps.
F50 = Framerate.with_playback(50)
#: 59.94 NTSC non-drop-frame.
F59_94_NDF = Framerate.with_playback(Fraction(60000, 1001), Ntsc.NON_DROP_FRAME)
#: 59.94 NTSC drop-frame.
F59_94_DF = Framerate.with_playback(Fraction(60000, 1001), Ntsc.DROP_FRAME)
#: 60 fps.
F60 = Framerate.with_playback(60)

PRESETS = MappingProxyType({
    "23.98": F23_98,
    "24": F24,
    "25": F25,
    "29.97 NDF": F29_97_NDF,
    "29.97 DF": F29_97_DF,
    "30": F30,
    "47.95": F47_95,
    "48": F48,
    "50": F50,
    "59.94 NDF": F59_94_NDF,
    "59.94 DF": F59_94_DF,
    "60": F60,
})


def lookup(name: str) -> Framerate:
    """Return the preset Framerate registered under the given name.

    Args:
        name (str): One of the keys of :data:`PRESETS`, like "23.98" or
            "29.97 DF". Case and surrounding whitespace are ignored.

    Raises:
        InvalidRateError: If no preset has that name.

    Returns:
        Framerate: The preset.
    """
    key = " ".join(name.split()).upper()
    try:
        return PRESETS[key]
    except KeyError:
        raise InvalidRateError(
            f"unknown framerate preset {name!r}, expected one of "
            f"{', '.join(PRESETS)}"
        ) from None
