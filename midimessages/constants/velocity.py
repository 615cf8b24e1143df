"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). The named levels follow the
usual dynamic markings from silence (``NONE``) up to ``FFFF``.
"""

import typing


NONE = 0
PPPP = 8
PPP  = 20
PP   = 31
P    = 42
MP   = 53
MF   = 64
F    = 80
FF   = 96
FFF  = 112
FFFF = 127

# Note on / note off use mezzo-forte unless told otherwise
DEFAULT_VELOCITY = MF

# MIDI standard range
MIN_VELOCITY = 0
MAX_VELOCITY = 127


DYNAMIC_TO_VELOCITY: typing.Dict[str, int] = {
	"none": NONE,
	"pppp": PPPP,
	"ppp": PPP,
	"pp": PP,
	"p": P,
	"mp": MP,
	"mf": MF,
	"f": F,
	"ff": FF,
	"fff": FFF,
	"ffff": FFFF,
}
