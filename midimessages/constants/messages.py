"""MIDI channel voice message constants.

The status byte of a channel voice message is its base code plus the
zero-based channel, so Note On on channel 1 is ``0x90`` (144) and on
channel 16 is ``0x9F`` (159).
"""

import typing


# Status byte base codes (channel 1)

NOTE_OFF = 128
NOTE_ON = 144
AFTERTOUCH = 160
CONTROL_CHANGE = 176
PROGRAM_CHANGE = 192
CHANNEL_PRESSURE = 208
PITCH_BEND = 224

MESSAGE_TYPES: typing.List[int] = [
	NOTE_OFF,
	NOTE_ON,
	AFTERTOUCH,
	CONTROL_CHANGE,
	PROGRAM_CHANGE,
	CHANNEL_PRESSURE,
	PITCH_BEND,
]

# Matching type names used by mido.Message
MIDO_TYPE_NAMES: typing.Dict[int, str] = {
	NOTE_OFF: "note_off",
	NOTE_ON: "note_on",
	AFTERTOUCH: "polytouch",
	CONTROL_CHANGE: "control_change",
	PROGRAM_CHANGE: "program_change",
	CHANNEL_PRESSURE: "aftertouch",
	PITCH_BEND: "pitchwheel",
}

# Number of data bytes following the status byte
DATA_BYTE_COUNT: typing.Dict[int, int] = {
	NOTE_OFF: 2,
	NOTE_ON: 2,
	AFTERTOUCH: 2,
	CONTROL_CHANGE: 2,
	PROGRAM_CHANGE: 1,
	CHANNEL_PRESSURE: 1,
	PITCH_BEND: 2,
}

# Data byte ranges

MIN_DATA_VALUE = 0
MAX_DATA_VALUE = 127

MIN_PITCH = 0
MAX_PITCH = 16383
PITCH_CENTER = 8192

MIN_CHANNEL = 1
MAX_CHANNEL = 16
DEFAULT_CHANNEL = 1
