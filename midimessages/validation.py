"""Range validation for MIDI data values.

Out-of-range values are saturated to the nearest limit, never rejected, so
every encoder call produces a well-formed message. Each field has a named
validator so callers read as what they check:

- `clamp(value, lower, upper)`: the underlying saturation
- `validate_note`, `validate_velocity`, `validate_pressure`,
  `validate_control_number`, `validate_control_value`,
  `validate_program_number`: 0-127
- `validate_pitch`: 0-16383 (14-bit pitch bend)
- `validate_channel`: 1-16
- `resolve_channel(channel, default)`: explicit channel if given, else the default
"""

import math
import typing

import midimessages.constants.messages
import midimessages.constants.notes


Number = typing.Union[int, float]


def clamp (value: Number, lower: Number, upper: Number) -> Number:

	"""
	Saturate a value into the inclusive range [lower, upper].

	NaN has no place in the range and saturates to the lower limit.

	Example:
		```python
		clamp(200, 0, 127)  # → 127
		clamp(-3, 0, 127)   # → 0
		clamp(60, 0, 127)   # → 60
		clamp(float("nan"), 0, 127)  # → 0
		```
	"""

	if math.isnan(value) or value < lower:
		return lower

	if value > upper:
		return upper

	return value


def _validate_data_byte (value: Number) -> int:

	return int(clamp(value, midimessages.constants.messages.MIN_DATA_VALUE, midimessages.constants.messages.MAX_DATA_VALUE))


def validate_note (note: Number) -> int:

	"""Clamp a note number to 0-127."""

	return int(clamp(note, midimessages.constants.notes.MIN_NOTE, midimessages.constants.notes.MAX_NOTE))


def validate_velocity (velocity: Number) -> int:

	"""Clamp a velocity to 0-127."""

	return _validate_data_byte(velocity)


def validate_pressure (pressure: Number) -> int:

	"""Clamp a key or channel pressure to 0-127."""

	return _validate_data_byte(pressure)


def validate_control_number (control_number: Number) -> int:

	"""Clamp a controller number to 0-127."""

	return _validate_data_byte(control_number)


def validate_control_value (control_value: Number) -> int:

	"""Clamp a controller value to 0-127."""

	return _validate_data_byte(control_value)


def validate_program_number (program_number: Number) -> int:

	"""Clamp a program (patch) number to 0-127."""

	return _validate_data_byte(program_number)


def validate_pitch (pitch: Number) -> int:

	"""Clamp a pitch bend amount to 0-16383 (8192 is centre)."""

	return int(clamp(pitch, midimessages.constants.messages.MIN_PITCH, midimessages.constants.messages.MAX_PITCH))


def validate_channel (channel: Number) -> int:

	"""Clamp a one-based channel number to 1-16."""

	return int(clamp(channel, midimessages.constants.messages.MIN_CHANNEL, midimessages.constants.messages.MAX_CHANNEL))


def resolve_channel (channel: typing.Optional[Number], default: Number) -> int:

	"""
	Pick the channel a message is sent on.

	An explicit channel wins; when it is ``None`` the default is used instead.
	Either way the result is clamped to 1-16, so a default stored out of range
	still yields a valid status byte.

	Parameters:
		channel: Explicit channel, or ``None`` for "not given".
		default: Channel to fall back on.

	Returns:
		Channel number in 1-16.
	"""

	if channel is None:
		return validate_channel(default)

	return validate_channel(channel)
