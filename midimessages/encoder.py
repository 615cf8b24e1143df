"""MIDI channel voice message encoders.

`MidiEncoder` turns musical parameters into `MidiMessage` objects. Every
data value is clamped into its valid range, so encoding never fails. A message
sent without an explicit channel goes out on the encoder's default channel.

Each encoder owns its default channel, which lets separate parts of a program
address different channels without sharing state. For scripts that just want
one process-wide setting, the module-level functions (`note_on`, `note_off`,
... `pitch_bend`) use a shared encoder whose default is changed with
`set_global_channel` and read with `get_global_channel`. Those functions
return the wire string directly::

    import midimessages

    midimessages.note_on(60, 64, 1)      # "[144,60,64]"
    midimessages.set_global_channel(5)
    midimessages.note_on(60)             # "[148,60,64]"
"""

import logging
import threading
import typing

import midimessages.constants.messages
import midimessages.constants.velocity
import midimessages.message
import midimessages.validation


logger = logging.getLogger(__name__)


class MidiEncoder:

	"""
	Builds validated MIDI messages, falling back on a default channel.
	"""

	def __init__ (self, default_channel: int = midimessages.constants.messages.DEFAULT_CHANNEL) -> None:

		"""
		Create an encoder.

		Parameters:
			default_channel: Channel (1-16) for messages sent without one. Stored
				as given; it is clamped when a message is built.
		"""

		self._default_channel = default_channel
		self._channel_lock = threading.Lock()


	@property
	def default_channel (self) -> int:

		with self._channel_lock:
			return self._default_channel


	@default_channel.setter
	def default_channel (self, channel: int) -> None:

		with self._channel_lock:
			self._default_channel = channel

		logger.debug(f"Default MIDI channel set to {channel}")


	def resolve_channel (self, channel: typing.Optional[int] = None) -> int:

		"""Return the explicit channel if given, otherwise the default, clamped to 1-16."""

		return midimessages.validation.resolve_channel(channel, self.default_channel)


	def note_off (self, note: int, velocity: int = midimessages.constants.velocity.DEFAULT_VELOCITY, channel: typing.Optional[int] = None) -> midimessages.message.MidiMessage:

		"""
		Build a Note Off message.

		Parameters:
			note: MIDI note number (0-127).
			velocity: Release velocity (0-127, default 64).
			channel: Channel (1-16), or ``None`` for the default channel.
		"""

		return midimessages.message.build(
			midimessages.constants.messages.NOTE_OFF,
			self.resolve_channel(channel),
			midimessages.validation.validate_note(note),
			midimessages.validation.validate_velocity(velocity)
		)


	def note_on (self, note: int, velocity: int = midimessages.constants.velocity.DEFAULT_VELOCITY, channel: typing.Optional[int] = None) -> midimessages.message.MidiMessage:

		"""
		Build a Note On message.

		Parameters:
			note: MIDI note number (0-127).
			velocity: Attack velocity (0-127, default 64).
			channel: Channel (1-16), or ``None`` for the default channel.

		Example:
			```python
			str(MidiEncoder().note_on(60, 100))  # → "[144,60,100]"
			```
		"""

		return midimessages.message.build(
			midimessages.constants.messages.NOTE_ON,
			self.resolve_channel(channel),
			midimessages.validation.validate_note(note),
			midimessages.validation.validate_velocity(velocity)
		)


	def aftertouch (self, note: int, pressure: int, channel: typing.Optional[int] = None) -> midimessages.message.MidiMessage:

		"""Build a polyphonic key pressure message for one held note."""

		return midimessages.message.build(
			midimessages.constants.messages.AFTERTOUCH,
			self.resolve_channel(channel),
			midimessages.validation.validate_note(note),
			midimessages.validation.validate_pressure(pressure)
		)


	def control_change (self, control_number: int, control_value: int, channel: typing.Optional[int] = None) -> midimessages.message.MidiMessage:

		"""Build a Control Change message (controller 0-127, value 0-127)."""

		return midimessages.message.build(
			midimessages.constants.messages.CONTROL_CHANGE,
			self.resolve_channel(channel),
			midimessages.validation.validate_control_number(control_number),
			midimessages.validation.validate_control_value(control_value)
		)


	def program_change (self, program_number: int, channel: typing.Optional[int] = None) -> midimessages.message.MidiMessage:

		"""
		Build a Program Change message.

		Program numbers are zero-based (0-127), so General MIDI patch #1
		(Acoustic Grand Piano) is program 0.
		"""

		return midimessages.message.build(
			midimessages.constants.messages.PROGRAM_CHANGE,
			self.resolve_channel(channel),
			midimessages.validation.validate_program_number(program_number)
		)


	def channel_pressure (self, pressure: int, channel: typing.Optional[int] = None) -> midimessages.message.MidiMessage:

		return midimessages.message.build(
			midimessages.constants.messages.CHANNEL_PRESSURE,
			self.resolve_channel(channel),
			midimessages.validation.validate_pressure(pressure)
		)


	def pitch_bend (self, pitch: int = midimessages.constants.messages.PITCH_CENTER, channel: typing.Optional[int] = None) -> midimessages.message.MidiMessage:

		"""
		Build a Pitch Bend message.

		The 14-bit amount (0-16383, centre 8192) is sent as two 7-bit data
		bytes, least significant first.

		Parameters:
			pitch: Bend amount (0-16383, default 8192 = no bend).
			channel: Channel (1-16), or ``None`` for the default channel.

		Example:
			```python
			str(MidiEncoder().pitch_bend(8192))   # → "[224,0,64]"
			str(MidiEncoder().pitch_bend(16383))  # → "[224,127,127]"
			```
		"""

		validated_pitch = midimessages.validation.validate_pitch(pitch)

		return midimessages.message.build(
			midimessages.constants.messages.PITCH_BEND,
			self.resolve_channel(channel),
			validated_pitch & 0x7F,
			validated_pitch >> 7
		)


# Shared encoder behind the module-level functions.
_global_encoder = MidiEncoder()


def get_encoder () -> MidiEncoder:

	"""Return the process-wide encoder used by the module-level functions."""

	return _global_encoder


def set_global_channel (channel: int) -> None:

	"""
	Set the channel used by the module-level functions when none is given.

	The value is stored as given and clamped to 1-16 only when a message is built.
	"""

	_global_encoder.default_channel = channel


def get_global_channel () -> int:

	"""Return the process-wide default channel, exactly as last set."""

	return _global_encoder.default_channel


def note_off (note: int, velocity: int = midimessages.constants.velocity.DEFAULT_VELOCITY, channel: typing.Optional[int] = None) -> str:

	"""Note Off as a wire string, e.g. ``"[128,60,64]"``."""

	return _global_encoder.note_off(note, velocity, channel).format()


def note_on (note: int, velocity: int = midimessages.constants.velocity.DEFAULT_VELOCITY, channel: typing.Optional[int] = None) -> str:

	"""Note On as a wire string, e.g. ``"[144,60,64]"``."""

	return _global_encoder.note_on(note, velocity, channel).format()


def aftertouch (note: int, pressure: int, channel: typing.Optional[int] = None) -> str:

	return _global_encoder.aftertouch(note, pressure, channel).format()


def control_change (control_number: int, control_value: int, channel: typing.Optional[int] = None) -> str:

	return _global_encoder.control_change(control_number, control_value, channel).format()


def program_change (program_number: int, channel: typing.Optional[int] = None) -> str:

	return _global_encoder.program_change(program_number, channel).format()


def channel_pressure (pressure: int, channel: typing.Optional[int] = None) -> str:

	return _global_encoder.channel_pressure(pressure, channel).format()


def pitch_bend (pitch: int = midimessages.constants.messages.PITCH_CENTER, channel: typing.Optional[int] = None) -> str:

	"""Pitch Bend as a wire string, e.g. ``"[224,0,64]"`` for no bend."""

	return _global_encoder.pitch_bend(pitch, channel).format()
