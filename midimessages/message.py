import dataclasses
import typing

import mido

import midimessages.constants.messages


@dataclasses.dataclass(frozen=True)
class MidiMessage:

	"""
	A channel voice message: one status byte followed by one or two data bytes.

	The values are already validated by the encoder that built the message.
	``str()`` gives the wire form a downstream bridge parses, e.g. ``"[144,60,64]"``.
	"""

	status: int
	data: typing.Tuple[int, ...]

	@property
	def message_type (self) -> int:

		"""Base code of the message (the status byte on channel 1)."""

		return self.status & 0xF0


	@property
	def channel (self) -> int:

		"""One-based channel (1-16)."""

		return (self.status & 0x0F) + 1


	def to_list (self) -> typing.List[int]:

		return [self.status, *self.data]


	def bytes (self) -> bytes:

		return bytes(self.to_list())


	def format (self) -> str:

		"""
		Render the message as a bracketed, comma-separated list of decimal bytes.
		"""

		return "[" + ",".join(str(value) for value in self.to_list()) + "]"


	def to_mido (self) -> mido.Message:

		"""
		Convert to a ``mido.Message`` for sending through a mido output port.

		Note that mido numbers channels from 0 and centres pitch bend on 0.
		"""

		return mido.Message.from_bytes(self.to_list())


	def __str__ (self) -> str:

		return self.format()


def build (message_type: int, channel: int, *data: int) -> MidiMessage:

	"""
	Assemble a message from its base code, a validated channel and data bytes.
	"""

	expected = midimessages.constants.messages.DATA_BYTE_COUNT[message_type]

	if len(data) != expected:
		raise ValueError(f"{midimessages.constants.messages.MIDO_TYPE_NAMES[message_type]} takes {expected} data bytes, got {len(data)}")

	return MidiMessage(status=message_type + channel - 1, data=tuple(data))
