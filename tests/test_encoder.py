import threading

import midimessages
import midimessages.constants.messages as messages
import midimessages.encoder


# ---------------------------------------------------------------------------
# Module-level functions (wire strings)
# ---------------------------------------------------------------------------

def test_note_on_wire_string () -> None:

	"""Note On for Middle C at velocity 64 on channel 1."""

	assert midimessages.note_on(60, 64, 1) == "[144,60,64]"


def test_note_off_clamps_note () -> None:

	assert midimessages.note_off(200, 64, 1) == "[128,127,64]"


def test_note_on_default_velocity_is_mezzo_forte () -> None:

	assert midimessages.note_on(60, channel=1) == "[144,60,64]"
	assert midimessages.note_off(60, channel=1) == "[128,60,64]"


def test_every_message_type_on_channel_1 () -> None:

	assert midimessages.aftertouch(60, 100, 1) == "[160,60,100]"
	assert midimessages.control_change(7, 100, 1) == "[176,7,100]"
	assert midimessages.program_change(5, 1) == "[192,5]"
	assert midimessages.channel_pressure(90, 1) == "[208,90]"
	assert midimessages.pitch_bend(8192, 1) == "[224,0,64]"


def test_status_byte_includes_channel () -> None:

	"""Channel 16 is the base code plus 15."""

	assert midimessages.note_on(60, 64, 16) == "[159,60,64]"
	assert midimessages.program_change(0, 10) == "[201,0]"


def test_data_values_are_clamped () -> None:

	assert midimessages.note_on(-4, 300, 1) == "[144,0,127]"
	assert midimessages.aftertouch(128, -1, 1) == "[160,127,0]"
	assert midimessages.control_change(999, 999, 1) == "[176,127,127]"
	assert midimessages.program_change(-1, 1) == "[192,0]"
	assert midimessages.channel_pressure(128, 1) == "[208,127]"


def test_channel_is_clamped () -> None:

	"""Channel 0 or below uses channel 1; 17 or above uses channel 16."""

	assert midimessages.note_on(60, 64, 0) == "[144,60,64]"
	assert midimessages.note_on(60, 64, -2) == "[144,60,64]"
	assert midimessages.note_on(60, 64, 17) == "[159,60,64]"


def test_nan_input_saturates_low () -> None:

	"""NaN data values and channels give a valid message instead of raising."""

	nan = float("nan")

	assert midimessages.note_on(nan, 64, 1) == "[144,0,64]"
	assert midimessages.note_on(60, nan, 1) == "[144,60,0]"
	assert midimessages.note_on(60, 64, nan) == "[144,60,64]"
	assert midimessages.pitch_bend(nan, 1) == "[224,0,0]"
	assert midimessages.control_change(nan, nan, 16) == "[191,0,0]"


def test_nan_global_channel_falls_back_to_channel_1 () -> None:

	midimessages.set_global_channel(float("nan"))

	assert midimessages.program_change(3) == "[192,3]"


def test_pitch_bend_splits_14_bits () -> None:

	"""The least significant 7 bits come first."""

	assert midimessages.pitch_bend(0, 1) == "[224,0,0]"
	assert midimessages.pitch_bend(1, 1) == "[224,1,0]"
	assert midimessages.pitch_bend(128, 1) == "[224,0,1]"
	assert midimessages.pitch_bend(16383, 1) == "[224,127,127]"


def test_pitch_bend_clamps_and_defaults_to_centre () -> None:

	assert midimessages.pitch_bend(-100, 1) == "[224,0,0]"
	assert midimessages.pitch_bend(50000, 1) == "[224,127,127]"
	assert midimessages.pitch_bend() == "[224,0,64]"


# ---------------------------------------------------------------------------
# Global default channel
# ---------------------------------------------------------------------------

def test_global_channel_starts_at_1 () -> None:

	assert midimessages.get_global_channel() == 1
	assert midimessages.note_on(60) == "[144,60,64]"


def test_set_global_channel_is_used_without_explicit_channel () -> None:

	midimessages.set_global_channel(5)

	assert midimessages.get_global_channel() == 5
	assert midimessages.note_on(60) == "[148,60,64]"
	assert midimessages.pitch_bend(8192) == "[228,0,64]"


def test_explicit_channel_overrides_global () -> None:

	midimessages.set_global_channel(5)

	assert midimessages.note_on(60, 64, 2) == "[145,60,64]"


def test_global_channel_stored_as_given_and_clamped_on_use () -> None:

	"""The accessor returns the raw value; messages still use a valid channel."""

	midimessages.set_global_channel(42)

	assert midimessages.get_global_channel() == 42
	assert midimessages.note_on(60) == "[159,60,64]"

	midimessages.set_global_channel(0)

	assert midimessages.note_on(60) == "[144,60,64]"


# ---------------------------------------------------------------------------
# MidiEncoder
# ---------------------------------------------------------------------------

def test_encoder_has_its_own_default_channel () -> None:

	"""Encoders do not share state with each other or with the global channel."""

	drums = midimessages.MidiEncoder(default_channel=10)
	bass = midimessages.MidiEncoder(default_channel=2)

	assert str(drums.note_on(36)) == "[153,36,64]"
	assert str(bass.note_on(36)) == "[145,36,64]"
	assert midimessages.get_global_channel() == 1

	drums.default_channel = 11

	assert str(drums.note_on(36)) == "[154,36,64]"
	assert str(bass.note_on(36)) == "[145,36,64]"


def test_encoder_returns_structured_message () -> None:

	encoder = midimessages.MidiEncoder()
	message = encoder.control_change(64, 127, channel=3)

	assert message.status == 178
	assert message.data == (64, 127)
	assert message.channel == 3
	assert message.message_type == messages.CONTROL_CHANGE


def test_encoder_resolve_channel () -> None:

	encoder = midimessages.MidiEncoder(default_channel=20)

	assert encoder.resolve_channel() == 16
	assert encoder.resolve_channel(4) == 4


def test_get_encoder_is_the_global_encoder () -> None:

	midimessages.encoder.get_encoder().default_channel = 7

	assert midimessages.get_global_channel() == 7


def test_default_channel_is_safe_across_threads () -> None:

	"""Concurrent setters leave one of the written values in place."""

	encoder = midimessages.MidiEncoder()

	def _writer (channel: int) -> None:
		for _ in range(200):
			encoder.default_channel = channel
			encoder.note_on(60)

	threads = [threading.Thread(target=_writer, args=(channel,)) for channel in range(1, 9)]

	for thread in threads:
		thread.start()

	for thread in threads:
		thread.join()

	assert encoder.default_channel in range(1, 9)
