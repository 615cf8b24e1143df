"""Note number construction.

Converts musical input into MIDI note numbers (0-127):

- `from_note_and_octave(note, octave)`: offset within the octave plus octave, C4 = 60
- `from_note_name(text)`: parse ``"C4"``, ``"F#-1"`` or ``"Bb3"``
- `note_to_name(note)`: the reverse, 61 → ``"C#4"``
- `from_frequency(frequency)`: nearest equal-tempered note, A3 = 220 Hz = 57
- `note_to_frequency(note)`: the reverse mapping on the same anchor

Also resolves names to numbers: `note_name_to_offset` and `velocity_from_dynamic`.
"""

import math
import re
import typing

import midimessages.constants.notes
import midimessages.constants.velocity
import midimessages.validation


_NOTE_TEXT_PATTERN = re.compile(r"^\s*([A-Ga-g])([#b]?)(-?\d+)\s*$")


def note_name_to_offset (note_name: str) -> int:

	"""Validate a note name and return its offset within the octave (0–11).

	Parameters:
		note_name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Returns:
		Offset integer (0–11).

	Raises:
		ValueError: If the note name is not recognised.

	Example:
		```python
		note_name_to_offset("C")   # → 0
		note_name_to_offset("Eb")  # → 3, same as "D#"
		note_name_to_offset("B")   # → 11
		```
	"""

	if note_name not in midimessages.constants.notes.NOTE_NAME_TO_OFFSET:
		raise ValueError(
			f"Unknown note name: {note_name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return midimessages.constants.notes.NOTE_NAME_TO_OFFSET[note_name]


def from_note_and_octave (note: int, octave: int = midimessages.constants.notes.DEFAULT_OCTAVE) -> int:

	"""
	Build a MIDI note number from an offset within the octave and an octave number.

	The note is ``octave * 12 + 12 + note``, clamped to 0-127. Octave -1 starts
	at note 0, so the top of octave 9 runs past the MIDI ceiling and saturates.

	Parameters:
		note: Offset within the octave (0 = C ... 11 = B). See
			``midimessages.constants.notes``.
		octave: Octave number, -1 to 9 (default 4).

	Example:
		```python
		from_note_and_octave(notes.C, 4)   # → 60 (Middle C)
		from_note_and_octave(notes.A, 3)   # → 57
		from_note_and_octave(notes.B, 9)   # → 127 (131 saturated)
		```
	"""

	midi_note = (octave * midimessages.constants.notes.NOTES_PER_OCTAVE) + midimessages.constants.notes.NOTES_PER_OCTAVE + note

	return midimessages.validation.validate_note(midi_note)


def from_note_name (text: str) -> int:

	"""
	Parse scientific pitch notation into a MIDI note number.

	Accepts a note name, an optional ``#`` or ``b`` and a signed octave, e.g.
	``"C4"`` (60), ``"F#-1"`` (6), ``"Bb3"`` (58). The result is clamped the same
	way as ``from_note_and_octave``.

	Raises:
		ValueError: If the text is not a note name followed by an octave.
	"""

	match = _NOTE_TEXT_PATTERN.match(text)

	if match is None:
		raise ValueError(
			f"Cannot parse note {text!r}. Expected e.g. 'C4', 'F#-1', 'Bb3'."
		)

	letter, accidental, octave = match.groups()
	offset = note_name_to_offset(letter.upper() + accidental)

	return from_note_and_octave(offset, int(octave))


def note_to_name (note: int) -> str:

	"""
	Name a MIDI note in scientific pitch notation, sharps only.

	The note is clamped to 0-127 first, so the result always parses back with
	``from_note_name`` to the same number: 60 → ``"C4"``, 61 → ``"C#4"``, 0 → ``"C-1"``.
	"""

	validated_note = midimessages.validation.validate_note(note)
	octave, offset = divmod(validated_note, midimessages.constants.notes.NOTES_PER_OCTAVE)

	return f"{midimessages.constants.notes.OFFSET_TO_NOTE_NAME[offset]}{octave - 1}"


def from_frequency (frequency: float) -> int:

	"""
	Return the nearest equal-tempered MIDI note for a frequency in Hz.

	Computes ``12 * log2(frequency / 220) + 57`` and rounds halves upward, so
	220 Hz is 57 and 440 Hz is 69.

	The result is not clamped to 0-127: very low or very high frequencies give
	notes outside the MIDI range. Pass it through an encoder (which clamps) or
	``midimessages.validation.validate_note`` before relying on the range.

	Raises:
		ValueError: If the frequency is zero or negative.
	"""

	semitones = 12 * math.log2(frequency / midimessages.constants.notes.REFERENCE_FREQUENCY)

	return math.floor(semitones + midimessages.constants.notes.REFERENCE_NOTE + 0.5)


def note_to_frequency (note: float) -> float:

	"""Return the equal-tempered frequency in Hz of a MIDI note (57 → 220.0)."""

	return midimessages.constants.notes.REFERENCE_FREQUENCY * 2 ** ((note - midimessages.constants.notes.REFERENCE_NOTE) / 12)


def velocity_from_dynamic (dynamic: str) -> int:

	"""
	Look up the velocity for a dynamic marking such as ``"mf"`` or ``"ppp"``.

	Case is ignored. ``"none"`` is silence (0).

	Raises:
		ValueError: If the marking is not one of none, pppp ... ffff.
	"""

	key = dynamic.strip().lower()
	levels: typing.Dict[str, int] = midimessages.constants.velocity.DYNAMIC_TO_VELOCITY

	if key not in levels:
		raise ValueError(
			f"Unknown dynamic: {dynamic!r}. Expected one of {', '.join(levels)}."
		)

	return levels[key]
