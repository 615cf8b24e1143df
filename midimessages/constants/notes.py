"""Note name and octave constants.

A note is built from an offset within the octave (``C`` = 0 through ``B`` = 11)
and an octave number from -1 to 9. Convention: **C4 = 60** (Middle C)::

    import midimessages.constants.notes as notes
    import midimessages.notes

    midimessages.notes.from_note_and_octave(notes.FS, 3)    # 54

Sharps are named ``<Pitch>S`` (``CS`` for C♯). Flats are enharmonic equivalents
and are accepted by name lookups only (``"Db"`` == ``"C#"`` == 1).
"""

import typing


C  = 0
CS = 1
D  = 2
DS = 3
E  = 4
F  = 5
FS = 6
G  = 7
GS = 8
A  = 9
AS = 10
B  = 11

NOTES_PER_OCTAVE = 12

MIN_OCTAVE = -1
MAX_OCTAVE = 9
DEFAULT_OCTAVE = 4

# MIDI standard range
MIN_NOTE = 0
MAX_NOTE = 127
MIDDLE_C = 60

# Equal temperament anchor: A3 = 220 Hz = note 57
REFERENCE_FREQUENCY = 220.0
REFERENCE_NOTE = 57


NOTE_NAME_TO_OFFSET: typing.Dict[str, int] = {
	"C": C,
	"C#": CS,
	"Db": CS,
	"D": D,
	"D#": DS,
	"Eb": DS,
	"E": E,
	"F": F,
	"F#": FS,
	"Gb": FS,
	"G": G,
	"G#": GS,
	"Ab": GS,
	"A": A,
	"A#": AS,
	"Bb": AS,
	"B": B,
}

OFFSET_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]
