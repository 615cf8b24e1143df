import logging

import midimessages
import midimessages.config
import midimessages.constants.notes as notes
import midimessages.constants.velocity as velocity

logging.basicConfig(level=logging.INFO)

# Picks up midi.default_channel from config.yaml when present.
midimessages.config.configure(midimessages.config.load_config())

# Patch 0 (Acoustic Grand Piano) and a full mod wheel before playing.
print(midimessages.program_change(0))
print(midimessages.control_change(1, 127))

# One octave up from Middle C, getting louder as it climbs.
dynamics = ["pp", "p", "mp", "mf", "f", "ff"]

for offset in range(notes.NOTES_PER_OCTAVE):
	note = midimessages.from_note_and_octave(offset, 4)
	level = midimessages.velocity_from_dynamic(dynamics[offset // 2])
	print(midimessages.note_on(note, level))
	print(midimessages.note_off(note))

# A4 by frequency, on the drum channel regardless of the default.
a4 = midimessages.from_frequency(440)
print(midimessages.note_on(a4, velocity.FFFF, channel=10))

# Bend up a whole tone (on a +/- 2 semitone synth), then back to centre.
print(midimessages.pitch_bend(16383))
print(midimessages.pitch_bend())
