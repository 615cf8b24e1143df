"""
midimessages - build MIDI channel voice messages from musical input.

Give it note names, octaves, dynamics and channel numbers; get back the
numeric MIDI message ready for a transport (a serial bridge, a Node-RED flow,
a mido output port) to send on. There is no I/O here: every function is a
small, total computation that saturates out-of-range input instead of
raising.

- **Notes.** ``from_note_and_octave(notes.C, 4)`` is 60 (Middle C).
  ``from_note_name("F#3")`` parses scientific pitch notation.
  ``from_frequency(440)`` is 69.
- **Messages.** Note Off, Note On, polyphonic aftertouch, Control Change,
  Program Change, Channel Pressure and 14-bit Pitch Bend.
- **Channels.** Channels are one-based (1-16). Leave the channel out and the
  message goes on the default channel: per encoder with ``MidiEncoder``, or
  process-wide with ``set_global_channel()``.
- **Output.** The module-level functions return the wire string
  ``"[144,60,64]"``. ``MidiEncoder`` returns ``MidiMessage`` objects, which
  format to the same string and convert to ``mido.Message`` with ``to_mido()``.

Minimal example:

    ```python
    import midimessages
    import midimessages.constants.notes as notes
    import midimessages.constants.velocity as velocity

    note = midimessages.from_note_and_octave(notes.C, 4)

    midimessages.set_global_channel(10)
    midimessages.note_on(note, velocity.FF)      # "[153,60,96]"
    midimessages.note_off(note)                  # "[137,60,64]"
    midimessages.pitch_bend(8192, channel=1)     # "[224,0,64]"
    ```

Package-level exports: ``MidiEncoder``, ``MidiMessage``, the message
functions, the global channel accessors and the note helpers.
"""

import midimessages.encoder
import midimessages.message
import midimessages.notes


MidiEncoder = midimessages.encoder.MidiEncoder
MidiMessage = midimessages.message.MidiMessage

note_off = midimessages.encoder.note_off
note_on = midimessages.encoder.note_on
aftertouch = midimessages.encoder.aftertouch
control_change = midimessages.encoder.control_change
program_change = midimessages.encoder.program_change
channel_pressure = midimessages.encoder.channel_pressure
pitch_bend = midimessages.encoder.pitch_bend

set_global_channel = midimessages.encoder.set_global_channel
get_global_channel = midimessages.encoder.get_global_channel

from_note_and_octave = midimessages.notes.from_note_and_octave
from_note_name = midimessages.notes.from_note_name
from_frequency = midimessages.notes.from_frequency
note_to_frequency = midimessages.notes.note_to_frequency
velocity_from_dynamic = midimessages.notes.velocity_from_dynamic
