"""Constants for MIDI message construction.

This package contains three sets of constants:

- ``midimessages.constants.notes`` - Note offsets (C = 0 ... B = 11) and the octave range
- ``midimessages.constants.velocity`` - Named dynamic levels (none ... ffff) as velocities
- ``midimessages.constants.messages`` - Status byte base codes and data byte ranges
"""
