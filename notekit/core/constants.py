"""Global constants for notekit."""

# Tuning reference: MIDI 69 = 440 Hz
CONCERT_PITCH = 440.0
CONCERT_PITCH_MIDI = 69

SEMITONES_PER_OCTAVE = 12

# MIDI ranges
MIDI_MIN = 0
MIDI_MAX = 127

# Octaves reachable inside the MIDI range
OCTAVE_MIN = 0
OCTAVE_MAX = 10
