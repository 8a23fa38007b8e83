from enum import Enum
from logging import Logger

from synth_tuning.src.global_constants import LOG_MSG_UNKNOWN_NOTE_NAME, SEMITONES_PER_OCTAVE


class NoteName(Enum):
    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6
    REST = 7

    def semitones_above_c(self) -> int:
        """
        How many semitones this note is above the C of its octave. -1 for a rest.
        """
        return _SEMITONES_ABOVE_C[self]

    def fifths_above_c(self) -> int:
        """
        How many fifths this note is above (positive) or below (negative) C in the circle of fifths. 0 for a rest.
        """
        return _FIFTHS_ABOVE_C[self]


_SEMITONES_ABOVE_C = {
    NoteName.C: 0,
    NoteName.D: 2,
    NoteName.E: 4,
    NoteName.F: 5,
    NoteName.G: 7,
    NoteName.A: 9,
    NoteName.B: 11,
    NoteName.REST: -1
}

_FIFTHS_ABOVE_C = {
    NoteName.C: 0,
    NoteName.D: 2,
    NoteName.E: 4,
    NoteName.F: -1,
    NoteName.G: 1,
    NoteName.A: 3,
    NoteName.B: 5,
    NoteName.REST: 0
}

# textual representations of a rest
REST_NAMES = ('0', 'REST')


def string_to_note_name(note_name: str, logger: Logger) -> NoteName:
    """
    Parses a note name. Unknown names are logged and replaced by a rest.
    :param note_name: one of C, D, E, F, G, A, B, or 0/REST for a rest
    :param logger: logger for reporting unknown names
    :return: the corresponding NoteName
    """
    if note_name in REST_NAMES:
        return NoteName.REST

    if note_name in NoteName.__members__:
        return NoteName[note_name]

    logger.warning("%s: %s", LOG_MSG_UNKNOWN_NOTE_NAME, note_name)
    return NoteName.REST


def calculate_midi_number(note_name: NoteName, octave: int, alteration: int) -> int:
    """
    MIDI number of a note, with C4 being 60
    :param note_name: the natural note
    :param octave: scientific pitch notation octave
    :param alteration: number of semitones the note is raised (sharps, positive) or lowered (flats, negative)
    :return: the MIDI note number
    """
    return SEMITONES_PER_OCTAVE * (octave + 1) + note_name.semitones_above_c() + alteration
