from abc import ABCMeta, abstractmethod
from logging import Logger
from typing import List, Tuple

import numpy as np

from synth_tuning.src.exceptions import raises, InvalidTuningParameters
from synth_tuning.src.global_constants import C4_FREQUENCY, REFERENCE_OCTAVE, CENTS_PER_OCTAVE, \
    SEMITONES_PER_OCTAVE, FIFTHS_PER_ALTERATION, DEFAULT_FIFTH_SIZE, MAX_FIFTH_DEVIATION, DEFAULT_EDO_STEPS, \
    PYTHAGOREAN_FIFTH_SIZE, QUARTER_COMMA_FIFTH_SIZE, WELL_TEMPERAMENT_CENT_OFFSETS, LOG_MSG_TUNER_INITIALIZED, \
    LOG_MSG_FIFTH_DEVIATION
from synth_tuning.src.tuning.note_name import NoteName
from synth_tuning.src.utils.math_utils import Math

# (note name, octave, alteration in semitones)
Pitch = Tuple[NoteName, int, int]


class Tuner(metaclass=ABCMeta):
    def __init__(self, logger: Logger):
        self._logger = logger

    @abstractmethod
    def _octave_and_cents(self, note_name: NoteName, octave: int, alteration: int) -> Tuple[int, float]:
        """
        Places a (non-rest) note in this tuning system
        :return: the octave the note sounds in and its offset in cents above the C of that octave
        """
        pass

    def frequency(self, note_name: NoteName, octave: int, alteration: int) -> float:
        """
        Frequency of a note in this tuning system, relative to C4_FREQUENCY
        :param note_name: the natural note
        :param octave: scientific pitch notation octave
        :param alteration: semitones the note is raised (positive) or lowered (negative) by
        :return: [Hz] frequency of the note, 0.0 for a rest
        """
        if note_name == NoteName.REST:
            return 0.0

        sounding_octave, cents = self._octave_and_cents(note_name, octave, alteration)
        return float(C4_FREQUENCY * np.power(2.0, sounding_octave - REFERENCE_OCTAVE + cents / CENTS_PER_OCTAVE))

    def frequencies(self, pitches: List[Pitch]) -> np.ndarray:
        """
        Vectorized version of frequency()
        :param pitches: list of (note name, octave, alteration) tuples
        :return: 1D numpy array of frequencies [Hz], one per pitch
        """
        return np.array([self.frequency(*pitch) for pitch in pitches], dtype=float)

    def glissando_frequencies(self, start: Pitch, target: Pitch, duration: int) -> np.ndarray:
        """
        Frequencies of a glissando from start towards target, linearly interpolated on frequency (the target itself
        is not reached: it is the first step of the following note). A glissando towards a rest is not performed.
        :param start: the gliding pitch
        :param target: the pitch the glissando is heading to
        :param duration: number of time steps of the start note
        :return: 1D numpy array of frequencies [Hz] of length <duration>
        """
        start_frequency = self.frequency(*start)
        if target[0] == NoteName.REST:
            return np.full(duration, start_frequency)

        target_frequency = self.frequency(*target)
        return start_frequency + (target_frequency - start_frequency) * np.arange(duration) / duration


class FifthBasedTuner(Tuner):
    """
    Tuning systems generated by a chain of (equally sized) perfect fifths
    """
    def __init__(self, logger: Logger, fifth_size: float = DEFAULT_FIFTH_SIZE):
        super().__init__(logger)
        self._fifth_size = fifth_size

        if abs(fifth_size - DEFAULT_FIFTH_SIZE) > MAX_FIFTH_DEVIATION:
            self._logger.warning("%s: %.2f cents. This might cause some unexpected results, but won't stop the tuner "
                                 "from working.", LOG_MSG_FIFTH_DEVIATION, fifth_size)

        self._logger.debug("%s: %s, fifth size: %.2f cents", LOG_MSG_TUNER_INITIALIZED, self.__class__.__name__,
                           fifth_size)

    @property
    def fifth_size(self) -> float:
        return self._fifth_size

    def _octave_and_cents(self, note_name: NoteName, octave: int, alteration: int) -> Tuple[int, float]:
        fifths = note_name.fifths_above_c() + FIFTHS_PER_ALTERATION * alteration
        return octave, Math.mod_float(fifths * self._fifth_size, CENTS_PER_OCTAVE)


class EDOTuner(FifthBasedTuner):
    """
    Equal division of the octave in n_steps: the fifth is the EDO step closest to the 12 EDO fifth
    """
    @raises(InvalidTuningParameters)
    def __init__(self, logger: Logger, n_steps: int = DEFAULT_EDO_STEPS):
        self._n_steps = n_steps
        super().__init__(logger, EDOTuner.edo_fifth_size(n_steps))

    @property
    def n_steps(self) -> int:
        return self._n_steps

    @staticmethod
    @raises(InvalidTuningParameters)
    def edo_fifth_size(n_steps: int) -> float:
        """
        Calculates the perfect fifth of an EDO system
        :param n_steps: number of divisions of the octave
        :return: [cents] size of the fifth
        """
        if n_steps <= 0:
            raise InvalidTuningParameters("number of divisions of the octave has to be positive, got %s" % n_steps)

        step_size = CENTS_PER_OCTAVE / n_steps
        steps_per_fifth = int(round(DEFAULT_FIFTH_SIZE / step_size))
        return step_size * steps_per_fifth


class PythagoreanTuner(FifthBasedTuner):
    def __init__(self, logger: Logger):
        super().__init__(logger, PYTHAGOREAN_FIFTH_SIZE)


class QuarterCommaTuner(FifthBasedTuner):
    def __init__(self, logger: Logger):
        super().__init__(logger, QUARTER_COMMA_FIFTH_SIZE)


class WellTemperamentTuner(Tuner):
    """
    Irregular circular temperament: fifths between C and E are narrowed by 1/4 (1/6 at the edges) of the syntonic
    comma, the remaining ones are just or slightly wide
    """
    def __init__(self, logger: Logger):
        super().__init__(logger)
        self._logger.debug("%s: %s", LOG_MSG_TUNER_INITIALIZED, self.__class__.__name__)

    def _octave_and_cents(self, note_name: NoteName, octave: int, alteration: int) -> Tuple[int, float]:
        semitones = note_name.semitones_above_c() + alteration
        semitone_index = Math.mod_int(semitones, SEMITONES_PER_OCTAVE)

        # alterations shifting by more than one octave do not occur in practice
        if semitones < 0:
            octave_shift = -1
        elif semitones >= SEMITONES_PER_OCTAVE:
            octave_shift = 1
        else:
            octave_shift = 0

        return octave + octave_shift, float(WELL_TEMPERAMENT_CENT_OFFSETS[semitone_index])
