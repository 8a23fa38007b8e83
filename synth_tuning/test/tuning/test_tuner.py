from unittest.mock import patch

import numpy as np
import pytest

from synth_tuning.src.exceptions import InvalidTuningParameters, TuningException
from synth_tuning.src.global_constants import C4_FREQUENCY, LOG_MSG_FIFTH_DEVIATION, WELL_TEMPERAMENT_CENT_OFFSETS
from synth_tuning.src.tuning.note_name import NoteName
from synth_tuning.src.tuning.tuner import FifthBasedTuner, EDOTuner, PythagoreanTuner, QuarterCommaTuner, \
    WellTemperamentTuner
from synth_tuning.src.utils.math_utils import Math


def _fifth_warnings(caplog):
    return [record for record in caplog.records
            if record.levelname == 'WARNING' and LOG_MSG_FIFTH_DEVIATION in record.getMessage()]


def test_frequency_referenceC4_equalsReferenceFrequencyInAllTunings(logger):
    tuners = [FifthBasedTuner(logger), EDOTuner(logger, 19), PythagoreanTuner(logger), QuarterCommaTuner(logger),
              WellTemperamentTuner(logger)]

    for tuner in tuners:
        assert np.isclose(tuner.frequency(NoteName.C, 4, 0), C4_FREQUENCY)
        assert np.isclose(tuner.frequency(NoteName.C, 5, 0), 2 * C4_FREQUENCY)
        assert np.isclose(tuner.frequency(NoteName.C, 3, 0), C4_FREQUENCY / 2)


def test_frequency_rest_isZero(logger):
    assert FifthBasedTuner(logger).frequency(NoteName.REST, 4, 0) == 0.0
    assert WellTemperamentTuner(logger).frequency(NoteName.REST, 4, 0) == 0.0


def test_frequency_12EdoChromaticScale_equalTemperedSemitones(logger):
    tuner = EDOTuner(logger)
    scale = [(NoteName.C, 0), (NoteName.C, 1), (NoteName.D, 0), (NoteName.D, 1), (NoteName.E, 0), (NoteName.F, 0),
             (NoteName.F, 1), (NoteName.G, 0), (NoteName.G, 1), (NoteName.A, 0), (NoteName.A, 1), (NoteName.B, 0)]

    frequencies = tuner.frequencies([(note_name, 4, alteration) for note_name, alteration in scale])

    expected = C4_FREQUENCY * np.power(2.0, np.arange(12) / 12)
    np.testing.assert_allclose(frequencies, expected)


def test_frequency_flatOf12Edo_enharmonicWithSharp(logger):
    tuner = FifthBasedTuner(logger)

    assert np.isclose(tuner.frequency(NoteName.E, 4, -1), tuner.frequency(NoteName.D, 4, 1))
    assert np.isclose(tuner.frequency(NoteName.B, 4, -1), tuner.frequency(NoteName.A, 4, 1))


def test_frequency_pythagoreanFifth_justRatio(logger):
    tuner = PythagoreanTuner(logger)

    assert np.isclose(tuner.frequency(NoteName.G, 4, 0) / tuner.frequency(NoteName.C, 4, 0), 1.5)
    assert np.isclose(tuner.frequency(NoteName.D, 5, 0) / tuner.frequency(NoteName.G, 4, 0), 1.5)


def test_frequency_quarterCommaMajorThird_justRatio(logger):
    tuner = QuarterCommaTuner(logger)

    assert np.isclose(tuner.frequency(NoteName.E, 4, 0) / tuner.frequency(NoteName.C, 4, 0), 1.25)


def test_frequency_pythagoreanSharpAndFlat_notEnharmonic(logger):
    tuner = PythagoreanTuner(logger)

    assert tuner.frequency(NoteName.D, 4, 1) > tuner.frequency(NoteName.E, 4, -1)


def test_frequency_wellTemperament_matchesCentOffsetsTable(logger):
    tuner = WellTemperamentTuner(logger)

    assert np.isclose(tuner.frequency(NoteName.C, 4, 1),
                      C4_FREQUENCY * 2 ** (WELL_TEMPERAMENT_CENT_OFFSETS[1] / 1200))
    assert np.isclose(tuner.frequency(NoteName.G, 4, 0),
                      C4_FREQUENCY * 2 ** (WELL_TEMPERAMENT_CENT_OFFSETS[7] / 1200))
    assert np.isclose(tuner.frequency(NoteName.A, 2, 0),
                      C4_FREQUENCY * 2 ** (-2 + WELL_TEMPERAMENT_CENT_OFFSETS[9] / 1200))


def test_frequency_wellTemperamentAlterationCrossingOctave_octaveShifted(logger):
    tuner = WellTemperamentTuner(logger)

    # B#4 sounds as C5, Cb4 sounds as B3
    assert np.isclose(tuner.frequency(NoteName.B, 4, 1), 2 * C4_FREQUENCY)
    assert np.isclose(tuner.frequency(NoteName.C, 4, -1), tuner.frequency(NoteName.B, 3, 0))


def test_frequencies_listOfPitches_sameAsSingleFrequencies(logger):
    tuner = QuarterCommaTuner(logger)
    pitches = [(NoteName.C, 4, 0), (NoteName.REST, 4, 0), (NoteName.F, 3, 1), (NoteName.B, 6, -1)]

    frequencies = tuner.frequencies(pitches)

    np.testing.assert_array_equal(frequencies, [tuner.frequency(*pitch) for pitch in pitches])


def test_glissandoFrequencies_towardsNote_linearlyInterpolated(logger):
    tuner = FifthBasedTuner(logger)
    start = (NoteName.C, 4, 0)
    target = (NoteName.C, 5, 0)

    frequencies = tuner.glissando_frequencies(start, target, 4)

    np.testing.assert_allclose(frequencies, C4_FREQUENCY * np.array([1.0, 1.25, 1.5, 1.75]))


def test_glissandoFrequencies_towardsRest_constantFrequency(logger):
    tuner = WellTemperamentTuner(logger)

    frequencies = tuner.glissando_frequencies((NoteName.A, 4, 0), (NoteName.REST, 4, 0), 3)

    np.testing.assert_array_equal(frequencies, np.full(3, tuner.frequency(NoteName.A, 4, 0)))


def test_edoFifthSize_variousDivisions_closestStepToStandardFifth():
    assert np.isclose(EDOTuner.edo_fifth_size(12), 700.0)
    assert np.isclose(EDOTuner.edo_fifth_size(19), 1200.0 / 19 * 11)
    assert np.isclose(EDOTuner.edo_fifth_size(31), 1200.0 / 31 * 18)
    assert np.isclose(EDOTuner.edo_fifth_size(53), 1200.0 / 53 * 31)


def test_edoTuner_nonPositiveSteps_raises(logger):
    for n_steps in [0, -12]:
        with pytest.raises(InvalidTuningParameters):
            EDOTuner(logger, n_steps)

    with pytest.raises(TuningException):
        EDOTuner.edo_fifth_size(0)


def test_edoTuner_exposesParameters(logger):
    tuner = EDOTuner(logger, 31)

    assert tuner.n_steps == 31
    assert np.isclose(tuner.fifth_size, 1200.0 / 31 * 18)


def test_fifthBasedTuner_largeDeviation_warnsButStillTunes(logger, caplog):
    tuner = FifthBasedTuner(logger, 720.0)

    assert len(_fifth_warnings(caplog)) == 1
    assert np.isclose(tuner.frequency(NoteName.G, 4, 0), C4_FREQUENCY * 2 ** (720.0 / 1200))


def test_fifthBasedTuner_historicalFifths_noWarning(logger, caplog):
    PythagoreanTuner(logger)
    QuarterCommaTuner(logger)
    EDOTuner(logger, 31)

    assert len(_fifth_warnings(caplog)) == 0


def test_edoTuner_coarseDivision_warnsOnDeviatingFifth(logger, caplog):
    EDOTuner(logger, 5)

    assert len(_fifth_warnings(caplog)) == 1


def test_frequency_fifthBasedTuner_intervalReducedWithFloorModulus(logger):
    tuner = FifthBasedTuner(logger)

    with patch('synth_tuning.src.tuning.tuner.Math.mod_float', wraps=Math.mod_float) as mod_float:
        frequency = tuner.frequency(NoteName.F, 4, 0)

    mod_float.assert_called_once_with(-700.0, 1200.0)
    assert np.isclose(frequency, C4_FREQUENCY * 2 ** (500.0 / 1200))


def test_frequency_wellTemperament_semitoneReducedWithFloorModulus(logger):
    tuner = WellTemperamentTuner(logger)

    with patch('synth_tuning.src.tuning.tuner.Math.mod_int', wraps=Math.mod_int) as mod_int:
        tuner.frequency(NoteName.C, 4, -1)

    mod_int.assert_called_once_with(-1, 12)
