from abc import ABCMeta, abstractmethod
from enum import Enum
from logging import Logger
from typing import Optional

import numpy as np

from synth_tuning.src.global_constants import SAMPLE_MAX_VALUE, BHASKARA_NORMALIZATION, CUBIC_NORMALIZATION, \
    NOISE_NORMALIZATION, PULSE_NORMALIZATION, SAW_NORMALIZATION, SINE_NORMALIZATION, SQUARE_NORMALIZATION, \
    TRIANGLE_NORMALIZATION, DEFAULT_DUTY_CYCLE, DEFAULT_NOISE_STEP_DURATION, LOG_MSG_UNKNOWN_OSCILLATOR_TYPE, \
    LOG_MSG_INVALID_DUTY_CYCLE, LOG_MSG_INVALID_NOISE_STEP_DURATION
from synth_tuning.src.utils.math_utils import Math


class OscillatorType(Enum):
    BHASKARA = 0
    CUBIC = 1
    NOISE = 2
    PULSE = 3
    SAW = 4
    SINE = 5
    SQUARE = 6
    TRIANGLE = 7


class Oscillator(metaclass=ABCMeta):
    """
    Periodic waveform generator. The phase is the position within the period, in [0, 1), and wave positions are
    16 bit samples scaled by the normalization of the waveform.
    """
    def __init__(self, logger: Logger, is_pitched: bool, normalization: float):
        self._logger = logger
        self._is_pitched = is_pitched
        self._normalization = int(normalization * SAMPLE_MAX_VALUE)

    @property
    def is_pitched(self) -> bool:
        return self._is_pitched

    @property
    def normalization(self) -> int:
        return self._normalization

    @abstractmethod
    def wave_position(self, phase: float) -> int:
        """
        Sample of the waveform at the given phase
        :param phase: position within the period, in [0, 1)
        :return: 16 bit sample value
        """
        pass

    def wave(self, phases: np.ndarray) -> np.ndarray:
        """
        Vectorized version of wave_position()
        :param phases: 1D numpy array of phases, in [0, 1)
        :return: 1D numpy array (int16) of samples, one per phase
        """
        return np.array([self.wave_position(phase) for phase in phases], dtype=np.int16)


class BhaskaraOscillator(Oscillator):
    """
    Sine approximated by Bhaskara I's rational formula on each half period
    """
    def __init__(self, logger: Logger):
        super().__init__(logger, True, BHASKARA_NORMALIZATION)

    def wave_position(self, phase: float) -> int:
        if phase < 0.5:
            return int(self._normalization * 16 * phase * (0.5 - phase) / (1.25 - 4 * phase * (0.5 - phase)))
        else:
            return int(self._normalization * 16 * (phase - 0.5) * (phase - 1) /
                       (1.25 - 4 * (phase - 0.5) * (1 - phase)))


class CubicOscillator(Oscillator):
    """
    Cubic polynomial with the roots of sin(2 * pi * phase) in [0, 1], scaled to extrema of +-1
    """
    def __init__(self, logger: Logger):
        super().__init__(logger, True, CUBIC_NORMALIZATION)

    def wave_position(self, phase: float) -> int:
        return int(self._normalization * phase * (phase * (20.785 * phase - 31.1775) + 10.3925))


class NoiseOscillator(Oscillator):
    """
    Unpitched white noise: a new random sample is drawn every step_duration samples, and held in between
    """
    def __init__(self, logger: Logger, step_duration: int = DEFAULT_NOISE_STEP_DURATION, seed: Optional[int] = None):
        super().__init__(logger, False, NOISE_NORMALIZATION)
        self._step_duration = step_duration
        self._step_counter = 0
        self._wave_position = 0
        self._random = np.random.default_rng(seed)

    @property
    def step_duration(self) -> int:
        return self._step_duration

    def set_step_duration(self, step_duration: int) -> None:
        """
        Sets the number of samples a noise value is held for. Non-positive values are logged and ignored.
        """
        if step_duration > 0:
            self._step_duration = step_duration
        else:
            self._logger.warning("%s: %s", LOG_MSG_INVALID_NOISE_STEP_DURATION, step_duration)

    def wave_position(self, phase: float) -> int:
        self._step_counter += 1
        if self._step_counter >= self._step_duration:
            self._step_counter -= self._step_duration
            self._wave_position = int(self._normalization * (2 * self._random.random() - 1))
        return self._wave_position


class PulseOscillator(Oscillator):
    """
    Rectangular wave, high for the first duty_cycle fraction of the period
    """
    def __init__(self, logger: Logger, duty_cycle: float = DEFAULT_DUTY_CYCLE):
        super().__init__(logger, True, PULSE_NORMALIZATION)
        self._duty_cycle = DEFAULT_DUTY_CYCLE
        self.set_duty_cycle(duty_cycle)

    @property
    def duty_cycle(self) -> float:
        return self._duty_cycle

    def set_duty_cycle(self, duty_cycle: float) -> None:
        """
        Sets the duty cycle. Values outside [0, 1] are logged and clamped.
        """
        if not 0.0 <= duty_cycle <= 1.0:
            self._logger.warning("%s: %s", LOG_MSG_INVALID_DUTY_CYCLE, duty_cycle)
        self._duty_cycle = float(np.clip(duty_cycle, 0.0, 1.0))

    def wave_position(self, phase: float) -> int:
        return self._normalization if phase < self._duty_cycle else -self._normalization


class SawOscillator(Oscillator):
    def __init__(self, logger: Logger):
        super().__init__(logger, True, SAW_NORMALIZATION)

    def wave_position(self, phase: float) -> int:
        return int(self._normalization * (1 - 2 * phase))


class SineOscillator(Oscillator):
    def __init__(self, logger: Logger):
        super().__init__(logger, True, SINE_NORMALIZATION)

    def wave_position(self, phase: float) -> int:
        return int(self._normalization * np.sin(2 * np.pi * phase))


class SquareOscillator(Oscillator):
    def __init__(self, logger: Logger):
        super().__init__(logger, True, SQUARE_NORMALIZATION)

    def wave_position(self, phase: float) -> int:
        return self._normalization if phase < 0.5 else -self._normalization


class TriangleOscillator(Oscillator):
    def __init__(self, logger: Logger):
        super().__init__(logger, True, TRIANGLE_NORMALIZATION)

    def wave_position(self, phase: float) -> int:
        # shifted by a quarter period so that the wave starts at 0 and rises, like a sine
        return int(self._normalization * (4 * abs(Math.mod_float(phase - 0.25, 1.0) - 0.5) - 1))


_OSCILLATOR_CLASSES = {
    OscillatorType.BHASKARA: BhaskaraOscillator,
    OscillatorType.CUBIC: CubicOscillator,
    OscillatorType.NOISE: NoiseOscillator,
    OscillatorType.PULSE: PulseOscillator,
    OscillatorType.SAW: SawOscillator,
    OscillatorType.SINE: SineOscillator,
    OscillatorType.SQUARE: SquareOscillator,
    OscillatorType.TRIANGLE: TriangleOscillator
}


def string_to_oscillator_type(oscillator_type: str, logger: Logger) -> OscillatorType:
    """
    Parses an oscillator type name. Unknown names are logged and replaced by SQUARE.
    :param oscillator_type: one of the OscillatorType member names
    :param logger: logger for reporting unknown names
    :return: the corresponding OscillatorType
    """
    if oscillator_type in OscillatorType.__members__:
        return OscillatorType[oscillator_type]

    logger.warning("%s: %s", LOG_MSG_UNKNOWN_OSCILLATOR_TYPE, oscillator_type)
    return OscillatorType.SQUARE


def create_oscillator(oscillator_type: OscillatorType, logger: Logger) -> Oscillator:
    """
    Builds an oscillator of the given type with its default parameters
    """
    return _OSCILLATOR_CLASSES[oscillator_type](logger)
