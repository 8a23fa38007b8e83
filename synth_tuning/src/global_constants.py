import numpy as np

# Validation

# Whole-string pattern of a (possibly negative) decimal integer, ASCII digits only
INTEGER_REGEX = r'-?[0-9]+'

# Tuning

# [Hz] frequency of the reference C4
C4_FREQUENCY = 256.0

# Octave of the reference C
REFERENCE_OCTAVE = 4

# [cents] size of an octave
CENTS_PER_OCTAVE = 1200.0

# Number of semitones in an octave
SEMITONES_PER_OCTAVE = 12

# Number of fifths an alteration (sharp/flat) moves a note along the circle of fifths
FIFTHS_PER_ALTERATION = 7

# [cents] perfect fifth of the 12 EDO system, default for fifth based tuners
DEFAULT_FIFTH_SIZE = 700.0

# [cents] maximal deviation of the fifth from DEFAULT_FIFTH_SIZE before a warning is logged. The tuner keeps working
# beyond it, but results might be unexpected.
MAX_FIFTH_DEVIATION = 15.0

# Default number of divisions of the octave for EDO tuners
DEFAULT_EDO_STEPS = 12

# [cents] justly tuned perfect fifth (3/2)
PYTHAGOREAN_FIFTH_SIZE = 701.955000865387

# [cents] perfect fifth narrowed by a quarter of the syntonic comma
QUARTER_COMMA_FIFTH_SIZE = 696.578428466209

# [cents] offset above C of each semitone (index) in the well temperament
WELL_TEMPERAMENT_CENT_OFFSETS = np.array([
    0.0,
    89.898095464287,
    193.156856932418,
    296.415618400547,
    386.313713864834,
    501.629380734065,
    586.639333996158,
    696.578428466209,
    793.156856932417,
    889.735285398626,
    999.674379868678,
    1084.684333130770
])

# Synthesis

# Largest 16 bit sample value, full scale of an oscillator
SAMPLE_MAX_VALUE = int(np.iinfo(np.int16).max)

# Fractions of SAMPLE_MAX_VALUE giving every waveform the same loudness: sqrt(I0 / integral of f(x)^2 over a period),
# with I0 = 1/4 the smallest such integral (white noise)
BHASKARA_NORMALIZATION = 0.707544
CUBIC_NORMALIZATION = 0.514305
NOISE_NORMALIZATION = 1.0
PULSE_NORMALIZATION = 0.5
SAW_NORMALIZATION = 0.866025
SINE_NORMALIZATION = 0.707107
SQUARE_NORMALIZATION = 0.5
TRIANGLE_NORMALIZATION = 0.866025

# Fraction of the period a pulse wave is high by default
DEFAULT_DUTY_CYCLE = 0.125

# [samples] default number of samples a noise value is held for
DEFAULT_NOISE_STEP_DURATION = 1

# Logging
LOG_MSG_TUNER_INITIALIZED = "Tuner initialized"
LOG_MSG_FIFTH_DEVIATION = "The perfect fifth deviates significantly from the standard one"
LOG_MSG_UNKNOWN_NOTE_NAME = "Unknown note name, replaced by a rest"
LOG_MSG_UNKNOWN_OSCILLATOR_TYPE = "Unknown oscillator type, replaced by a SQUARE oscillator"
LOG_MSG_INVALID_DUTY_CYCLE = "Invalid duty cycle, clamped to [0, 1]"
LOG_MSG_INVALID_NOISE_STEP_DURATION = "Invalid noise step duration, left unchanged"
