import operator
import re

from synth_tuning.src.exceptions import raises, NonPositiveModulusError
from synth_tuning.src.global_constants import INTEGER_REGEX

INTEGER_PATTERN = re.compile(INTEGER_REGEX)


class Math:
    @staticmethod
    @raises(NonPositiveModulusError)
    def mod_float(aa: float, bb: float) -> float:
        """
        Floor-style modulus of floating point operands: unlike the C-family remainder, the result stays in [0, bb)
        also for negative aa (e.g. mod_float(-5.0, 3.0) == 1.0)
        :param aa: dividend, any sign
        :param bb: divisor, has to be positive
        :return: aa modulo bb, in [0, bb). A negative aa closer to 0 than half the resolution of bb rounds up to bb.
        """
        if not bb > 0:
            raise NonPositiveModulusError("modulus divisor has to be positive, got %s" % bb)

        if aa >= 0:
            return float(aa % bb)

        remainder = -aa % bb
        if remainder != 0:
            return float(bb - remainder)
        else:
            return 0.0

    @staticmethod
    @raises(NonPositiveModulusError)
    def mod_int(aa: int, bb: int) -> int:
        """
        Floor-style modulus of integer operands, same contract as mod_float but computed in integer arithmetic.
        Operands have to be integers (int or numpy integer), floats are rejected rather than truncated.
        :param aa: dividend, any sign
        :param bb: divisor, has to be positive
        :return: aa modulo bb, in [0, bb)
        """
        aa = operator.index(aa)
        bb = operator.index(bb)
        if not bb > 0:
            raise NonPositiveModulusError("modulus divisor has to be positive, got %s" % bb)

        if aa >= 0:
            return aa % bb

        remainder = -aa % bb
        if remainder != 0:
            return bb - remainder
        else:
            return 0

    @staticmethod
    def is_integer(numeric_string: str) -> bool:
        """
        Checks whether the whole string is an integer number: an optional leading minus followed by ASCII digits.
        No sign other than '-' and no surrounding whitespace are accepted.
        :param numeric_string: any string
        :return: True if the string can be parsed as an integer
        """
        return INTEGER_PATTERN.fullmatch(numeric_string) is not None
