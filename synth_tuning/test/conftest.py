import logging

import pytest

TEST_LOGGER_NAME = "SYNTH_TUNING_TEST_LOGGER"


@pytest.fixture(scope='function')
def logger() -> logging.Logger:
    yield logging.getLogger(TEST_LOGGER_NAME)
