from unittest.mock import MagicMock

import pytest

from python_maybe import identity

NOTHING_VALUE = "_NOTHING_VALUE_"


@pytest.fixture
def spy():
    """A mapping function that records its calls and returns its argument."""
    return MagicMock(side_effect=identity)


@pytest.fixture
def nothing_value():
    return NOTHING_VALUE
