import pytest

from biscuit.settings.encodings import NoopDecoder, encodings_settings
from biscuit.settings.parsing import parsing_settings


@pytest.fixture
def strict_parsing():
    """
    Enables strict cookie parsing for a test, restoring the previous mode
    afterwards.
    """
    previous = parsing_settings.strict
    parsing_settings.use_strict()
    yield True
    parsing_settings.use_strict(previous)


@pytest.fixture(autouse=True)
def default_decoder():
    yield
    encodings_settings.use(NoopDecoder())
