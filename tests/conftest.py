# tests/conftest.py

import pytest

from trie_autocompleter.utils.logger_utils import log


@pytest.fixture(autouse=True)
def reset_log():
    # main() reconfigures the shared logger; put it back after each test
    saved = (log.path, log.use_color, log.level, log._stream)
    yield
    log.path, log.use_color, log.level, log._stream = saved
