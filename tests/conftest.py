import logging

import pytest

from tests.fixtures_html import full_page


@pytest.fixture
def character_page() -> str:
    return full_page()


@pytest.fixture
def restore_root_logging():
    """The CLI installs its own handlers on the root logger; put the old ones back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
