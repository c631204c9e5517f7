import sys
from pathlib import Path

# Ensure the package root is on sys.path so importing `editor_utils` works
# during collection however pytest is invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
from editor_utils.i18n import get_default_catalog
from editor_utils.i18n.catalog import TranslationCatalog
from editor_utils.i18n.translator import Translator
from editor_utils.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def silence_logging():
    """Configure logging once per session; silenced under pytest."""
    configure_logging()


@pytest.fixture(autouse=True)
def clear_default_catalog():
    """Reset the process-wide default catalog around every test."""
    get_default_catalog().clear()
    yield
    get_default_catalog().clear()


@pytest.fixture
def catalog():
    """Empty TranslationCatalog owned by the test."""
    return TranslationCatalog()


@pytest.fixture
def translator(catalog):
    """Translator bound to the test's catalog."""
    return Translator(catalog)
