import pytest

from urlspell.config import DEFAULT_ALPHABET, get_settings
from urlspell.corrector import URLCorrector

TRAINING_TEXT = (
    "https://docs.rs/regex/latest/regex/ "
    "https://norvig.com/spell-correct.html "
    "https://doc.rust-lang.org/stable/std/thread/fn.scope.html"
)


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def corrector():
    with URLCorrector(alphabet=DEFAULT_ALPHABET, workers=1) as c:
        yield c


@pytest.fixture
def trained():
    with URLCorrector(alphabet=DEFAULT_ALPHABET, workers=2) as c:
        c.train(TRAINING_TEXT)
        yield c
