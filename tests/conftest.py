"""Test configuration and fixtures."""

import logfire
import pytest

from blog.domain.model import Article
from tests.factories import make_article

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def article() -> Article:
    """A published article to comment on."""
    return make_article()
