"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from src.core.config import Settings
from src.duel.match import Match
from src.main import create_app
from src.services.match_service import MatchService


@pytest.fixture
def new_match() -> Match:
    """Standard starting setup, player 0 to move."""
    return Match.new_match()


@pytest.fixture
def match_from_layout() -> Callable[[str], Match]:
    """Call the inner function with a layout string (see src/duel/layout.py)"""

    def _create_match(layout: str) -> Match:
        return Match.new_match(layout)

    return _create_match


@pytest.fixture
def service(new_match: Match) -> MatchService:
    return MatchService(new_match)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Fresh application (and thus a fresh match) for every test."""
    app = create_app(Settings())
    with TestClient(app) as test_client:
        yield test_client
