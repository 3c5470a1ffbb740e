"""Shared test fixtures."""

import pytest

from deckpicker.adapters.local_sample_deck import LocalSampleDeckAdapter
from helpers import FixedEta


@pytest.fixture
def fixed_eta() -> FixedEta:
    return FixedEta()


@pytest.fixture
def sample_source() -> LocalSampleDeckAdapter:
    """Deck source serving the bundled sample collection."""
    return LocalSampleDeckAdapter()
