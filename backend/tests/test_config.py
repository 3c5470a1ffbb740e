"""Tests for configuration and the composition root."""

import logging

import pytest

from deckpicker import config
from deckpicker.adapters.anki_collection import AnkiCollectionReader
from deckpicker.adapters.anki_connect import AnkiConnectAdapter
from deckpicker.adapters.local_sample_deck import LocalSampleDeckAdapter
from deckpicker.composition import create_deck_list_projector, create_deck_source
from deckpicker.domain.value_objects.review_rates import ReviewRates
from helpers import deck, metadata_for


def test_defaults(monkeypatch):
    for name in ("DECK_SOURCE", "ANKI_CONNECT_URL", "ANKI_CONNECT_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert config.get_deck_source_type() == "anki"
    assert config.get_anki_url() == "http://localhost:8765"
    assert config.get_anki_timeout() == 5.0
    assert config.get_log_level() == logging.INFO


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DECK_SOURCE", "LOCAL")
    monkeypatch.setenv("ANKI_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    assert config.get_deck_source_type() == "local"
    assert config.get_anki_retry_attempts() == 5
    assert config.get_log_level() == logging.DEBUG
    assert config.get_cors_origins() == ["http://a.test", "http://b.test"]


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.INFO


def test_create_deck_source_by_type(monkeypatch, tmp_path):
    monkeypatch.setenv("ANKI_COLLECTION_PATH", str(tmp_path / "collection.anki2"))

    assert isinstance(create_deck_source("local"), LocalSampleDeckAdapter)
    assert isinstance(create_deck_source("anki"), AnkiConnectAdapter)
    reader = create_deck_source("collection")
    assert isinstance(reader, AnkiCollectionReader)
    assert reader.path == tmp_path / "collection.anki2"


def test_create_deck_source_reads_env(monkeypatch):
    monkeypatch.setenv("DECK_SOURCE", "local")
    assert isinstance(create_deck_source(), LocalSampleDeckAdapter)


def test_collection_source_requires_path(monkeypatch):
    monkeypatch.delenv("ANKI_COLLECTION_PATH", raising=False)
    with pytest.raises(ValueError, match="ANKI_COLLECTION_PATH"):
        create_deck_source("collection")


def test_invalid_source_type():
    with pytest.raises(ValueError, match="Invalid DECK_SOURCE"):
        create_deck_source("dropbox")


def test_projector_uses_collection_rates():
    rates = ReviewRates(review_success_rate=1.0, review_seconds=60.0)
    projector = create_deck_list_projector(rates)

    forest = [deck(1, "A", counts=(0, 0, 3))]
    projector.build(forest, metadata_for(forest))
    assert projector.eta() == 3
