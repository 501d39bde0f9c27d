"""Tests for the local preference store."""

import json
import logging

import pytest

from grant_search.models import SessionPreference
from grant_search.preferences import PreferenceStore


@pytest.fixture
def prefs_path(tmp_path):
    return tmp_path / "nested" / "preferences.json"


def test_missing_file_gives_light_mode(prefs_path):
    assert PreferenceStore(prefs_path).load() == SessionPreference(dark_mode=False)


def test_save_then_load(prefs_path):
    store = PreferenceStore(prefs_path)
    store.save(SessionPreference(dark_mode=True))

    assert json.loads(prefs_path.read_text(encoding="utf-8")) == {"dark_mode": True}
    assert PreferenceStore(prefs_path).load().dark_mode is True


def test_toggle_flips_and_persists(prefs_path):
    store = PreferenceStore(prefs_path)

    assert store.toggle_dark_mode() is True
    assert store.toggle_dark_mode() is False
    assert PreferenceStore(prefs_path).load().dark_mode is False


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"dark_mode": "sometimes"}'])
def test_unreadable_file_falls_back_to_default(prefs_path, content, caplog):
    prefs_path.parent.mkdir(parents=True)
    prefs_path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="grant_search.preferences.store"):
        preference = PreferenceStore(prefs_path).load()

    assert preference.dark_mode is False
    assert "Could not read preferences" in caplog.text


def test_unwritable_location_is_logged(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = PreferenceStore(blocker / "preferences.json")

    with caplog.at_level(logging.WARNING, logger="grant_search.preferences.store"):
        store.save(SessionPreference(dark_mode=True))

    assert "Could not write preferences" in caplog.text


def test_toggle_flips_even_when_writes_fail(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = PreferenceStore(blocker / "preferences.json")

    with caplog.at_level(logging.WARNING, logger="grant_search.preferences.store"):
        values = [store.toggle_dark_mode() for _ in range(3)]

    assert values == [True, False, True]
    assert store.current.dark_mode is True
    assert caplog.text.count("Could not write preferences") == 3


def test_current_reads_file_once(prefs_path):
    prefs_path.parent.mkdir(parents=True)
    prefs_path.write_text('{"dark_mode": true}', encoding="utf-8")
    store = PreferenceStore(prefs_path)

    assert store.current.dark_mode is True
    prefs_path.write_text('{"dark_mode": false}', encoding="utf-8")
    assert store.current.dark_mode is True
