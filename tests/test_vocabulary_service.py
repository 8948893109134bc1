"""Tests for the browsing session."""

import random
from unittest.mock import MagicMock

import pytest

from worddeck.models import WordEntry
from worddeck.services import NavigatorState, SortMode, VocabularyLoadError, VocabularyService


@pytest.fixture
def service(sample_entries):
    return VocabularyService(sample_entries, rng=random.Random(11))


def _sources(entries):
    return [e.source_text for e in entries]


class TestInitialState:
    """Tests for a fresh session."""

    def test_alphabetical_by_default(self, service):
        assert service.sort_mode is SortMode.ALPHABETICAL
        assert _sources(service.sequence)[:2] == ["Apple", "café"]
        assert service.cursor == 0
        assert service.current_entry().source_text == "Apple"

    def test_counts(self, service, sample_entries):
        assert service.total_count() == len(sample_entries)
        assert service.match_count() == len(sample_entries)

    def test_entries_keep_load_order(self, service, sample_entries):
        assert service.entries == tuple(sample_entries)

    def test_empty_collection(self):
        service = VocabularyService([])
        assert service.state is NavigatorState.EMPTY
        assert service.current_entry() is None


class TestQuery:
    """Tests for search input."""

    def test_filter_and_order(self, service):
        """Test "lear" keeps learn and clear, shown A -> Z."""
        service.set_query("lear")
        assert _sources(service.sequence) == ["clear", "learn"]
        assert service.match_count() == 2

    def test_query_resets_cursor(self, service):
        service.next()
        service.next()
        service.set_query("a")
        assert service.cursor == 0

    def test_same_query_still_resets(self, service):
        service.set_query("a")
        service.next()
        service.set_query("a")
        assert service.cursor == 0

    def test_no_matches(self, service):
        service.set_query("zzz")
        assert service.state is NavigatorState.EMPTY
        assert service.current_entry() is None
        service.next()
        service.jump_random()
        assert service.cursor is None

    def test_clear_query(self, service, sample_entries):
        service.set_query("zzz")
        service.clear_query()
        assert service.query == ""
        assert service.match_count() == len(sample_entries)

    def test_none_query(self, service, sample_entries):
        service.set_query(None)
        assert service.match_count() == len(sample_entries)


class TestSortMode:
    """Tests for ordering input."""

    def test_shuffle_is_permutation(self, service, sample_entries):
        service.set_sort_mode(SortMode.RANDOMIZED)
        assert service.sort_mode is SortMode.RANDOMIZED
        assert set(service.sequence) == set(sample_entries)
        assert service.cursor == 0

    def test_mode_by_value(self, service):
        service.set_sort_mode("shuffle")
        assert service.sort_mode is SortMode.RANDOMIZED

    def test_shuffle_respects_filter(self, service):
        service.set_query("lear")
        service.set_sort_mode("shuffle")
        assert set(_sources(service.sequence)) == {"clear", "learn"}

    def test_back_to_alpha(self, service):
        service.set_sort_mode("shuffle")
        service.set_sort_mode("alpha")
        assert _sources(service.sequence) == sorted(_sources(service.sequence), key=str.casefold)

    def test_unknown_mode(self, service):
        with pytest.raises(ValueError):
            service.set_sort_mode("zigzag")

    def test_seeded_shuffle_reproducible(self, sample_entries):
        first = VocabularyService(sample_entries, sort_mode="shuffle", rng=random.Random(5))
        second = VocabularyService(sample_entries, sort_mode="shuffle", rng=random.Random(5))
        assert first.sequence == second.sequence


class TestNavigation:
    """Tests for cursor commands through the session."""

    def test_next_prev(self, service):
        service.next()
        assert service.cursor == 1
        service.prev()
        service.prev()
        assert service.cursor == service.match_count() - 1

    def test_jump_to_start_and_reset(self, service):
        service.next()
        service.jump_to_start()
        assert service.cursor == 0
        service.next()
        service.reset()
        assert service.cursor == 0

    def test_jump_random_in_range(self, service):
        for _ in range(20):
            service.jump_random()
            assert 0 <= service.cursor < service.match_count()

    def test_handle_key(self, service):
        assert service.handle_key("Arrow Right")
        assert service.cursor == 1
        assert service.handle_key("Arrow Left")
        assert service.cursor == 0

    def test_handle_key_while_typing(self, service):
        assert not service.handle_key("Arrow Right", text_input_focused=True)
        assert service.cursor == 0

    def test_handle_unknown_key(self, service):
        assert not service.handle_key("Space")


class TestChangeCallbacks:
    """Tests for change notification."""

    def test_called_on_every_change(self, service):
        callback = MagicMock()
        service.on_change(callback)
        service.set_query("a")
        service.next()
        service.set_sort_mode("shuffle")
        assert callback.call_count == 3

    def test_failing_callback_does_not_break_session(self, service):
        good = MagicMock()
        service.on_change(MagicMock(side_effect=RuntimeError("boom")))
        service.on_change(good)
        service.next()
        assert service.cursor == 1
        good.assert_called_once()


class TestStepCallbacks:
    """Tests for the step sound hook."""

    def test_called_for_steps(self, service):
        callback = MagicMock()
        service.on_step(callback)
        service.next()
        service.prev()
        service.jump_random()
        service.handle_key("Arrow Right")
        assert callback.call_count == 4

    def test_not_called_for_other_changes(self, service):
        callback = MagicMock()
        service.on_step(callback)
        service.jump_to_start()
        service.reset()
        service.set_query("a")
        service.set_sort_mode("shuffle")
        service.handle_key("Arrow Right", text_input_focused=True)
        callback.assert_not_called()

    def test_not_called_on_empty_deck(self, service):
        callback = MagicMock()
        service.on_step(callback)
        service.set_query("zzz")
        service.next()
        service.jump_random()
        callback.assert_not_called()

    def test_failing_step_does_not_block_next(self, service):
        changed = MagicMock()
        service.on_step(MagicMock(side_effect=RuntimeError("no audio device")))
        service.on_change(changed)
        service.next()
        assert service.cursor == 1
        changed.assert_called_once()


class TestPhoneticHint:
    def test_hint(self, service):
        assert service.phonetic_hint("thank you") == "/θænk · iæʊ/"


class TestLoadFromFile:
    """Tests for the file factory."""

    def test_json(self, vocab_json, sample_records):
        service = VocabularyService.load_from_file(vocab_json(sample_records))
        assert service.total_count() == 3
        assert _sources(service.sequence) == ["clear", "lean", "learn"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(VocabularyLoadError):
            VocabularyService.load_from_file(str(tmp_path / "missing.json"))

    def test_shipped_vocabulary(self):
        """Test the bundled word list loads."""
        service = VocabularyService.load_from_file()
        assert service.total_count() > 0


class TestScenarios:
    """End-to-end browsing scenarios."""

    def test_alphabetical_first(self):
        service = VocabularyService([
            WordEntry(id=1, source_text="zebra", target_text="zebra"),
            WordEntry(id=2, source_text="apple", target_text="apel"),
        ])
        assert service.current_entry().source_text == "apple"

    def test_wrap_from_last(self, sample_entries):
        service = VocabularyService(sample_entries[:3])
        service.next()
        service.next()
        assert service.cursor == 2
        service.next()
        assert service.cursor == 0

    def test_full_cycle(self, service):
        for _ in range(service.match_count()):
            service.next()
        assert service.cursor == 0
