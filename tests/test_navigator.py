"""Tests for the cyclic deck navigator."""

import pytest

from worddeck.services.navigator import (
    DeckNavigator,
    NavigatorState,
    command_for_key,
)


class TestEmptyNavigator:
    """Tests for navigation over an empty sequence."""

    def test_initial_state(self):
        nav = DeckNavigator()
        assert nav.state is NavigatorState.EMPTY
        assert nav.cursor is None
        assert nav.current_entry is None

    @pytest.mark.parametrize("command", ["next", "prev", "jump_random", "jump_to_start", "reset"])
    def test_commands_are_total(self, command):
        """Test every command is a no-op without raising."""
        nav = DeckNavigator()
        assert nav.apply(command)
        assert nav.cursor is None
        assert nav.is_empty


class TestNavigation:
    """Tests for cursor movement."""

    def test_starts_at_zero(self, sample_entries):
        nav = DeckNavigator(sample_entries)
        assert nav.state is NavigatorState.POSITIONED
        assert nav.cursor == 0
        assert nav.current_entry == sample_entries[0]

    def test_next_wraps(self, sample_entries):
        nav = DeckNavigator(sample_entries[:3])
        nav.next()
        nav.next()
        assert nav.cursor == 2
        nav.next()
        assert nav.cursor == 0

    def test_prev_wraps(self, sample_entries):
        nav = DeckNavigator(sample_entries[:3])
        nav.prev()
        assert nav.cursor == 2
        nav.prev()
        assert nav.cursor == 1

    def test_single_entry(self, sample_entries):
        nav = DeckNavigator(sample_entries[:1])
        nav.next()
        assert nav.cursor == 0
        nav.prev()
        assert nav.cursor == 0

    def test_jump_random(self, sample_entries, fixed_random):
        nav = DeckNavigator(sample_entries[:3], rng=fixed_random(0.99))
        nav.jump_random()
        assert nav.cursor == 2

    def test_jump_random_may_repeat(self, sample_entries, fixed_random):
        nav = DeckNavigator(sample_entries[:3], rng=fixed_random(0.0))
        nav.jump_random()
        assert nav.cursor == 0

    def test_jump_to_start(self, sample_entries):
        nav = DeckNavigator(sample_entries)
        nav.next()
        nav.next()
        nav.jump_to_start()
        assert nav.cursor == 0

    def test_replace_sequence_resets(self, sample_entries):
        nav = DeckNavigator(sample_entries)
        nav.next()
        nav.replace_sequence(sample_entries[2:])
        assert nav.cursor == 0
        assert nav.current_entry == sample_entries[2]

    def test_replace_with_empty(self, sample_entries):
        nav = DeckNavigator(sample_entries)
        nav.replace_sequence([])
        assert nav.state is NavigatorState.EMPTY
        assert nav.cursor is None

    def test_unknown_command(self, sample_entries):
        nav = DeckNavigator(sample_entries)
        assert not nav.apply("sideways")
        assert nav.cursor == 0


class TestKeyCommands:
    """Tests for keyboard mapping."""

    def test_arrows(self):
        assert command_for_key("Arrow Left") == "prev"
        assert command_for_key("Arrow Right") == "next"

    def test_unmapped_key(self):
        assert command_for_key("Enter") is None

    def test_ignored_while_typing(self):
        assert command_for_key("Arrow Right", text_input_focused=True) is None
