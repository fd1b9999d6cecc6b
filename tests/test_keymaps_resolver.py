from __future__ import annotations

from typing import List, Optional

from trooper.keymaps import (
    Action,
    ChordResolver,
    KeySequence,
    KeyStroke,
    ModeName,
    ResolutionResult,
    load_bindings,
)


def make_resolver(user_text: Optional[str] = None) -> ChordResolver:
    return ChordResolver(load_bindings(user_text=user_text))


def feed(resolver: ChordResolver, mode: ModeName, *keys: str) -> List[ResolutionResult]:
    return [resolver.feed(mode, KeyStroke(key)) for key in keys]


def ctrl(key: str) -> KeyStroke:
    return KeyStroke(key, ("ctrl",))


def test_single_key_fires_immediately() -> None:
    resolver = make_resolver()

    (result,) = feed(resolver, ModeName.NORMAL, "j")

    assert result.status == "fired"
    assert result.action is Action.MOVE_DOWN
    assert resolver.pending == ()


def test_two_key_chord_waits_then_fires() -> None:
    resolver = make_resolver()

    first, second = feed(resolver, ModeName.NORMAL, "g", "g")

    assert first.status == "pending"
    assert second.status == "fired"
    assert second.action is Action.MOVE_TO_TOP
    assert resolver.pending == ()


def test_exact_match_wins_over_longer_chord() -> None:
    resolver = make_resolver("[normal]\ng = Quit\n")

    (result,) = feed(resolver, ModeName.NORMAL, "g")

    assert result.status == "fired"
    assert result.action is Action.QUIT


def test_unmatched_key_resets_and_is_dropped() -> None:
    resolver = make_resolver()

    pending, broken = feed(resolver, ModeName.NORMAL, "g", "j")

    assert pending.status == "pending"
    assert broken.status == "reset"
    assert broken.action is None
    assert resolver.pending == ()

    (again,) = feed(resolver, ModeName.NORMAL, "j")
    assert again.action is Action.MOVE_DOWN


def test_unbound_key_resets() -> None:
    resolver = make_resolver()

    (result,) = feed(resolver, ModeName.NORMAL, "x")

    assert result.status == "reset"
    assert resolver.pending == ()


def test_control_chord_and_pending_display() -> None:
    resolver = make_resolver()

    first = resolver.feed(ModeName.NORMAL, ctrl("w"))
    assert first.status == "pending"
    assert resolver.pending_display == "^w"

    second = resolver.feed(ModeName.NORMAL, ctrl("l"))
    assert second.status == "fired"
    assert second.action is Action.MOVE_TO_RIGHT_PANEL


def test_control_modifier_distinguishes_keys() -> None:
    resolver = make_resolver()

    plain = resolver.feed(ModeName.NORMAL, KeyStroke("h"))
    control = resolver.feed(ModeName.NORMAL, ctrl("h"))

    assert plain.action is Action.MOVE_UP_DIR
    assert control.action is Action.MOVE_TO_LEFT_PANEL


def test_visual_mode_uses_its_own_table() -> None:
    resolver = make_resolver()

    (visual,) = feed(resolver, ModeName.VISUAL, "y")
    assert visual.action is Action.COPY_FILES

    (normal,) = feed(resolver, ModeName.NORMAL, "y")
    assert normal.status == "pending"


def test_reset_clears_pending_chord() -> None:
    resolver = make_resolver()
    feed(resolver, ModeName.NORMAL, "y")

    resolver.reset()

    assert resolver.pending == ()
    assert resolver.pending_display == ""


def test_pending_is_always_a_prefix_of_a_bound_chord() -> None:
    resolver = make_resolver()
    chords = list(resolver.bindings.normal)
    keys = "gyjdgGgdpxyqgzgg"

    for key in keys:
        resolver.feed(ModeName.NORMAL, KeyStroke(key))
        pending = resolver.pending
        if pending:
            assert any(
                chord.startswith(pending) and len(chord) > len(pending)
                for chord in chords
            )


def test_key_sequence_equality_is_order_sensitive() -> None:
    assert KeySequence.from_strings("g", "k") != KeySequence.from_strings("k", "g")
    assert KeySequence.from_strings("g", "g") == KeySequence.parse("gg")
