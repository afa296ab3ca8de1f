from __future__ import annotations

import random
from typing import Optional

import pytest

from aetherbox_ui.category_selection import Category, new_open_flags, toggle
from aetherbox_ui.window_controller import WindowState


def _assert_exclusive(state: WindowState) -> None:
    open_categories = [category for category, flag in state.category_open_flags.items() if flag]
    if state.active_category is None:
        assert open_categories == []
    else:
        assert open_categories == [state.active_category]


def test_new_open_flags_cover_every_category() -> None:
    assert new_open_flags() == {category: False for category in Category}


def test_first_click_selects_category() -> None:
    state = WindowState()

    result = toggle(state, Category.INFO)

    assert result is Category.INFO
    assert state.active_category is Category.INFO
    assert state.category_open_flags[Category.INFO] is True
    _assert_exclusive(state)


def test_clicking_active_category_toggles_it_off() -> None:
    state = WindowState()
    toggle(state, Category.SETTINGS)

    result = toggle(state, Category.SETTINGS)

    assert result is None
    assert state.active_category is None
    assert not any(state.category_open_flags.values())


def test_switching_category_clears_previous_flag() -> None:
    state = WindowState()
    toggle(state, Category.INFO)

    toggle(state, Category.SETTINGS)

    assert state.active_category is Category.SETTINGS
    assert state.category_open_flags[Category.INFO] is False
    assert state.category_open_flags[Category.SETTINGS] is True


def test_unknown_category_fails_fast() -> None:
    state = WindowState()

    with pytest.raises(ValueError):
        toggle(state, "Info")  # type: ignore[arg-type]

    assert state.active_category is None


@pytest.mark.parametrize("seed", range(8))
def test_random_click_sequences_keep_selection_exclusive(seed: int) -> None:
    rng = random.Random(seed)
    categories = list(Category)
    state = WindowState()
    expected: Optional[Category] = None

    for _ in range(40):
        clicked = rng.choice(categories)
        expected = None if expected is clicked else clicked
        toggle(state, clicked)
        assert state.active_category is expected
        _assert_exclusive(state)
