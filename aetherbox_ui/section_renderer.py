"""Failure-isolated rendering of window sections.

Every section (header, navigation panel, close control, category body) is drawn
through ``render_section``. A section that raises is rolled back out of the
frame and reported as a failed ``SectionResult``; the orchestrator logs it and
moves on to the next sibling.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional

from aetherbox_ui.category_selection import Category
from aetherbox_ui.frame import FrameBuilder

ContentProvider = Callable[[FrameBuilder], None]


@dataclass(frozen=True)
class SectionResult:
    name: str
    ok: bool
    error: Optional[BaseException] = None


def render_section(name: str, draw_fn: ContentProvider, frame: FrameBuilder) -> SectionResult:
    checkpoint = frame.checkpoint()
    try:
        draw_fn(frame)
    except Exception as exc:
        frame.rollback(checkpoint)
        return SectionResult(name=name, ok=False, error=exc)
    return SectionResult(name=name, ok=True)


def render(
    active_category: Optional[Category],
    providers: Mapping[Category, ContentProvider],
    frame: FrameBuilder,
) -> Optional[SectionResult]:
    """Draw the body for ``active_category``; returns None when nothing is selected."""
    if active_category is None:
        return None
    name = f"{active_category.label} section"
    provider = providers.get(active_category)
    if provider is None:
        return SectionResult(
            name=name,
            ok=False,
            error=LookupError(f"No content provider registered for {active_category.label}"),
        )
    return render_section(name, provider, frame)


def report_failures(results: Iterable[Optional[SectionResult]], logger: logging.Logger) -> List[SectionResult]:
    failures = [result for result in results if result is not None and not result.ok]
    for failure in failures:
        logger.warning("Something wrong with %s: %s", failure.name, failure.error, exc_info=failure.error)
    return failures
