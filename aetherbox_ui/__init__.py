from .category_selection import Category
from .frame import FrameBuilder, FrameInput
from .section_renderer import SectionResult
from .window_controller import WindowController, WindowState

__all__ = [
    "Category",
    "FrameBuilder",
    "FrameInput",
    "SectionResult",
    "WindowController",
    "WindowState",
]
