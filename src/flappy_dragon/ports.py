"""
ports.py: The rendering/input contract the game session draws and reads through.
"""

from typing import Optional, Protocol, Tuple

from .data_models import KeySymbol

Color = Tuple[int, int, int]


class RenderPort(Protocol):
    """Host interface so a real window and a test double share the same session."""

    def clear_screen(self) -> None: ...

    def clear_screen_with_background(self, color: Color) -> None: ...

    def draw_glyph(self, x: int, y: int, foreground: Color, background: Color, glyph: str) -> None: ...

    def draw_text(self, x: int, y: int, text: str) -> None: ...

    def draw_text_centered(self, y: int, text: str) -> None: ...

    def elapsed_ms_since_last_tick(self) -> float:
        """Milliseconds since the previous frame."""

    def poll_key(self) -> Optional[KeySymbol]:
        """The key pressed this frame, if any."""

    def request_quit(self) -> None: ...
