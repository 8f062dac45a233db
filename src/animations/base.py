"""
Base Pattern Class

All burn-in patterns inherit from BasePattern and implement draw().
"""

from typing import ClassVar

from engine.surface_interface import IDrawingSurface
from models.color import Color
from models.enums import BurnInPatternID
from models.pattern_params import BurnInParams


class BasePattern:
    """
    Base class for burn-in mitigation patterns

    Patterns are stateless renderers: everything that changes between frames
    (offset, hue) lives in PhaseState, owned by AnimatedPatternEngine.
    One draw() call renders one complete frame onto an already cleared
    surface.

    IMPORTANT:
    - draw() must not keep state between calls
    - a zero-size surface, or geometry that turns non-finite, is a no-op

    Subclasses MUST set PATTERN_ID and implement draw().
    """

    PATTERN_ID: ClassVar[BurnInPatternID]

    # ------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------

    def draw(self, surface: IDrawingSurface, offset: float, color: Color, params: BurnInParams) -> None:
        """
        Render a single frame.

        Args:
            surface: target surface (size is read once per call)
            offset: accumulated animation phase
            color: base color (cycled hue or fixed white)
            params: validated burn-in parameter snapshot
        """
        raise NotImplementedError

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.PATTERN_ID.value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
