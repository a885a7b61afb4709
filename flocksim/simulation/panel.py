"""
Keyboard-driven tuning panel for live editing of flock parameters.
"""

from typing import Dict, List, Optional, Tuple

import pygame

from ..core.config import FlockParameters, PARAMETER_RANGES, PARAMETER_LABELS


# Fraction of a parameter's range moved per key press
COARSE_STEP = 0.01
FINE_STEP = 0.001


class TuningPanel:
    """
    Selects one parameter at a time and nudges it within its slider range.

    Selection and adjustment are display-free; draw() renders the panel
    onto a pygame surface.
    """

    def __init__(self, params: FlockParameters,
                 ranges: Optional[Dict[str, Tuple[float, float]]] = None):
        """
        Initialize the panel.

        Args:
            params: Parameters edited in place
            ranges: Field name to (low, high) bounds, display order
        """
        self.params = params
        self.ranges = ranges if ranges is not None else PARAMETER_RANGES
        self.names: List[str] = list(self.ranges)
        self.selected = 0

    @property
    def selected_name(self) -> str:
        return self.names[self.selected]

    def select_next(self) -> None:
        self.selected = (self.selected + 1) % len(self.names)

    def select_previous(self) -> None:
        self.selected = (self.selected - 1) % len(self.names)

    def step_size(self, name: str, fine: bool = False) -> float:
        low, high = self.ranges[name]
        return (high - low) * (FINE_STEP if fine else COARSE_STEP)

    def adjust(self, direction: int, fine: bool = False) -> float:
        """
        Move the selected parameter one step up (direction > 0) or down.

        Args:
            direction: Sign gives the direction of the change
            fine: Use the small step

        Returns:
            The new value. It is clamped into the parameter's range only on
            the side it moves toward, so a value set outside the range never
            jumps the wrong way.
        """
        name = self.selected_name
        low, high = self.ranges[name]
        step = self.step_size(name, fine)
        current = getattr(self.params, name)
        if direction > 0:
            value = current if current >= high else min(high, current + step)
        else:
            value = current if current <= low else max(low, current - step)
        setattr(self.params, name, value)
        return value

    def lines(self) -> List[Tuple[str, bool]]:
        """Label text for every parameter and whether it is selected."""
        result = []
        for i, name in enumerate(self.names):
            label = PARAMETER_LABELS.get(name, name)
            value = getattr(self.params, name)
            text = f"{label}: {value:.5g}"
            result.append((text, i == self.selected))
        return result

    def draw(self, surface, font, header: List[str], footer: List[str],
             color, highlight_color) -> None:
        """
        Draw the panel in the top-left corner.

        Args:
            surface: Pygame surface to draw on
            font: Pygame font used for every line
            header: Lines drawn above the parameter list
            footer: Lines drawn below the parameter list
            color: Text color
            highlight_color: Color of the selected parameter
        """
        rows = [(text, False) for text in header]
        rows += [("> " + text if selected else "  " + text, selected)
                 for text, selected in self.lines()]
        rows += [(text, False) for text in footer]

        line_height = font.get_linesize()
        width = max(font.size(text)[0] for text, _ in rows) + 20
        background = pygame.Surface((width, line_height * len(rows) + 20), pygame.SRCALPHA)
        background.fill((30, 30, 30, 180))
        surface.blit(background, (0, 0))

        y_offset = 10
        for text, selected in rows:
            rendered = font.render(text, True, highlight_color if selected else color)
            surface.blit(rendered, (10, y_offset))
            y_offset += line_height
