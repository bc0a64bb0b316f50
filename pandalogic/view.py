"""Zoom state of the circuit canvas."""

from __future__ import annotations

from typing import Callable

Listener = Callable[[], None]

MAX_ZOOM_LEVEL = 3
MIN_ZOOM_LEVEL = -9
ZOOM_IN_FACTOR = 1.25
ZOOM_OUT_FACTOR = 0.8


class GraphicsView:
    """Tracks zoom level and scale of a canvas and notifies listeners of changes.

    When ``redirect_zoom`` is set, wheel events ask the owner to rescale
    (through ``scale_in_listeners``/``scale_out_listeners``) instead of zooming.
    """

    def __init__(self) -> None:
        self.zoom_level = 0
        self.scale = 1.0
        self.redirect_zoom = False
        self.fast_mode = False
        self.zoom_changed_listeners: list[Listener] = []
        self.scale_in_listeners: list[Listener] = []
        self.scale_out_listeners: list[Listener] = []

    @staticmethod
    def _notify(listeners: list[Listener]) -> None:
        for listener in listeners:
            listener()

    def can_zoom_in(self) -> bool:
        """Whether the view is below its maximum zoom level."""
        return self.zoom_level < MAX_ZOOM_LEVEL

    def can_zoom_out(self) -> bool:
        """Whether the view is above its minimum zoom level."""
        return self.zoom_level > MIN_ZOOM_LEVEL

    def zoom_in(self) -> None:
        """Magnify by one step."""
        self.scale *= ZOOM_IN_FACTOR
        self.zoom_level += 1
        self._notify(self.zoom_changed_listeners)

    def zoom_out(self) -> None:
        """Shrink by one step."""
        self.scale *= ZOOM_OUT_FACTOR
        self.zoom_level -= 1
        self._notify(self.zoom_changed_listeners)

    def reset_zoom(self) -> None:
        """Return to the unscaled view."""
        self.scale = 1.0
        self.zoom_level = 0
        self._notify(self.zoom_changed_listeners)

    def wheel(self, delta: int) -> None:
        """Handle a vertical wheel movement: positive zooms in, negative zooms out."""
        if delta > 0 and self.can_zoom_in():
            if self.redirect_zoom:
                self._notify(self.scale_in_listeners)
            else:
                self.zoom_in()
        elif delta < 0 and self.can_zoom_out():
            if self.redirect_zoom:
                self._notify(self.scale_out_listeners)
            else:
                self.zoom_out()