"""
core/scene.py — Scene interface

Every screen in the game is a Scene: the level-select menu and the
level being played.  The app holds a stack of them; only the top scene
gets update/draw calls.

To make a new scene, subclass and override what you need:

    class MyScene(Scene):
        def handle_event(self, event, app): ...
        def update(self, dt, app): ...
        def draw(self, surface, app): ...
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        """Advance one frame. dt is seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
