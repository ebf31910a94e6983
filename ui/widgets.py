"""
Reusable UI widgets (buttons & the draggable outline).
"""
from __future__ import annotations
import pygame
from typing import Tuple
from config    import FONT_NAME
from constants import BUTTON_FG_COLOR, BUTTON_FONT_SIZE, PLAY_AGAIN_BG_COLOR

# --------------------------------------------------------------------
class Button:
    def __init__(self, rect: pygame.Rect, text: str,
                 bg=PLAY_AGAIN_BG_COLOR, fg=BUTTON_FG_COLOR):
        self.rect = rect
        self.text = text
        self.bg   = bg
        self.fg   = fg

        font = pygame.font.Font(FONT_NAME, BUTTON_FONT_SIZE)
        font.set_bold(True)
        self.surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(self.surface, bg, self.surface.get_rect(), border_radius=8)
        lbl = font.render(text, True, fg)
        self.surface.blit(lbl, lbl.get_rect(center=self.surface.get_rect().center))

    def draw(self, screen):  screen.blit(self.surface, self.rect.topleft)
    def hovered(self, pos):  return self.rect.collidepoint(pos)

# --------------------------------------------------------------------
class DraggableShape:
    """
    The outline image the child picks up.  It remembers where it lives so a
    drop anywhere but the target sends it back home.
    """
    def __init__(self, name: str, surface: pygame.Surface, home: Tuple[int, int]):
        self.name    = name
        self.surface = surface
        self.rect    = surface.get_rect(topleft=home)
        self.home    = home

        self.dragging = False
        self._offset  = (0, 0)

    # -------------------------------------------------------------- #
    def start_drag(self, mouse_pos):
        mx,my = mouse_pos
        ox,oy = self.rect.topleft
        self._offset = (mx-ox, my-oy)
        self.dragging = True

    def drag(self, mouse_pos):
        mx,my = mouse_pos
        ox,oy = self._offset
        self.rect.topleft = (mx-ox, my-oy)

    def stop_drag(self):
        self.dragging = False

    def return_home(self):
        self.dragging = False
        self.rect.topleft = self.home

    def draw(self, screen):
        screen.blit(self.surface, self.rect.topleft)
