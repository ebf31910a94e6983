# scenes/shape_match.py
"""
Shape-matching scene.

Top to bottom:
    • progress line     "Match #3 of 10 - Correct: 2"
    • outline image     (drag source, smaller)
    • filled image      (drop target, larger)
    • shape name        (revealed after a correct drop)
    • Play Again / Exit (end screen only)

The scene owns no game state of its own: after every transition it re-reads
MatchSession.current() and rebuilds what it shows.
"""

from __future__ import annotations
import logging
from typing import Dict, Tuple

import pygame

from config     import (WIDTH, HEIGHT, FONT_NAME, NAME_FONT, OUTLINE_SIZE, TARGET_SIZE,
                        BACKGROUND_FILE, CONFETTI_SECONDS, CUE_FALLBACK_SECONDS)
from constants  import (BG_COLOR, TEXT_COLOR, NAME_COLOR, EXIT_BG_COLOR,
                        PLAY_AGAIN_BG_COLOR, TARGET_HIGHLIGHT_COLOR,
                        COUNTER_FONT_SIZE, NAME_FONT_SIZE, COUNTER_TOP,
                        SHAPE_GAP, BUTTON_SIZE, BUTTON_GAP)
from core.asset_manager import AssetManager
from core.feedback      import CueFeedback
from core.match_session import MatchSession, PlayingView
from core.shape_assets  import ShapeBundle
from ui.widgets         import Button, DraggableShape

logger = logging.getLogger(__name__)

# posted by the mixer channel when a cue finishes playing
CUE_END_EVENT = pygame.USEREVENT + 1

OUTLINE_TOP = COUNTER_TOP + COUNTER_FONT_SIZE + SHAPE_GAP
TARGET_TOP  = OUTLINE_TOP + OUTLINE_SIZE[1] + SHAPE_GAP
NAME_TOP    = TARGET_TOP + TARGET_SIZE[1] + SHAPE_GAP


def fit_surface(surf: pygame.Surface, box: Tuple[int, int]) -> pygame.Surface:
    """Scale *surf* to fit inside *box*, keeping its aspect ratio."""
    w, h = surf.get_size()
    if w == 0 or h == 0:
        return pygame.Surface(box, pygame.SRCALPHA)
    scale = min(box[0] / w, box[1] / h)
    size  = (max(1, int(w * scale)), max(1, int(h * scale)))
    return pygame.transform.smoothscale(surf, size)


# ─────────────────────────── scene class ──────────────────────────
class ShapeMatchScene:
    def __init__(self, screen: pygame.Surface, session: MatchSession,
                 assets: AssetManager, feedback: CueFeedback | None = None):
        self.screen   = screen
        self.session  = session
        self.assets   = assets
        self.feedback = feedback or CueFeedback(CONFETTI_SECONDS, CUE_FALLBACK_SECONDS)

        # fonts
        pygame.font.init()
        self.counter_f = pygame.font.Font(FONT_NAME, COUNTER_FONT_SIZE)
        self.name_f    = pygame.font.SysFont(NAME_FONT, NAME_FONT_SIZE)

        # scaled copies, one pair per shape name
        self._scaled: Dict[str, Tuple[pygame.Surface, pygame.Surface]] = {}

        self.outline:     DraggableShape | None = None
        self.target_surf: pygame.Surface | None = None
        self.target_rect  = pygame.Rect((0, 0), TARGET_SIZE)
        self.target_rect.midtop = (WIDTH//2, TARGET_TOP)
        self.name_text    = ""
        self.channel: pygame.mixer.Channel | None = None

        self.play_again_btn: Button | None = None
        self.exit_btn:       Button | None = None

        self._show_current()

    # ───────── helpers ─────────
    def _surfaces_for(self, bundle: ShapeBundle) -> Tuple[pygame.Surface, pygame.Surface]:
        if bundle.name not in self._scaled:
            self._scaled[bundle.name] = (
                fit_surface(bundle.outline_image, OUTLINE_SIZE),
                fit_surface(bundle.filled_image,  TARGET_SIZE),
            )
        return self._scaled[bundle.name]

    def _show_current(self):
        """Rebuild the screen from the session's current view."""
        view = self.session.current()
        self.name_text = ""

        if isinstance(view, PlayingView):
            outline, filled = self._surfaces_for(view.bundle)
            home = (WIDTH//2 - outline.get_width()//2, OUTLINE_TOP)
            self.outline     = DraggableShape(view.bundle.name, outline, home)
            self.target_surf = filled
            self.target_rect = filled.get_rect(midtop=(WIDTH//2, TARGET_TOP))
            self.play_again_btn = self.exit_btn = None
            return

        # finished
        self.outline = None
        self.target_surf = None
        w, h = BUTTON_SIZE
        x = WIDTH//2 - w//2
        y = HEIGHT//2 - h - BUTTON_GAP//2
        self.play_again_btn = Button(pygame.Rect(x, y, w, h), "Play Again", bg=PLAY_AGAIN_BG_COLOR)
        self.exit_btn       = Button(pygame.Rect(x, y + h + BUTTON_GAP, w, h), "Exit", bg=EXIT_BG_COLOR)

    def _counter_text(self) -> str:
        if self.feedback.active:
            # still showing the shape that was just matched
            s = self.session
            return f"Match #{s.current_index} of {s.total} - Correct: {s.correct_count}"
        return self.session.progress_text()

    def _play_cue(self, bundle: ShapeBundle) -> float | None:
        """Start the cue; return its length in seconds if known."""
        sound = bundle.audio
        try:
            sound.stop()
            self.channel = sound.play()
        except pygame.error as exc:
            logger.warning("Could not play cue for %r: %s", bundle.name, exc)
            self.channel = None
            return None
        if self.channel is not None:
            self.channel.set_endevent(CUE_END_EVENT)
        else:
            logger.warning("No free channel for cue %r", bundle.name)
        return sound.get_length()

    def _on_correct_match(self, bundle: ShapeBundle):
        self.name_text = bundle.name
        if self.outline:
            self.outline.stop_drag()
            self.outline.rect.center = self.target_rect.center
        self.feedback.start(bundle, self._play_cue(bundle))

    def _drop(self, pos):
        outline = self.outline
        if outline is None:
            return
        if self.target_rect.collidepoint(pos):
            bundle = self.session.shapes[self.session.current_index]
            if self.session.submit_match(outline.name):
                self._on_correct_match(bundle)
                return
        outline.return_home()

    def _reset(self):
        self.feedback.cancel()
        if self.channel is not None:
            self.channel.set_endevent()
            self.channel.stop()
            self.channel = None
        self.session.reset()
        self._show_current()

    # ───────── event loop ─────────
    def handle_event(self, ev: pygame.event.Event):
        if ev.type == CUE_END_EVENT:
            self.feedback.cue_finished()
            return
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
            return "quit"

        if self.session.is_complete and not self.feedback.active:
            if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                if self.play_again_btn and self.play_again_btn.hovered(ev.pos): self._reset(); return
                if self.exit_btn       and self.exit_btn.hovered(ev.pos):       return "quit"
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_r:
                self._reset()
            return

        # one advance in flight per shape: ignore input until it lands
        if self.feedback.active or self.outline is None:
            return

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self.outline.rect.collidepoint(ev.pos):
                self.outline.start_drag(ev.pos)
        elif ev.type == pygame.MOUSEMOTION and self.outline.dragging:
            self.outline.drag(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1 and self.outline.dragging:
            self._drop(ev.pos)

    # ───────── update ─────────
    def update(self, dt: float):
        if self.feedback.update(dt):
            self.channel = None
            self._show_current()

    # ───────── draw ─────────
    def draw(self):
        self.screen.fill(BG_COLOR)
        self.screen.blit(self.assets.get_image(BACKGROUND_FILE, (WIDTH, HEIGHT)), (0, 0))

        counter = self.counter_f.render(self._counter_text(), True, TEXT_COLOR)
        self.screen.blit(counter, counter.get_rect(midtop=(WIDTH//2, COUNTER_TOP)))

        if self.target_surf is not None:
            self.screen.blit(self.target_surf, self.target_rect)
            if self.outline and self.outline.dragging and \
                    self.target_rect.collidepoint(pygame.mouse.get_pos()):
                pygame.draw.rect(self.screen, TARGET_HIGHLIGHT_COLOR,
                                 self.target_rect.inflate(8, 8), width=3, border_radius=6)
        if self.outline is not None:
            self.outline.draw(self.screen)

        if self.name_text:
            lbl = self.name_f.render(self.name_text, True, NAME_COLOR)
            self.screen.blit(lbl, lbl.get_rect(midtop=(WIDTH//2, NAME_TOP)))

        if self.play_again_btn: self.play_again_btn.draw(self.screen)
        if self.exit_btn:       self.exit_btn.draw(self.screen)
