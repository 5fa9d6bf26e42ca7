"""Easing Gallery — side-by-side view of the easing catalog.

Exercises Tween, ColorTween, Sequence and TweenManager from tick-tween.

Controls:
  Space   Relaunch every lane together
  S       Relaunch as a sequence (lanes play one after another)
  L       Cycle loop mode (none / restart / ping_pong / yoyo)
  P       Pause / resume
  R       Reverse every lane in flight
  T       Toggle slow motion (time scale 0.25)
  +/-     Adjust tween duration
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_tween import (
    EASINGS,
    ColorTween,
    FloatTween,
    LoopType,
    Sequence,
    StopBehavior,
    TweenConfig,
    TweenManager,
    TweenState,
)

from ui.constants import (
    BG_COLOR,
    CURVE_BG,
    CURVE_W,
    FAMILIES,
    FPS,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    ORB_FROM,
    ORB_RADIUS,
    ORB_TO,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    TRACK_PAD,
    TRACK_RAIL,
    TRACK_W,
)

LOOP_MODES = [LoopType.NONE, LoopType.RESTART, LoopType.PING_PONG, LoopType.YOYO]


class Lane:
    """One easing, one orb: a position tween plus a color tween."""

    def __init__(self, easing: str) -> None:
        self.easing = easing
        self.position = FloatTween()
        self.color = ColorTween()
        self.value = 0.0
        self.rgb = ORB_FROM
        self.position.on_update(self._set_value)
        self.color.on_update(self._set_rgb)

    def _set_value(self, value: float) -> None:
        self.value = value

    def _set_rgb(self, rgb: tuple[int, ...]) -> None:
        self.rgb = rgb

    def launch(self, duration: float, config: TweenConfig) -> None:
        self.position.configure(config).start(0.0, 1.0, duration, self.easing)
        self.color.configure(config).start(ORB_FROM, ORB_TO, duration, self.easing)
        self.value = self.position.current_value
        self.rgb = self.color.current_value


class GameState:
    """Holds lanes, the tween manager and the UI toggles."""

    def __init__(self) -> None:
        self.manager = TweenManager()
        self.lanes = [Lane(name) for name in FAMILIES]
        self.duration = 2.0
        self.loop_index = 0
        self.paused = False
        self.slow_motion = False
        self.completed = 0

    @property
    def loop_type(self) -> LoopType:
        return LOOP_MODES[self.loop_index]

    def _config(self) -> TweenConfig:
        loop_count = 0 if self.loop_type is LoopType.NONE else -1
        return TweenConfig(
            loop_type=self.loop_type,
            loop_count=loop_count,
            time_scale=0.25 if self.slow_motion else 1.0,
        )

    def _reset(self) -> None:
        self.manager.stop_all(StopBehavior.AS_IS)
        self.paused = False

    def launch_all(self) -> None:
        self._reset()
        config = self._config()
        for lane in self.lanes:
            lane.launch(self.duration, config)
            self.manager.add(lane.position)
            self.manager.add(lane.color)

    def launch_sequence(self) -> None:
        """Chain every lane; colors ride along in their own sequence."""
        self._reset()
        config = TweenConfig()
        positions = Sequence()
        colors = Sequence()
        # Members take the sequence scale on append.
        positions.time_scale = colors.time_scale = 0.25 if self.slow_motion else 1.0
        for lane in self.lanes:
            lane.launch(self.duration / 2, config)
            positions.append(lane.position)
            colors.append(lane.color)
        positions.on_complete(self._on_sequence_complete)
        self.manager.add(positions.start())
        self.manager.add(colors.start())

    def _on_sequence_complete(self) -> None:
        self.completed += 1

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        if self.paused:
            self.manager.pause_all()
        else:
            self.manager.resume_all()

    def toggle_slow_motion(self) -> None:
        self.slow_motion = not self.slow_motion
        self.manager.time_scale = 0.25 if self.slow_motion else 1.0

    def reverse_all(self) -> None:
        for lane in self.lanes:
            if lane.position.state is not TweenState.STOPPED:
                lane.position.reverse()
                lane.color.reverse()


def draw_curve(surface: pygame.Surface, easing: str, x: int, y: int, t: float) -> None:
    """Plot the easing curve in a small box with a dot at progress t."""
    pygame.draw.rect(surface, CURVE_BG, (x, y + 4, CURVE_W - 8, LANE_H - 8))
    fn = EASINGS[easing]
    w, h = CURVE_W - 8, LANE_H - 16
    points = []
    for i in range(w):
        p = i / (w - 1)
        points.append((x + i, y + 8 + h - fn(p) * h))
    pygame.draw.lines(surface, TEXT_DIM, False, points)
    if 0.0 <= t <= 1.0:
        dot = (int(x + t * (w - 1)), int(y + 8 + h - fn(t) * h))
        pygame.draw.circle(surface, TEXT_COLOR, dot, 3)


def draw(surface: pygame.Surface, state: GameState, font: pygame.font.Font) -> None:
    surface.fill(BG_COLOR)
    track_x = LABEL_W + CURVE_W
    span = TRACK_W - 2 * TRACK_PAD

    for i, lane in enumerate(state.lanes):
        y = i * LANE_H
        pygame.draw.rect(surface, LANE_BG, (0, y, SCREEN_W, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, y + LANE_H - 1), (SCREEN_W, y + LANE_H - 1))
        surface.blit(font.render(lane.easing, True, TEXT_COLOR), (8, y + LANE_H // 2 - 7))

        draw_curve(surface, lane.easing, LABEL_W, y, lane.position.progress)

        rail_y = y + LANE_H // 2
        pygame.draw.line(
            surface, TRACK_RAIL,
            (track_x + TRACK_PAD, rail_y), (track_x + TRACK_W - TRACK_PAD, rail_y),
        )
        orb_x = int(track_x + TRACK_PAD + lane.value * span)
        pygame.draw.circle(surface, lane.rgb[:3], (orb_x, rail_y), ORB_RADIUS)

    status_y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, status_y, SCREEN_W, STATUS_H))
    status = (
        f"loop={state.loop_type.value}  duration={state.duration:.1f}s  "
        f"scale={'0.25' if state.slow_motion else '1.0'}  "
        f"active={len(state.manager)}  sequences done={state.completed}"
        f"{'  [PAUSED]' if state.paused else ''}"
    )
    surface.blit(font.render(status, True, TEXT_COLOR), (8, status_y + 10))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery — tick-tween demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GameState()
    state.launch_all()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.launch_all()
                elif event.key == pygame.K_s:
                    state.launch_sequence()
                elif event.key == pygame.K_l:
                    state.loop_index = (state.loop_index + 1) % len(LOOP_MODES)
                    state.launch_all()
                elif event.key == pygame.K_p:
                    state.toggle_pause()
                elif event.key == pygame.K_r:
                    state.reverse_all()
                elif event.key == pygame.K_t:
                    state.toggle_slow_motion()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.duration = min(state.duration + 0.5, 6.0)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.duration = max(state.duration - 0.5, 0.5)

        state.manager.update(dt)
        draw(screen, state, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
