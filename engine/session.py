"""
Game Session - Orchestrates one game of Galaxy Adventure.

The GameSession owns the game state aggregate and every timer, and
composes the engine components on each tick:

    spawn tick:  spawner
    motion tick: motion -> collisions -> score / turbo / game over

It emits Qt Signals after every mutation so GUI layers can react
without polling. None of its public operations raise.
"""

import logging
import random
from typing import Optional

from PySide6.QtCore import QObject, Signal

from config import GAME_SETTINGS, GameSettings
from engine.collision import Collision, CollisionDetector
from engine.motion import MotionSystem
from engine.randomness import RandomDraw
from engine.scheduler import QtScheduler
from engine.scoring import ScoreTracker
from engine.spaceship import Direction, SpaceshipController
from engine.spawner import ObstacleSpawner
from engine.turbo import TurboBoostController
from models.game_state import GamePhase, GameState
from models.schemas import ObstacleView, SessionSnapshot

logger = logging.getLogger(__name__)


class GameSession(QObject):
    """
    Single active game: LOADING -> PLAYING -> GAME_OVER, plus restart().

    Usage:
        session = GameSession()
        session.state_updated.connect(on_snapshot)
        session.start()        # PLAYING after the loading delay

        session.move_left()
        session.restart()

    Args:
        scheduler: Timer source (default: a QtScheduler owned by the session)
        rng: Random source for spawning; seed it for reproducible games
        settings: Simulation settings (default: GAME_SETTINGS)
    """

    # Signals
    state_updated = Signal(object)          # SessionSnapshot
    phase_changed = Signal(str)             # new phase value
    score_updated = Signal(int)             # new score
    turbo_changed = Signal(bool)            # turbo flag
    collision_occurred = Signal(dict)       # {type, x, y, spaceship_x}
    game_over = Signal(int)                 # final score

    def __init__(self, scheduler=None, rng: Optional[random.Random] = None,
                 settings: Optional[GameSettings] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._settings = settings or GAME_SETTINGS
        self._scheduler = scheduler if scheduler is not None else QtScheduler(self)

        # Components
        self._spawner = ObstacleSpawner(
            RandomDraw(rng, self._settings.spawn), self._settings.spawn
        )
        self._motion = MotionSystem(self._settings.collision)
        self._collisions = CollisionDetector(self._settings.collision)
        self._scorer = ScoreTracker()
        self._turbo = TurboBoostController(
            self._scheduler,
            on_change=self._on_turbo_changed,
            difficulty=self._settings.difficulty,
            timers=self._settings.timers,
        )
        self._spaceship = SpaceshipController(self._settings.spaceship)

        self._state = GameState.initial(self._settings)

        # Timer handles
        self._loading_timer = None
        self._spawn_timer = None
        self._motion_timer = None

    # ============ Read model ============

    @property
    def state(self) -> GameState:
        """The live aggregate. Mutate only through session operations."""
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def spaceship_x(self) -> float:
        return self._state.spaceship.x

    @property
    def obstacles(self) -> tuple[ObstacleView, ...]:
        return SessionSnapshot.from_state(self._state).obstacles

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def speed(self) -> float:
        return self._state.speed

    @property
    def turbo_active(self) -> bool:
        return self._state.turbo_active

    @property
    def turbo(self) -> TurboBoostController:
        return self._turbo

    @property
    def is_spawning(self) -> bool:
        """True while the spawn and motion timers are running."""
        return self._spawn_timer is not None and self._spawn_timer.isActive()

    def snapshot(self) -> SessionSnapshot:
        """Immutable snapshot of the current state."""
        return SessionSnapshot.from_state(self._state)

    # ============ Lifecycle ============

    def start(self) -> None:
        """Enter LOADING and schedule the switch to PLAYING."""
        self._cancel_all()
        self._state = GameState.initial(self._settings, phase=GamePhase.LOADING)
        self._loading_timer = self._scheduler.call_later(
            self._settings.timers.loading_delay_ms, self._on_loading_elapsed
        )
        logger.info("Loading (%d ms)", self._settings.timers.loading_delay_ms)
        self.phase_changed.emit(GamePhase.LOADING.value)
        self._emit_update()

    def begin_play(self) -> None:
        """Leave LOADING now. No-op in any other phase."""
        if self._state.phase != GamePhase.LOADING:
            return
        self._scheduler.cancel(self._loading_timer)
        self._loading_timer = None
        self._enter_playing()

    def restart(self) -> None:
        """Reset everything to initial values and play again, from any phase."""
        self._cancel_all()
        self._state = GameState.initial(self._settings, phase=GamePhase.PLAYING)
        logger.info("Restarted")
        self._start_timers()
        self.phase_changed.emit(GamePhase.PLAYING.value)
        self.score_updated.emit(self._state.score)
        self.turbo_changed.emit(False)
        self._emit_update()

    def shutdown(self) -> None:
        """Cancel every timer. Safe to call more than once."""
        self._cancel_all()
        logger.debug("Session shut down")

    # ============ Commands ============

    def move_left(self) -> None:
        self.move(Direction.LEFT)

    def move_right(self) -> None:
        self.move(Direction.RIGHT)

    def move(self, direction: Direction) -> None:
        """Move the ship one step, then re-check collisions while playing."""
        self._spaceship.move(self._state, direction)
        if self._state.is_playing:
            self.evaluate_collisions()
        self._emit_update()

    # ============ Ticks ============

    def spawn_tick(self) -> None:
        """Add one obstacle. No-op unless PLAYING."""
        if not self._state.is_playing:
            return
        self._spawner.spawn(self._state)
        self._emit_update()

    def motion_tick(self) -> None:
        """Advance motion and apply collision effects. No-op unless PLAYING."""
        if not self._state.is_playing:
            return
        self._motion.advance(self._state)
        self.evaluate_collisions()
        self._emit_update()

    def evaluate_collisions(self) -> list[Collision]:
        """
        Apply the effect of every obstacle touching the ship.

        Stars score and boost, asteroids end the game, aliens do nothing.
        All hits in one evaluation are applied before the game ends.
        """
        if not self._state.is_playing:
            return []

        collisions = self._collisions.detect(self._state)
        fatal = False
        for collision in collisions:
            if collision.is_fatal:
                fatal = True
            elif collision.is_scoring:
                score = self._scorer.award(
                    self._state, self._settings.collision.star_points
                )
                self.score_updated.emit(score)
                self._turbo.activate(self._state)

            self.collision_occurred.emit({
                "type": collision.type.value,
                "x": collision.obstacle.x,
                "y": collision.obstacle.y,
                "spaceship_x": collision.spaceship_x,
            })

        if fatal:
            self._end_game()
        return collisions

    # ============ Internals ============

    def _on_loading_elapsed(self) -> None:
        self._loading_timer = None
        self.begin_play()

    def _enter_playing(self) -> None:
        self._state.phase = GamePhase.PLAYING
        self._start_timers()
        logger.info("Playing")
        self.phase_changed.emit(GamePhase.PLAYING.value)
        self._emit_update()

    def _end_game(self) -> None:
        self._state.phase = GamePhase.GAME_OVER
        self._stop_timers()
        logger.info("Game over, final score %d", self._state.score)
        self.phase_changed.emit(GamePhase.GAME_OVER.value)
        self.game_over.emit(self._state.score)

    def _start_timers(self) -> None:
        timers = self._settings.timers
        self._spawn_timer = self._scheduler.call_every(
            timers.spawn_interval_ms, self.spawn_tick
        )
        self._motion_timer = self._scheduler.call_every(
            timers.motion_interval_ms, self.motion_tick
        )

    def _stop_timers(self) -> None:
        """Cancel the spawn and motion timers."""
        self._scheduler.cancel(self._spawn_timer)
        self._scheduler.cancel(self._motion_timer)
        self._spawn_timer = None
        self._motion_timer = None

    def _cancel_all(self) -> None:
        self._stop_timers()
        self._scheduler.cancel(self._loading_timer)
        self._loading_timer = None
        self._turbo.cancel_pending()

    def _on_turbo_changed(self, active: bool) -> None:
        self.turbo_changed.emit(active)
        if not active:
            self._emit_update()

    def _emit_update(self) -> None:
        self.state_updated.emit(self.snapshot())
