"""
Galaxy Adventure Configuration

Centralized settings, paths, and constants for the game.
"""

import logging
import sys
from pathlib import Path
from dataclasses import dataclass, field
import appdirs


# Application info
APP_NAME = "GalaxyAdventure"
APP_AUTHOR = "GalaxyAdventure"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def log_file(self) -> Path:
        return self.log_dir / "galaxy_adventure.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        self.log_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class TimerSettings:
    """Timer-related settings (all in milliseconds)."""
    # Splash screen delay before play begins
    loading_delay_ms: int = 3_000

    # One new obstacle per spawn tick
    spawn_interval_ms: int = 1_000

    # Obstacle motion step
    motion_interval_ms: int = 100

    # How long a turbo boost lasts
    turbo_duration_ms: int = 6_000


@dataclass(frozen=True)
class DifficultySettings:
    """Obstacle speed, in field percent per motion tick."""
    initial_speed: float = 2.0
    speed_increase: float = 0.05
    turbo_speed: float = 10.0
    post_turbo_speed: float = 5.0

    def __post_init__(self):
        if min(self.initial_speed, self.turbo_speed, self.post_turbo_speed) <= 0:
            raise ValueError("Obstacle speeds must be positive")
        if self.speed_increase < 0:
            raise ValueError("speed_increase must not be negative")


@dataclass(frozen=True)
class CollisionSettings:
    """Collision zone and scoring."""
    # Obstacles at or below this line can hit the ship
    zone_y: float = 90.0

    # Horizontal distance (exclusive) that counts as contact
    x_tolerance: float = 10.0

    # Points for catching a star
    star_points: int = 10

    # Obstacles past this line are removed
    cull_y: float = 100.0

    def __post_init__(self):
        # Snapshots bound obstacle y to the 0-100 field
        if not 0 < self.cull_y <= 100:
            raise ValueError(f"cull_y must be in (0, 100], got {self.cull_y}")
        if self.star_points < 0:
            raise ValueError("star_points must not be negative")


@dataclass(frozen=True)
class SpaceshipSettings:
    """Spaceship movement."""
    start_x: float = 50.0
    step: float = 10.0
    min_x: float = 0.0
    max_x: float = 100.0

    def __post_init__(self):
        if not 0 <= self.min_x <= self.start_x <= self.max_x <= 100:
            raise ValueError("Spaceship bounds must satisfy 0 <= min_x <= start_x <= max_x <= 100")


@dataclass(frozen=True)
class SpawnSettings:
    """Obstacle type draw thresholds and spawn width."""
    # First draw above this is a star
    star_threshold: float = 0.7

    # Otherwise, second draw above this is an alien
    alien_threshold: float = 0.5

    field_width: float = 100.0

    def __post_init__(self):
        if not 0 < self.field_width <= 100:
            raise ValueError(f"field_width must be in (0, 100], got {self.field_width}")


@dataclass(frozen=True)
class GameSettings:
    """All simulation settings bundled for injection into the engine."""
    timers: TimerSettings = field(default_factory=TimerSettings)
    difficulty: DifficultySettings = field(default_factory=DifficultySettings)
    collision: CollisionSettings = field(default_factory=CollisionSettings)
    spaceship: SpaceshipSettings = field(default_factory=SpaceshipSettings)
    spawn: SpawnSettings = field(default_factory=SpawnSettings)


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Play field size in pixels (rendering only)
    field_width_px: int = 400
    field_height_px: int = 600

    # Minimum window size
    min_width: int = 560
    min_height: int = 860

    # Glyph sizes in pixels
    spaceship_size: int = 80
    asteroid_size: int = 60
    alien_size: int = 70
    star_size: int = 40

    # Distance of the ship from the bottom edge
    spaceship_bottom_margin: int = 10


# Singleton instances
PATHS = Paths()
TIMER_SETTINGS = TimerSettings()
DIFFICULTY_SETTINGS = DifficultySettings()
COLLISION_SETTINGS = CollisionSettings()
SPACESHIP_SETTINGS = SpaceshipSettings()
SPAWN_SETTINGS = SpawnSettings()
GAME_SETTINGS = GameSettings(
    timers=TIMER_SETTINGS,
    difficulty=DIFFICULTY_SETTINGS,
    collision=COLLISION_SETTINGS,
    spaceship=SPACESHIP_SETTINGS,
    spawn=SPAWN_SETTINGS,
)
UI_SETTINGS = UISettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()


def init_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure root logging to the log file and stdout.

    Does nothing if the root logger already has handlers, so it is safe
    to call more than once.
    """
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            handlers=[
                logging.FileHandler(PATHS.log_file),
                logging.StreamHandler(sys.stdout),
            ],
        )
    return logging.getLogger(APP_NAME)
