"""Game settings and live tunables"""
from dataclasses import dataclass, replace
from typing import Optional

CONFIG = {
    "CELL_SIZE": 40,
    "DAS_MS": 170,
    "ARR_MS": 60,
    "BOARD_WIDTH": 12,
    "BOARD_HEIGHT": 16,
    "FALL_INTERVAL": 0.1,     # seconds between gravity steps
    "SPAWN_INTERVAL": 4.0,    # seconds between new words
    "DRIFT_INTERVAL": 8,      # gravity steps between forced drops of the focused word
    "SEED": None,             # None => seeded from pygame ticks
    "LOG_LEVEL": "INFO",
}


@dataclass(frozen=True)
class Settings:
    width: int = 12
    height: int = 16
    starts_with_one: bool = True
    starts_with_splash: bool = False
    fall_interval: float = 0.1
    spawn_interval: float = 4.0
    drift_interval: int = 8
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"board must be at least 1x1, got {self.width}x{self.height}")
        if self.fall_interval <= 0 or self.spawn_interval <= 0:
            raise ValueError("fall and spawn intervals must be positive")
        if self.drift_interval < 1:
            raise ValueError(f"drift interval must be at least one fall, got {self.drift_interval}")

    def with_(self, **changes) -> "Settings":
        return replace(self, **changes)


def settings_from_config(config=CONFIG, **overrides) -> Settings:
    settings = Settings(
        width=int(config["BOARD_WIDTH"]),
        height=int(config["BOARD_HEIGHT"]),
        fall_interval=float(config["FALL_INTERVAL"]),
        spawn_interval=float(config["SPAWN_INTERVAL"]),
        drift_interval=int(config["DRIFT_INTERVAL"]),
        seed=config["SEED"],
    )
    return settings.with_(**overrides) if overrides else settings
