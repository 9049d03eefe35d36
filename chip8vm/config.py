"""Host loop configuration."""

from dataclasses import dataclass

from chip8vm.logging import LEVEL_ORDER
from chip8vm.rendering import COLOR_SCHEMES


@dataclass(frozen=True)
class HostConfig:
    """Settings for the windowed host.

    Attributes:
        instruction_rate: Interpreter steps per second.
        render_rate: Frames presented per second.
        scale: Window pixels per CHIP-8 pixel.
        color_scheme: Name of a scheme in ``rendering.COLOR_SCHEMES``.
        seed: Seed of the random source used by CXNN.
        log_level: Minimum console log level.
    """
    instruction_rate: float = 500.0
    render_rate: float = 60.0
    scale: int = 8
    color_scheme: str = "classic"
    seed: int = 0
    log_level: str = "INFO"

    def __post_init__(self):
        if self.instruction_rate <= 0:
            raise ValueError(f"instruction_rate must be positive, got {self.instruction_rate}")
        if self.render_rate <= 0:
            raise ValueError(f"render_rate must be positive, got {self.render_rate}")
        if self.scale < 1:
            raise ValueError(f"scale must be at least 1, got {self.scale}")
        if self.color_scheme not in COLOR_SCHEMES:
            raise ValueError(
                f"Unknown color scheme '{self.color_scheme}'. Available: {list(COLOR_SCHEMES)}"
            )
        if self.log_level.upper() not in LEVEL_ORDER:
            raise ValueError(f"Unknown log level '{self.log_level}'")

    @property
    def instruction_period(self) -> float:
        return 1.0 / self.instruction_rate

    @property
    def render_period(self) -> float:
        return 1.0 / self.render_rate
