"""Windowed pygame host: key mapping, fixed-rate loop and presentation."""

import time
from typing import Dict

import jax
import pygame

from chip8vm.config import HostConfig
from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from chip8vm.errors import RuntimeFault
from chip8vm.framebuffer import Framebuffer
from chip8vm.interpreter import Interpreter, RomSource
from chip8vm.keypad import Keypad
from chip8vm.logging import get_logger, set_level
from chip8vm.rendering import create_color_scheme, framebuffer_to_rgb

# Keyboard layout of the COSMAC VIP hex keypad:
#   1 2 3 C      1 2 3 4
#   4 5 6 D  ->  Q W E R
#   7 8 9 E      A S D F
#   A 0 B F      Z X C V
KEY_LAYOUT = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "q": 0x4, "w": 0x5, "e": 0x6, "r": 0xD,
    "a": 0x7, "s": 0x8, "d": 0x9, "f": 0xE,
    "z": 0xA, "x": 0x0, "c": 0xB, "v": 0xF,
}


def build_key_map() -> Dict[int, int]:
    """Map pygame key codes to keypad indices."""
    return {pygame.key.key_code(name): index for name, index in KEY_LAYOUT.items()}


class FixedRateClock:
    """Counts how many fixed-period ticks fell due since the last poll.

    At most ``max_ticks`` are reported per poll, so a stalled host drops
    time instead of running a long burst afterwards.
    """

    def __init__(self, period: float, start: float = 0.0, max_ticks: int = 16):
        self.period = period
        self.next_tick = start + self.period
        self.max_ticks = max_ticks

    def poll(self, now: float) -> int:
        if now < self.next_tick:
            return 0
        ticks = int((now - self.next_tick) // self.period) + 1
        self.next_tick += ticks * self.period
        return min(ticks, self.max_ticks)


def draw(screen: pygame.Surface, framebuffer: Framebuffer, config: HostConfig):
    """Blit the framebuffer onto the window surface."""
    on_color, off_color = create_color_scheme(config.color_scheme)
    frame = framebuffer_to_rgb(framebuffer.pixels, config.scale, on_color, off_color)
    # surfarray wants (width, height, 3)
    surface = pygame.surfarray.make_surface(frame.transpose(1, 0, 2))
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(rom: RomSource, config: HostConfig = HostConfig()) -> int:
    """Run a ROM in a window until it is closed or faults.

    Returns:
        Process exit status: 0 on a clean quit, 1 on a runtime fault.

    Raises:
        RomLoadError: The ROM could not be read.
    """
    logger = get_logger("chip8vm")
    set_level(config.log_level)

    framebuffer = Framebuffer()
    keypad = Keypad()
    interpreter = Interpreter.from_rom(rom, rng=jax.random.PRNGKey(config.seed), logger=logger)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH * config.scale, SCREEN_HEIGHT * config.scale))
    pygame.display.set_caption("chip8vm")
    key_map = build_key_map()
    pacer = pygame.time.Clock()

    start = time.perf_counter()
    instruction_clock = FixedRateClock(config.instruction_period, start)
    render_clock = FixedRateClock(config.render_period, start, max_ticks=1)
    logger.info(
        f"Running at {config.instruction_rate:g} Hz, rendering at {config.render_rate:g} Hz"
    )

    status = 0
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in key_map:
                        keypad.press(key_map[event.key])
                elif event.type == pygame.KEYUP and event.key in key_map:
                    keypad.release(key_map[event.key])

            now = time.perf_counter()
            try:
                for _ in range(instruction_clock.poll(now)):
                    interpreter.execute_one_cycle(framebuffer, keypad)
            except RuntimeFault:
                logger.critical(f"Halted after {interpreter.cycles} cycles: {interpreter}")
                status = 1
                break

            if render_clock.poll(now):
                draw(screen, framebuffer, config)

            # Never spin faster than the instruction clock.
            pacer.tick(int(config.instruction_rate))
    finally:
        pygame.quit()

    logger.info(f"Stopped after {interpreter.cycles} cycles")
    return status
