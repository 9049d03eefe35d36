"""
Run a CHIP-8 ROM in a pygame window.

Controls: the 4x4 block 1234/QWER/ASDF/ZXCV is the hex keypad, ESC quits.
"""

import argparse
import sys

from chip8vm.config import HostConfig
from chip8vm.errors import RomLoadError
from chip8vm.logging import get_logger
from chip8vm.rendering import COLOR_SCHEMES


def parse_args(argv=None) -> argparse.Namespace:
    defaults = HostConfig()
    parser = argparse.ArgumentParser(
        description="CHIP-8 virtual machine",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("rom", help="Path to a raw CHIP-8 program")
    parser.add_argument("--instruction-rate", type=float, default=defaults.instruction_rate,
                        help="Instructions executed per second")
    parser.add_argument("--render-rate", type=float, default=defaults.render_rate,
                        help="Frames drawn per second")
    parser.add_argument("--scale", type=int, default=defaults.scale,
                        help="Window pixels per CHIP-8 pixel")
    parser.add_argument("--color-scheme", choices=sorted(COLOR_SCHEMES), default=defaults.color_scheme)
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="Seed of the random number source")
    parser.add_argument("--log-level", default=defaults.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = get_logger("chip8vm")
    try:
        config = HostConfig(
            instruction_rate=args.instruction_rate,
            render_rate=args.render_rate,
            scale=args.scale,
            color_scheme=args.color_scheme,
            seed=args.seed,
            log_level=args.log_level,
        )
    except ValueError as e:
        logger.error(str(e))
        return 2

    # pygame prints a banner on import, keep it out of --help
    from chip8vm.host import run

    try:
        return run(args.rom, config)
    except RomLoadError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
