# main.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .config import Config, GRID_W, GRID_H, TICK_MS, UI_CHOICES
from .food import FoodPlacer
from .game import Session
from .loop import LoopDriver
from .terminal import TerminalInput, TerminalMode, TerminalRenderer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Snake in the terminal. WASD / arrow keys to steer, R to restart, Q to quit.",
    )
    parser.add_argument("--width", type=int, default=GRID_W, help="grid width in cells")
    parser.add_argument("--height", type=int, default=GRID_H, help="grid height in cells")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="milliseconds per tick")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for food placement (default: fresh entropy each run)",
    )
    parser.add_argument("--ui", choices=UI_CHOICES, default="terminal")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="write logs here; without it only warnings reach stderr",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    cfg = Config(
        width=args.width,
        height=args.height,
        tick_ms=args.tick_ms,
        seed=args.seed,
        ui=args.ui,
        log_file=args.log_file,
        log_level=args.log_level,
    )
    try:
        return cfg.validate()
    except ValueError as e:
        parser.error(str(e))


def setup_logging(cfg: Config) -> None:
    # Log records go to --log-file or nowhere; stderr shares the playfield
    if cfg.log_file:
        logging.basicConfig(filename=cfg.log_file, level=cfg.log_level, format=LOG_FORMAT)
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def build_session(cfg: Config) -> Session:
    placer = FoodPlacer.seeded(cfg.seed)
    return Session(width=cfg.width, height=cfg.height, placer=placer)


def run_terminal(cfg: Config, session: Session) -> None:
    renderer = TerminalRenderer()
    with TerminalMode():
        renderer.open()
        try:
            LoopDriver(session, TerminalInput(), renderer, cfg.tick_seconds).run()
        finally:
            renderer.close()


def run_pygame(cfg: Config, session: Session) -> None:
    from .pygame_ui import PygameInput, PygameRenderer

    renderer = PygameRenderer(cfg.width, cfg.height)
    renderer.open()
    try:
        LoopDriver(session, PygameInput(), renderer, cfg.tick_seconds).run()
    finally:
        renderer.close()


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    setup_logging(cfg)
    logger.info(
        "Starting %dx%d game, tick=%dms, seed=%s, ui=%s",
        cfg.width, cfg.height, cfg.tick_ms, cfg.seed, cfg.ui,
    )

    session = build_session(cfg)
    try:
        if cfg.ui == "pygame":
            run_pygame(cfg, session)
        else:
            run_terminal(cfg, session)
    except KeyboardInterrupt:
        logger.info("Interrupted")

    print(f"\nBye. Final score: {session.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
