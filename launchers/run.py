import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bullseye.api.config import EngineConfig
from bullseye.app.loop import run_game
from bullseye.const import DIFFICULTY_MAX, DIFFICULTY_MIN


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bullseye aim trainer")
    parser.add_argument("--game", default="bullseye", help="Game folder name under games/")
    parser.add_argument("--screen", default="1280x720", help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--mode", choices=["timed", "tracking"], help="Initial game mode (overrides manifest)")
    parser.add_argument("--difficulty", type=int, help=f"Spawn curve {DIFFICULTY_MIN}..{DIFFICULTY_MAX} (overrides manifest)")
    parser.add_argument("--shields", action="store_true", default=None, help="Tracking targets start with shields")
    parser.add_argument("--seed", type=int, help="Seed for target placement")
    parser.add_argument("--state-dir", type=Path, help="Where best scores are kept (default ~/.bullseye)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    w, h = map(int, args.screen.lower().split("x"))

    options = {}
    if args.mode is not None:
        options["mode"] = args.mode
    if args.difficulty is not None:
        options["difficulty"] = args.difficulty
    if args.shields is not None:
        options["shields"] = args.shields

    run_game(
        game_id=args.game,
        cfg=EngineConfig(
            screen_size=(w, h),
            fps=args.fps,
            mirror=args.mirror,
            seed=args.seed,
            state_dir=args.state_dir,
            options=options,
        ),
    )


if __name__ == "__main__":
    main()
