import argparse
import logging
import time

from tiles2048.config import GameConfig
from tiles2048.game import Game
from tiles2048.render import format_board, result_line

QUIT_KEYS = {"q", "quit", "exit"}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play 2048 in the terminal. Enter w/a/s/d (or h/j/k/l) and press return; q quits."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed (default: current time)")
    parser.add_argument(
        "--target",
        type=int,
        default=GameConfig.TARGET_TILE,
        help="winning tile as a power of two (default: %(default)s, i.e. 2048)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log moves and spawns")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    seed = args.seed if args.seed is not None else int(time.time())
    game = Game(seed=seed, target=args.target)
    print(format_board(game.snapshot()))

    try:
        while not game.over:
            key = input()
            if key.strip().lower() in QUIT_KEYS:
                break
            game.move(key)
            print(format_board(game.snapshot()))
    except (EOFError, KeyboardInterrupt):
        print()

    print(result_line(game.snapshot()))


if __name__ == "__main__":
    main()
