import argparse
import random
import sys
import time

from loguru import logger

from parchis import GameSession, TurnRecord
from parchis.config import run_config
from parchis.strategy import available, create


def seed_environ(seed_value: int = None):
    random.seed(seed_value)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play a four-player Parchis game turn by turn"
    )
    parser.add_argument(
        "--turns",
        type=int,
        default=run_config.MAX_TURNS,
        help="Maximum number of turns to play",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=run_config.SEED,
        help="Seed for the die; omit for a random game",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=run_config.STRATEGY,
        choices=sorted(available()),
        help="Peg selection policy used by every seat",
    )
    parser.add_argument("--log-level", type=str, default=run_config.LOG_LEVEL)
    parser.add_argument(
        "--step",
        action="store_true",
        help="Wait for Enter before each turn",
    )
    return parser.parse_args()


def build_session(seed: int = None, strategy_name: str = "first") -> GameSession:
    return GameSession.seeded(
        seed, default_strategy=create(strategy_name, seed=seed)
    )


def render_track(session: GameSession) -> str:
    return " ".join(str(v) if v else "." for v in session.board.cells())


def wait_for_enter() -> None:
    print(">> Press Enter for next turn..")
    sys.stdin.readline()


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    seed_environ(args.seed)
    session = build_session(args.seed, args.strategy)

    print("--- Starting Game ---")
    print(f"Players: {', '.join(p.name for p in session.players())}")
    start_time = time.time()

    def show(record: TurnRecord) -> None:
        name = session.players()[record.seat].name
        print(f"Turn {len(session.history)} ({name}) rolls {record.rolls}")
        print(render_track(session))
        print(session.board.stats())

    winner = session.run(
        args.turns,
        advance=wait_for_enter if args.step else None,
        on_turn=show,
    )

    print("\n--- GAME COMPLETE ---")
    print(f"Total Turns: {len(session.history)}")
    print(f"Simulation Time: {time.time() - start_time:.2f} seconds")
    print(f"Winner: {winner.name}" if winner else "No winner within the turn limit")


if __name__ == "__main__":
    main()
