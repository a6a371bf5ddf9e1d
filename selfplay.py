"""
Ultimate Tic-Tac-Toe self-play with a persistent minimax cache.

Loads the memo table, plays one game between the chosen agents, prints
every move and the tied best-move set in numpad notation, then saves the
table back.

    python selfplay.py --max-depth 2
    python selfplay.py --x minimax --o random --cache cache.pkl
    python selfplay.py --max-depth 1 --o random --games 20 --opening-plies 4
"""
import argparse
import time

from config import Config, SearchConfig, StorageConfig
from game import Cell
from ai import MinimaxAgent, RandomAgent, TranspositionTable, play_game, play_match
from storage import open_store
from utils import TqdmProgress, format_move, format_moves


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Ultimate tic-tac-toe minimax self-play')
    parser.add_argument('--max-depth', type=_non_negative, default=None,
                        help='heuristic cutoff depth (omit for full minimax)')
    parser.add_argument('--cache', type=str, default=StorageConfig.cache_file)
    parser.add_argument('--no-cache', action='store_true', help='do not load or save the cache')
    parser.add_argument('--chunk', type=int, default=StorageConfig.entries_per_chunk)
    parser.add_argument('--workers', type=int, default=1)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--verbose', action='store_true')
    parser.add_argument('--print-depth', type=_non_negative, default=None)
    parser.add_argument('--x', choices=['minimax', 'random'], default='minimax')
    parser.add_argument('--o', choices=['minimax', 'random'], default='minimax')
    parser.add_argument('--games', type=int, default=1,
                        help='play a match of this many games with alternating colours')
    parser.add_argument('--opening-plies', type=_non_negative, default=0,
                        help='random opening moves per match game')
    return parser.parse_args(argv)


def build_config(args) -> Config:
    return Config(
        search=SearchConfig(
            max_depth=args.max_depth,
            verbose=args.verbose,
            print_depth=args.print_depth,
            num_workers=args.workers,
            seed=args.seed,
        ),
        storage=StorageConfig(cache_file=args.cache, entries_per_chunk=args.chunk),
    )


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)

    table = TranspositionTable()
    store = None
    if not args.no_cache:
        store = open_store(config.storage.cache_file, config.storage.entries_per_chunk,
                           config.storage.show_progress)
        store.load_into(table)

    def make_agent(kind, offset):
        if kind == 'random':
            seed = None if args.seed is None else args.seed + offset
            return RandomAgent(seed)
        return MinimaxAgent(config.search, table=table,
                            on_progress=None if args.verbose else TqdmProgress())

    agent_x = make_agent(args.x, 0)
    agent_o = make_agent(args.o, 1)

    print("=" * 60)
    print(f"X: {agent_x.name}  vs  O: {agent_o.name}")
    print(f"Max depth: {'full' if config.search.max_depth is None else config.search.max_depth}")
    print(f"Cache: {'disabled' if store is None else config.storage.cache_file} ({len(table)} entries)")
    print("=" * 60)

    def on_move(state, move, mark):
        agent = agent_x if mark is Cell.X else agent_o
        if isinstance(agent, MinimaxAgent) and agent.last_result is not None:
            result = agent.last_result
            print(f"\nBest moves: {format_moves(result.best)} (score {result.score}, "
                  f"{agent.nodes_searched:,} nodes)")
        print(f"{mark.name} plays {format_move(move)}")

    start = time.time()
    if args.games > 1:
        outcome = play_match(agent_x, agent_o, args.games,
                             random_opening_plies=args.opening_plies, seed=args.seed,
                             disable_tqdm=False)
        elapsed = time.time() - start
        print(f"\n{agent_x.name}: {outcome.wins_a}W / {outcome.draws}D / {outcome.wins_b}L "
              f"vs {agent_o.name} (score {outcome.score_a:.1%}, {elapsed:.1f}s)")
    else:
        outcome = play_game(agent_x, agent_o, on_move=on_move)
        elapsed = time.time() - start
        if outcome.winner is None:
            print("\nDraw!")
        else:
            print(f"\nWinner: {outcome.winner.name}")
        print(f"{len(outcome.moves)} moves in {elapsed:.1f}s")

    stats = table.get_stats()
    print(f"[Cache] Entries: {stats['entries']:,} | Definite: {stats['definite_entries']:,} | "
          f"Hit: {stats['hit_rate']}")

    if store is not None:
        print("Saving cache...")
        store.save(table)
    return outcome


if __name__ == '__main__':
    main()
