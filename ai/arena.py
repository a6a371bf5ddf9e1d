"""
Plays games between agents: one game, or a match with alternating colours.
"""
import random
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional

from tqdm import tqdm

from game import Cell, GameState, Move


class GameRecord(NamedTuple):
    winner: Optional[Cell]  # None = draw
    moves: List[Move]
    final_state: GameState


@dataclass
class MatchResult:
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    games: int = 0

    @property
    def win_rate_a(self):
        return self.wins_a / self.games if self.games else 0.0

    @property
    def win_rate_b(self):
        return self.wins_b / self.games if self.games else 0.0

    @property
    def draw_rate(self):
        return self.draws / self.games if self.games else 0.0

    @property
    def score_a(self):
        """Score for agent A (win=1, draw=0.5, loss=0)."""
        return (self.wins_a + 0.5 * self.draws) / self.games if self.games else 0.5


def play_game(agent_x, agent_o, state: Optional[GameState] = None,
              on_move: Optional[Callable[[GameState, Move, Cell], None]] = None,
              max_moves: int = 81) -> GameRecord:
    """
    Alternate agents until the game is over. Each move goes through the
    validated make_move, so an agent proposing an illegal move raises.

    on_move(state_after, move, mark) is called after every move.
    """
    state = state.clone() if state is not None else GameState.new()
    agents = {Cell.X: agent_x, Cell.O: agent_o}
    moves: List[Move] = []

    while not state.is_terminal() and len(moves) < max_moves:
        mark = state.mover
        move = agents[mark].select_action(state)
        state.make_move(*move)
        moves.append(move)
        if on_move is not None:
            on_move(state, move, mark)

    return GameRecord(state.winner(), moves, state)


def play_match(agent_a, agent_b, num_games: int, random_opening_plies: int = 0,
               seed: Optional[int] = None, disable_tqdm: bool = True) -> MatchResult:
    """Sequential match; agent A plays X in even-numbered games.

    random_opening_plies random moves are played before the agents take
    over, so deterministic agents do not replay the same game.
    """
    rng = random.Random(seed)
    result = MatchResult()

    for i in tqdm(range(num_games), desc="Match", ncols=80, leave=False, disable=disable_tqdm):
        state = GameState.new()
        for _ in range(random_opening_plies):
            if state.is_terminal():
                break
            state.make_move(*rng.choice(state.legal_moves()))

        a_is_x = (i % 2 == 0)
        if a_is_x:
            record = play_game(agent_a, agent_b, state)
        else:
            record = play_game(agent_b, agent_a, state)

        result.games += 1
        if record.winner is None:
            result.draws += 1
        elif (record.winner is Cell.X) == a_is_x:
            result.wins_a += 1
        else:
            result.wins_b += 1

    return result
