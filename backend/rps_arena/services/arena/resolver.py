from rps_arena.models import Move, Verdict


# (move_a, move_b) -> verdict, covering every pairing
OUTCOMES = {
    (Move.ROCK, Move.ROCK): Verdict.DRAW,
    (Move.ROCK, Move.PAPER): Verdict.B_WINS,
    (Move.ROCK, Move.SCISSORS): Verdict.A_WINS,
    (Move.PAPER, Move.ROCK): Verdict.A_WINS,
    (Move.PAPER, Move.PAPER): Verdict.DRAW,
    (Move.PAPER, Move.SCISSORS): Verdict.B_WINS,
    (Move.SCISSORS, Move.ROCK): Verdict.B_WINS,
    (Move.SCISSORS, Move.PAPER): Verdict.A_WINS,
    (Move.SCISSORS, Move.SCISSORS): Verdict.DRAW,
}


def resolve(move_a: Move, move_b: Move) -> Verdict:
    """Decide a single round.

    Rock beats scissors, scissors beats paper, paper beats rock; equal
    moves draw.
    """
    return OUTCOMES[(Move(move_a), Move(move_b))]
