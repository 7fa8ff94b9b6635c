"""
Play many automated games for every ordered pair of dice, using the real commit-reveal draws,
and compare the empirical win rates with the exact probability matrix.
Usage: python scripts/simulate.py 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7 --games 500 --data-dir data
"""
import os
import argparse
import csv
import datetime
import itertools
import random
from collections import Counter
from typing import Dict, List, Optional

try:
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    _PLOTTING_AVAILABLE = True
except Exception:
    plt = None
    _PLOTTING_AVAILABLE = False

from fair_dice.agents.base import Agent
from fair_dice.core.config import GameConfig
from fair_dice.core.dice_set import DiceSet, parse_dice_set
from fair_dice.core.entropy import SeededRandomSource
from fair_dice.core.errors import ValidationError
from fair_dice.core.game import GameOrchestrator
from fair_dice.core.interface import GameInterface
from fair_dice.core.probability import ProbabilityMatrix
from fair_dice.core.rules import Outcome

REPORT_HEADER = ['timestamp', 'user_die', 'computer_die', 'games', 'user_wins', 'computer_wins', 'draws',
                 'empirical_user_win_rate', 'exact_user_win_rate']


class FixedAgent(Agent):
    """Always picks the same die."""
    def __init__(self, index: int):
        super().__init__()
        self.index = index

    def choose_die(self, dice_set, matrix, taken=None, allow_shared=False):
        return self.index


class SimulatedUser(GameInterface):
    """
    Plays the user's side: random numbers for draws, a fixed die, never asks for help.
    """
    def __init__(self, die_index: int, rng: random.Random):
        self.die_index = die_index
        self.rng = rng

    def show_commitment(self, range_, commitment):
        pass

    def ask_number(self, range_):
        return self.rng.randrange(range_)

    def show_invalid_number(self, range_, value):
        pass

    def show_reveal(self, reveal):
        pass

    def show_first_mover(self, user_first):
        pass

    def wants_help(self):
        return False

    def show_help(self, matrix):
        pass

    def ask_die(self, dice_set, taken=None):
        return self.die_index

    def show_computer_choice(self, index, die):
        pass

    def show_roll(self, party, value):
        pass

    def show_outcome(self, result):
        pass


def simulate_pair(dice_set: DiceSet, user_die: int, computer_die: int, games: int,
                  seed: Optional[int] = None) -> Counter:
    """
    Play games with fixed dice and return a Counter of Outcome values.
    When seed is given, both the protocol entropy and the simulated user are deterministic.
    """
    rng = random.Random(seed)
    source = SeededRandomSource(seed) if seed is not None else None
    config = GameConfig(allow_shared_die=True)
    tally = Counter()
    for _ in range(games):
        game = GameOrchestrator(dice_set, SimulatedUser(user_die, rng), config=config,
                                agent=FixedAgent(computer_die), source=source)
        tally[game.play().outcome] += 1
    return tally


def run_simulation(dice_set: DiceSet, games: int, seed: Optional[int] = None) -> List[Dict]:
    matrix = ProbabilityMatrix(dice_set)
    timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
    rows = []
    n = dice_set.get_dice_count()
    for i, j in itertools.permutations(range(n), 2):
        pair_seed = None if seed is None else seed + i * n + j
        tally = simulate_pair(dice_set, i, j, games, pair_seed)
        rows.append({
            'timestamp': timestamp,
            'user_die': str(dice_set.get_die(i)),
            'computer_die': str(dice_set.get_die(j)),
            'games': games,
            'user_wins': tally[Outcome.USER_WINS],
            'computer_wins': tally[Outcome.COMPUTER_WINS],
            'draws': tally[Outcome.DRAW],
            'empirical_user_win_rate': f"{tally[Outcome.USER_WINS] / games:.4f}" if games else "0.0000",
            'exact_user_win_rate': f"{matrix.probability(i, j):.4f}",
        })
    return rows


def write_rows_to_csv(rows: List[dict], path: str, header: List[str]):
    write_header = not os.path.exists(path)
    with open(path, 'a', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for r in rows:
            writer.writerow(r)


def plot_win_rates(rows: List[dict], out_path: str):
    if not _PLOTTING_AVAILABLE:
        print(f"matplotlib not available; skipping plot generation: {out_path}")
        return

    labels = [f"[{r['user_die']}]\nvs\n[{r['computer_die']}]" for r in rows]
    empirical = [float(r['empirical_user_win_rate']) * 100.0 for r in rows]
    exact = [float(r['exact_user_win_rate']) * 100.0 for r in rows]
    positions = list(range(len(rows)))
    width = max(6, int(len(rows) * 1.2))
    plt.figure(figsize=(width, 4))
    plt.bar([p - 0.2 for p in positions], empirical, width=0.4, color='C0', label='empirical')
    plt.bar([p + 0.2 for p in positions], exact, width=0.4, color='C1', label='exact')
    plt.xticks(positions, labels, fontsize=7)
    plt.ylabel('User win percentage (%)')
    plt.ylim(0, 100)
    plt.title('Fair-roll simulation: user win% per die pairing')
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description='Simulate fair-roll games for every ordered pair of dice')
    parser.add_argument('dice', nargs='+', help='Comma-separated integer faces, one argument per die')
    parser.add_argument('--games', type=int, default=200, help='Number of games per ordered pairing')
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible (insecure) simulation')
    parser.add_argument('--data-dir', type=str, default='data', help='Directory to save the csv report and chart')
    args = parser.parse_args()

    try:
        dice_set = parse_dice_set(args.dice, GameConfig())
    except ValidationError as e:
        raise SystemExit(f"Error: {e}")

    os.makedirs(args.data_dir, exist_ok=True)
    report_csv = os.path.join(args.data_dir, 'simulation_report.csv')
    chart_png = os.path.join(args.data_dir, 'win_rates.png')

    rows = run_simulation(dice_set, args.games, args.seed)
    for r in rows:
        print(f"[{r['user_die']}] vs [{r['computer_die']}]: empirical {r['empirical_user_win_rate']}, "
              f"exact {r['exact_user_win_rate']}")
    write_rows_to_csv(rows, report_csv, REPORT_HEADER)
    plot_win_rates(rows, chart_png)

    print(f"Simulation report: {report_csv}")
    print(f"Win rate chart: {chart_png}")


if __name__ == '__main__':
    main()
