#!/usr/bin/env python3
"""
Debug Helper Script for the Battlesnake agent
Analyzes agent_debug.log and reports how each pipeline stage behaves
"""

import re
import sys
import io
from collections import Counter, defaultdict
from typing import Dict

STAGE_LINE = re.compile(r"game (\S+), turn (\d+), ([a-z ]+): (.+)$")
SELECT_LINE = re.compile(r"game (\S+), turn (\d+), selecting move from \[(.*)\]")
MOVE_LINE = re.compile(r"turn (\d+) move=(\w+)")

NARROWED = "narrowed"
UNCHANGED = "no changes"
SKIPPED = "skipped"


class LogAnalyzer:
    """Analyzes agent debug logs"""

    def __init__(self, log_file: str = "agent_debug.log"):
        self.log_file = log_file
        self.lines = []
        self.load_log()

    def load_log(self):
        """Load log file"""
        try:
            with open(self.log_file, 'r', encoding='utf-8', errors='replace') as f:
                self.lines = f.readlines()
            print(f"✓ Loaded {len(self.lines)} log lines from {self.log_file}")
        except FileNotFoundError:
            print(f"✗ Log file {self.log_file} not found!")
            sys.exit(1)

    def stage_outcomes(self) -> Dict[str, Counter]:
        outcomes = defaultdict(Counter)
        for line in self.lines:
            match = STAGE_LINE.search(line.rstrip())
            if not match:
                continue
            stage, result = match.group(3), match.group(4)
            if result == "skipping because empty":
                outcomes[stage][SKIPPED] += 1
            elif result == "no changes":
                outcomes[stage][UNCHANGED] += 1
            elif "->" in result:
                outcomes[stage][NARROWED] += 1
        return dict(outcomes)

    def final_candidates(self) -> Counter:
        """How many moves were left for the random pick"""
        sizes = Counter()
        for line in self.lines:
            match = SELECT_LINE.search(line)
            if match:
                sizes[len([m for m in match.group(3).split(",") if m.strip()])] += 1
        return sizes

    def move_counts(self) -> Counter:
        moves = Counter()
        for line in self.lines:
            match = MOVE_LINE.search(line)
            if match:
                moves[match.group(2)] += 1
        return moves

    def analyze_stages(self):
        """Analyze what every stage did"""
        print("\n" + "="*60)
        print("STAGE ANALYSIS")
        print("="*60)

        outcomes = self.stage_outcomes()
        if not outcomes:
            print("No stage data found in log")
            return

        print(f"\n  {'stage':24} {NARROWED:>9} {UNCHANGED:>11} {SKIPPED:>8}")
        for stage, counts in outcomes.items():
            print(f"  {stage:24} {counts[NARROWED]:9} {counts[UNCHANGED]:11} {counts[SKIPPED]:8}")

        # a hard stage that keeps emptying the set means we are getting boxed in
        for stage in ("in bounds", "snake collisions", "threatened"):
            if outcomes.get(stage, Counter())[SKIPPED] > 0:
                print(f"  ⚠ WARNING: '{stage}' had no safe option {outcomes[stage][SKIPPED]} times")

    def analyze_moves(self):
        """Analyze chosen moves"""
        print("\n" + "="*60)
        print("MOVE ANALYSIS")
        print("="*60)

        moves = self.move_counts()
        sizes = self.final_candidates()

        if not moves and not sizes:
            print("No move data found in log")
            return

        total = sum(moves.values())
        for move, count in moves.most_common():
            print(f"  {move:6} : {count:4} ({count/total*100:.1f}%)")

        if sizes:
            print("\nCandidates left for the random pick:")
            for size in sorted(sizes):
                print(f"  {size} move(s): {sizes[size]} turns")

    def full_analysis(self):
        """Run complete analysis"""
        print("\n" + "╔" + "="*58 + "╗")
        print("║" + " "*16 + "SNAKE AGENT LOG ANALYZER" + " "*18 + "║")
        print("╚" + "="*58 + "╝")

        self.analyze_stages()
        self.analyze_moves()


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Analyze agent debug logs')
    parser.add_argument(
        '--log',
        default='agent_debug.log',
        help='Path to log file (default: agent_debug.log)'
    )
    parser.add_argument(
        '--section',
        choices=['stages', 'moves', 'all'],
        default='all',
        help='Specific section to analyze'
    )

    args = parser.parse_args()
    # Prepare for running as script: ensure stdout uses UTF-8 when redirected
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    else:
        sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")

    analyzer = LogAnalyzer(args.log)

    if args.section == 'all':
        analyzer.full_analysis()
    elif args.section == 'stages':
        analyzer.analyze_stages()
    elif args.section == 'moves':
        analyzer.analyze_moves()


if __name__ == "__main__":
    main()
