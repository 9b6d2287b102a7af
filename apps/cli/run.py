# apps/cli/run.py
"""
CLI entry point for the wordle solver.

Sub-commands:
  solve   Replay the hints seen so far and print the best next guess.
          Each input is `<guess>:<hints>` with one of c/p/a per letter
          (correct / present / absent), e.g.:
              python -m apps.cli.run solve crane:aapca tides:aapaa
  bench   Self-play the solver against every word of the list (or a
          seeded sample), print min/max/avg/std of guesses needed and
          optionally write a CSV + JSON manifest.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_solver.datasets import DEFAULT_WORDLIST, load_words, pretty_summary, validate_wordlist
from wordle_solver.engine import Dictionary, PuzzleState, WordleError, parse_guess_token
from wordle_solver.harness import run_bench, summarize, opening_guess
from wordle_solver.harness.io import bench_manifest, write_csv, write_manifest, timestamp_id
from wordle_solver.solvers import default_threads

DEFAULT_WORD_LEN = 5

log = logging.getLogger("wordle_solver.cli")


def _load_dictionary(path: str, N: int) -> Dictionary:
    """Validate the list (one summary line on stderr), then build the Dictionary."""
    rep = validate_wordlist(N, path)
    print(pretty_summary(rep), file=sys.stderr)
    return Dictionary.build(N, load_words(path))


def cmd_solve(args) -> int:
    parsed = [parse_guess_token(tok) for tok in args.inputs]

    dictionary = _load_dictionary(args.wordlist, args.N)
    puzzle = PuzzleState(dictionary)
    for guess, hints in parsed:
        puzzle.guess(guess, hints)

    print(f"input summary:\n{puzzle}")
    best = puzzle.best_guess(args.threads)
    print(f"best guess: {best.word}\n"
          f"remaining words: {best.worst_case} worst, {best.avg_case} avg.")
    return 0


def cmd_bench(args) -> int:
    dictionary = _load_dictionary(args.wordlist, args.N)
    answers = dictionary.strings()

    # Deterministic sample without replacement
    if args.sample and args.sample < len(answers):
        rng = random.Random(args.seed)
        rng.shuffle(answers)
        answers = sorted(answers[: args.sample])

    t0 = time.time()
    first = opening_guess(dictionary, args.threads)
    print(f"opening guess: {first}", file=sys.stderr)

    total = len(answers)
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    bar = tqdm(total=total, ncols=80, desc="Benchmark", unit="game") if mode == "bar" else None
    done = 0
    last_print = 0.0

    def on_result(r):
        nonlocal done, last_print
        done += 1
        if args.verbose:
            print(f"{r['answer']} took {r['guesses']} guesses")
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (done == total):
                elapsed = now - t0
                pct = 100.0 * done / max(1, total)
                sys.stderr.write(f"\r[{done}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    try:
        results = run_bench(dictionary, answers, threads=args.threads,
                            first_guess=first, on_result=on_result)
    finally:
        if bar is not None:
            bar.close()
        elif mode == "plain":
            sys.stderr.write("\n")
            sys.stderr.flush()

    stats = summarize(results)
    if args.verbose:
        print()
    print(f"results over {stats['count']} words:")
    print(f"min: {stats['min']}")
    print(f"max: {stats['max']}")
    print(f"avg: {stats['avg']:.4f}")
    print(f"std: {stats['std']:.4f}")

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"bench_{run_id}.csv"
        manifest_path = outdir / f"bench_{run_id}_manifest.json"
        write_csv(results, str(csv_path), N=args.N)
        manifest = bench_manifest(run_id, vars(args), validate_wordlist(args.N, args.wordlist),
                                  first, stats, time.time() - t0)
        write_manifest(manifest, str(manifest_path))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-solver",
                                 description="Minimax solver for Wordle-style puzzles")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST),
                    help="guess list, whitespace separated (default: bundled 5-letter list)")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LEN, help="word length")
    ap.add_argument("-t", "--threads", type=int, default=default_threads(),
                    help="worker threads (default: cpu count)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="debug logging; bench also prints guesses per word")
    sub = ap.add_subparsers(dest="command", required=True)

    # Same flags after the sub-command; SUPPRESS keeps the top-level value
    # when they are not repeated there.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-t", "--threads", type=int, default=argparse.SUPPRESS,
                        help="worker threads (default: cpu count)")
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
                        help="debug logging; bench also prints guesses per word")

    sp = sub.add_parser("solve", parents=[common], help="predict the best next guess")
    sp.add_argument("inputs", nargs="*", metavar="GUESS:HINTS",
                    help="previous guesses, e.g. crane:aapca (c=correct, p=present, a=absent)")
    sp.set_defaults(func=cmd_solve)

    bp = sub.add_parser("bench", parents=[common],
                        help="self-play against every word in the list",
                        description="Self-play against every word in the list. Each turn is a "
                                    "full minimax search over the dictionary (seconds per game "
                                    "on the bundled list), so use --sample for quick runs.")
    bp.add_argument("--sample", type=int,
                    help="only play this many words (deterministic by seed); "
                         "a full run over the bundled list takes a long time")
    bp.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    bp.add_argument("--outdir", help="write CSV + manifest here")
    bp.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="show run progress (auto=bar on a terminal, else plain text)")
    bp.set_defaults(func=cmd_bench)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (WordleError, FileNotFoundError) as e:
        log.debug("failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
