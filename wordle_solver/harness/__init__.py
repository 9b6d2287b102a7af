from .core import play_game, run_bench, summarize, opening_guess, WORDLE_MAX_TURNS
from .io import write_csv, write_manifest, bench_manifest

__all__ = ["play_game", "run_bench", "summarize", "opening_guess", "WORDLE_MAX_TURNS",
           "write_csv", "write_manifest", "bench_manifest"]
