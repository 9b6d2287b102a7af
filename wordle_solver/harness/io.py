"""
I/O utilities for benchmark runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- bench_manifest: assemble run id, commit, config, word list report and summary.
- write_manifest: dump that manifest as JSON.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      N, answer, success, guesses, time_ms,
      guess_1, hint_1, ..., guess_K, hint_K
    where K is the longest game in the batch.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["N", "answer", "success", "guesses", "time_ms"]
    for i in range(1, turns + 1):
        fields += [f"guess_{i}", f"hint_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    g, hint = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"hint_{i}"] = hint
                else:
                    row[f"guess_{i}"] = ""
                    row[f"hint_{i}"] = ""

            w.writerow(row)

    return str(p)


def bench_manifest(run_id: str, config: Dict, wordlist: Dict, opening_guess: str,
                   summary: Dict, elapsed_s: float) -> Dict:
    """
    Manifest for one `bench` run: what was played, with which list and
    settings, and how it went. `config` is filtered to JSON-friendly values
    (argparse callbacks and the like are dropped).
    """
    plain = (str, int, float, bool, type(None))
    return {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {k: v for k, v in sorted(config.items()) if isinstance(v, plain)},
        "wordlist": wordlist,
        "opening_guess": opening_guess,
        "summary": summary,
        "elapsed_s": round(elapsed_s, 3),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """Write `manifest` (see bench_manifest) as indented JSON; returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
        f.write("\n")
    return str(p)


def timestamp_id(now: Optional[dt.datetime] = None) -> str:
    """Compact UTC run id for file names, e.g. 20250820T024121Z."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown(repo: Optional[str] = None) -> str:
    """
    Short hash of the checkout the solver was imported from (or `repo`).
    'unknown' outside a git checkout or without git.
    """
    cwd = repo or str(Path(__file__).resolve().parent)
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=cwd, capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"
