"""
Word list validator.

What this module does:
- Validate one guess list (the file a Dictionary is built from).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

The Dictionary itself stops at the first invalid word; this report lists
all problems at once so a broken file can be fixed in one go.

Typical use:
    from wordle_solver.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordle_solver/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_solver.engine.validation import is_valid_word

# Report at most this many offending words per issue
_EXAMPLES = 5


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], List[str]]:
    """
    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_lines)
    """
    valid: List[str] = []
    invalid: List[str] = []

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if is_valid_word(w, N):
                valid.append(w)
            else:
                invalid.append(w)

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (see WordlistReport) whose `passed` is
    True iff the file exists, holds at least one valid word and has no
    invalid lines. Duplicates are reported but do not fail the check (the
    Dictionary drops them).
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, path, False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = set(words)
    issues: List[str] = []

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"{len(invalid)} invalid line(s) (e.g., {invalid[:_EXAMPLES]})")
    if len(unique) != len(words):
        issues.append(f"{len(words) - len(unique)} duplicate line(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=len(invalid),
        sha256=_sha256_file(p),
        passed=bool(words) and not invalid,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.

        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
