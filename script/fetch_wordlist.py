"""
Download a word list and write a clean guess list for the solver.

What it does:
- Downloads the URL (plain text list or an HTML page).
- For HTML, parses the visible text with BeautifulSoup first.
- Keeps tokens that are exactly N letters a–z (case folded), drops the rest.
- De-duplicates and sorts, then writes one word per line.

Usage:
    python -m script.fetch_wordlist --url <URL> --out wordle_solver/datasets/data/words_5.txt
    python -m script.fetch_wordlist --url <URL> --N 6 --out words_6.txt
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

TOKEN_RE = re.compile(r"[A-Za-z]+")


def extract_words(text: str, N: int, html: bool = False) -> list[str]:
    """Sorted unique N-letter lowercase words found in `text`."""
    if html:
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    words = {m.group(0).lower() for m in TOKEN_RE.finditer(text) if len(m.group(0)) == N}
    return sorted(words)


def fetch_words(url: str, N: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    html = "html" in r.headers.get("Content-Type", "")
    return extract_words(r.text, N, html=html)


def main():
    ap = argparse.ArgumentParser(description="Download and clean a word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--out", default="wordle_solver/datasets/data/words_5.txt")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique {args.N}-letter words -> {args.out}")


if __name__ == "__main__":
    main()
