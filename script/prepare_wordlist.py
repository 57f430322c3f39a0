"""
Clean a word-list file for use as a root-word pool or dictionary.

Features:
- Trims every line and drops blank/whitespace-only lines (a blank root word
  can never be played).
- Lower-cases by default (turn off with --keep-case).
- Optionally drops anything that isn't a plain a–z word (--alpha-only).
- Removes duplicates, preserving original order unless --sort is given.
- Overwrites in place by default, or writes to a separate --out path.

Usage:
    python -m script.prepare_wordlist --in wordscramble/datasets/data/dictionary.txt \
        --alpha-only --sort
"""

import argparse
from pathlib import Path

from wordscramble.datasets.io import read_words, write_words


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean(lines: list[str], *, lower: bool = True, alpha_only: bool = False,
          sort: bool = False) -> list[str]:
    words = [s.strip() for s in lines if s.strip()]
    if lower:
        words = [w.lower() for w in words]
    if alpha_only:
        words = [w for w in words if w.isascii() and w.isalpha()]
    out = unique_preserve_order(words)
    return sorted(out) if sort else out


def main():
    ap = argparse.ArgumentParser(description="Normalise and dedupe a word-list file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--keep-case", action="store_true", help="don't lower-case words")
    ap.add_argument("--alpha-only", action="store_true", help="drop lines that aren't plain a–z words")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_words(inp, skip_blanks=False)
    out = clean(lines, lower=not args.keep_case, alpha_only=args.alpha_only, sort=args.sort)

    write_words(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
