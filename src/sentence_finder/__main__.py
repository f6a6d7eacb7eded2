from __future__ import annotations
import argparse, json, logging, os, sys
from . import config as CFG
from .engine import SentenceFinder
from .errors import FinderError
from .loader import load_sentences


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_rows(rows: list[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2)); return
    if not rows:
        print(_c("(no matches)", "2;37")); return
    for i, r in enumerate(rows, 1):
        print(f"{i:<3} {r}")

def _print_stats(finder: SentenceFinder) -> None:
    st = finder.stats()
    print(f"sentences={st.sentences:,} words={st.vocabulary:,} tokens={st.tokens:,}")
    for word, n in st.top_words:
        print(f"  {n:<6} {word}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Sentence finder CLI (search / suggest over text files)")
    p.add_argument("--roots", nargs="+", required=True, help="Files or folders to scan for .txt")
    p.add_argument("--unit", choices=["line", "paragraph"], default=None, help="Text unit")
    p.add_argument("--min-match", type=int, default=CFG.MIN_MATCH_COUNT,
                   help="Minimum distinct query tokens a sentence must match")
    p.add_argument("--case-sensitive", action="store_true")
    p.add_argument("--strict", action="store_true", help="Keep hyphens/apostrophes inside tokens")
    p.add_argument("--ranked", action="store_true", help="Rank results by relevance")
    p.add_argument("--partial", action="store_true", help="Substring matching inside words")
    p.add_argument("-k", type=int, default=CFG.TOP_K, help="Max rows to print")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--suggest", default=None, help="Single prefix to complete once")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    try:
        finder = SentenceFinder(
            min_match_count=args.min_match,
            case_sensitive=args.case_sensitive,
            strict_tokens=args.strict,
        )
        finder.initialize(load_sentences(args.roots, unit=args.unit))
    except (ValueError, FinderError) as exc:
        p.error(str(exc))

    ranked, partial = args.ranked, args.partial

    def run_query(q: str) -> None:
        rows = finder.search(q, ranked=ranked, partial=partial).results
        _print_rows(rows[:args.k], args.json)

    def run_suggest(prefix: str) -> None:
        _print_rows(finder.suggest(prefix).suggestions[:args.k], args.json)

    if args.q:
        run_query(args.q)
    if args.suggest:
        run_suggest(args.suggest)

    if args.repl:
        print("Type a query and press Enter (empty line to quit).")
        print(_c("Commands: :suggest <prefix>, :ranked on|off, :partial on|off, :stats", "2;37"))
        while True:
            try:
                raw = input("> ")
            except (EOFError, KeyboardInterrupt):
                print(); break
            cmd = raw.strip()
            if not cmd:
                break
            if cmd.startswith(":suggest"):
                run_suggest(cmd[len(":suggest"):].strip()); continue
            if cmd in (":ranked on", ":ranked off"):
                ranked = cmd.endswith("on"); print(_c(f"(ranked {'on' if ranked else 'off'})", "2;36")); continue
            if cmd in (":partial on", ":partial off"):
                partial = cmd.endswith("on"); print(_c(f"(partial {'on' if partial else 'off'})", "2;36")); continue
            if cmd == ":stats":
                _print_stats(finder); continue
            run_query(cmd)
    return 0

if __name__ == "__main__":
    sys.exit(main())
