from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from sentence_finder import SentenceFinder, FinderError, load_sentences
from sentence_finder.config import TOP_K, MIN_MATCH_COUNT

app = Flask(__name__)
_finder: SentenceFinder | None = None

log = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return request.args.get(name, "", type=str).strip().lower() in _TRUE


def _bad_request(msg: str):
    return jsonify({"error": msg}), 400


def _not_ready():
    return jsonify({"error": "finder not initialized"}), 503

# ---------- API ----------
@app.get("/api/search")
def api_search():
    if _finder is None:
        return _not_ready()
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    min_match = request.args.get("min", None, type=int)
    if not q.strip():
        return jsonify([])
    try:
        rows = _finder.search(q, ranked=_flag("ranked"), partial=_flag("partial"),
                              min_match_count=min_match).results
    except (ValueError, FinderError) as exc:
        return _bad_request(str(exc))
    return jsonify(rows[:max(1, k)])


@app.get("/api/suggest")
def api_suggest():
    if _finder is None:
        return _not_ready()
    prefix = request.args.get("prefix", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    return jsonify(_finder.suggest(prefix).suggestions[:max(1, k)])


@app.get("/api/health")
def api_health():
    if _finder is None:
        return jsonify({"ok": False, "sentences": 0}), 503
    return jsonify({"ok": True, "sentences": len(_finder)})

# ---------- UI ----------
@app.get("/")
def home():
    # Minimal page: plain CSS + fetch(), no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Sentence Finder • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap; }
.controls input[type=text]{ flex:1; min-width:240px; padding:12px 14px; border-radius:12px;
  border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.words span{ display:inline-block; margin:8px 6px 0 0; padding:2px 8px; border:1px solid var(--border); border-radius:8px; }
.row{ padding:10px 14px; border-top:1px solid var(--border); }
.empty{ padding:24px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Sentence Finder</h1>
      <form class="controls" onsubmit="return false">
        <input id="q" type="text" placeholder="Type words to search…" autocomplete="off" autofocus />
        <label><input id="ranked" type="checkbox" checked /> ranked</label>
        <label><input id="partial" type="checkbox" /> partial</label>
      </form>
      <div id="words" class="words"></div>
      <div id="stats" class="meta">Ready.</div>
      <div id="out" class="empty">Start typing to see results.</div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), out = $("#out"), stats = $("#stats"), words = $("#words");
let t;
const esc = (s) => s.replace(/[&<>"]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
async function run(){
  const query = q.value;
  if(!query.trim()){ out.className = "empty"; out.innerHTML = "Start typing to see results."; words.innerHTML = ""; return; }
  const last = query.trim().split(/\s+/).pop();
  const params = `q=${encodeURIComponent(query)}&ranked=${$("#ranked").checked}&partial=${$("#partial").checked}`;
  const [rows, sugg] = await Promise.all([
    fetch(`/api/search?${params}`).then(r => r.json()),
    fetch(`/api/suggest?prefix=${encodeURIComponent(last)}`).then(r => r.json()),
  ]);
  words.innerHTML = sugg.map(w => `<span>${esc(w)}</span>`).join("");
  stats.textContent = `Results: ${rows.length}`;
  if(!rows.length){ out.className = "empty"; out.innerHTML = "No matches."; return; }
  out.className = "";
  out.innerHTML = rows.map(r => `<div class="row">${esc(r)}</div>`).join("");
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(run, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def create_finder(roots: list[str], *, unit: str | None = None, min_match: int = MIN_MATCH_COUNT,
                  case_sensitive: bool = False, strict: bool = False) -> SentenceFinder:
    finder = SentenceFinder(min_match_count=min_match, case_sensitive=case_sensitive, strict_tokens=strict)
    return finder.initialize(load_sentences(roots, unit=unit))

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of SentenceFinder")
    ap.add_argument("--roots", nargs="+", required=True)
    ap.add_argument("--unit", choices=["line", "paragraph"])
    ap.add_argument("--min-match", type=int, default=MIN_MATCH_COUNT)
    ap.add_argument("--case-sensitive", action="store_true")
    ap.add_argument("--strict", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    global _finder
    try:
        _finder = create_finder(args.roots, unit=args.unit, min_match=args.min_match,
                                case_sensitive=args.case_sensitive, strict=args.strict)
    except (ValueError, FinderError) as exc:
        ap.error(str(exc))
    log.info("serving %d sentences on %s:%d", len(_finder), args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _finder = None
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
