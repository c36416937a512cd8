from __future__ import annotations
import argparse
import re
from flask import Flask, request, jsonify, Response
from tagcloud import TagCountError, build_cloud, make_separators, render
from tagcloud.config import DEFAULT_TAG_COUNT
from tagcloud.render import RENDERERS
from . import configure_logging

app = Flask(__name__)

_INT = re.compile(r"-?\d+")


def _bad_request(msg: str):
    return jsonify({"error": msg}), 400


def _tag_count(raw) -> int | None:
    """JSON int (not bool) or a digit string from a form post; None for anything else."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INT.fullmatch(raw.strip()):
        return int(raw.strip())
    return None

# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": True})

@app.post("/api/cloud")
def api_cloud():
    # each request runs its own pipeline; nothing is shared between requests
    data = request.get_json(silent=True) or request.form.to_dict()
    if not isinstance(data, dict):
        return _bad_request("expected a JSON object")
    text = data.get("text", "")
    if not isinstance(text, str) or not text:
        return _bad_request("missing 'text'")
    n = _tag_count(data.get("n", DEFAULT_TAG_COUNT))
    if n is None:
        return _bad_request("'n' must be an integer")
    fmt = request.args.get("format", "json", type=str).lower()
    if fmt not in RENDERERS:
        return _bad_request(f"unsupported format {fmt!r}")

    seps = data.get("separators")
    separators = make_separators(seps) if isinstance(seps, str) and seps else None
    try:
        cloud = build_cloud(text, n, separators=separators, source=data.get("source") or "pasted text")
    except TagCountError as e:
        return _bad_request(str(e))

    if fmt == "json":
        return jsonify(cloud.to_dict())
    mimetype = "text/html" if fmt == "html" else "text/plain"
    return Response(render(cloud, fmt), mimetype=mimetype)
# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Tag Cloud • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
textarea{
  width:100%; min-height:180px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:15px; resize:vertical;
}
textarea:focus{ border-color:var(--accent) }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap; }
.badge{
  display:inline-flex; align-items:center; gap:8px;
  padding:10px 12px; border:1px solid var(--border); border-radius:12px;
  background:#0b1117; color:var(--muted);
}
.badge input{
  width:64px; background:transparent; border:none; color:var(--ink); font-size:15px;
  outline:none; text-align:center;
}
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.err{
  display:none; margin-top:12px; padding:10px 12px; border-radius:10px;
  background:rgba(255,93,93,.12); border:1px solid rgba(255,93,93,.35); color:#ffb0b0;
}
.cloud{
  margin-top:16px; padding:18px; border-radius:12px; border:1px solid var(--border);
  line-height:1.6; text-align:center;
}
.cloud span{ margin:0 .35em; cursor:default; white-space:nowrap }
.empty{ color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Tag Cloud</h1>
      <textarea id="text" placeholder="Paste a document…" autofocus></textarea>
      <div class="controls">
        <div class="badge">Words <input id="n" type="number" min="1" value="25" /></div>
        <button id="go" class="btn">Generate</button>
        <button id="dl" class="btn">Download HTML</button>
      </div>
      <div id="stats" class="meta">Ready.</div>
      <div id="err" class="err"></div>
      <div id="out" class="cloud empty">The cloud appears here.</div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const text = $("#text"), n = $("#n"), out = $("#out"), err = $("#err"), stats = $("#stats");

function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }

async function post(format){
  const body = JSON.stringify({text: text.value, n: parseInt(n.value || "25", 10)});
  const resp = await fetch(`/api/cloud?format=${format}`, {method:"POST", headers:{"Content-Type":"application/json"}, body});
  if(!resp.ok){
    const data = await resp.json().catch(() => ({}));
    throw new Error(data.error || `HTTP ${resp.status}`);
  }
  return resp;
}

async function generate(){
  err.style.display = "none";
  try{
    const data = await (await post("json")).json();
    stats.textContent = `${data.n} of ${data.distinct_words} distinct words • ${data.total_words} total • counts ${data.min_count}–${data.max_count}`;
    out.className = "cloud";
    out.innerHTML = data.entries.map(e =>
      `<span style="font-size:${e.font_size}px" title="count: ${e.count}">${esc(e.word)}</span>`).join(" ");
  }catch(e){
    err.style.display = "block";
    err.textContent = `Error: ${e.message ?? e}`;
  }
}

async function download(){
  try{
    const blob = await (await post("html")).blob();
    const a = document.createElement("a");
    a.href = URL.createObjectURL(blob); a.download = "tagcloud.html"; a.click();
    URL.revokeObjectURL(a.href);
  }catch(e){
    err.style.display = "block";
    err.textContent = `Error: ${e.message ?? e}`;
  }
}

$("#go").addEventListener("click", generate);
$("#dl").addEventListener("click", download);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the tag cloud Flask UI")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    configure_logging(args.verbose)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
