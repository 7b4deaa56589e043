from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify
from cutter.engine import Engine
from cutter.composer import year_code
from cutter.errors import (
    CutterError,
    InvalidYear,
    NoEntriesForLetter,
    NotClassifiable,
    TableUnavailable,
)
from cutter import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def _status_for(exc: CutterError) -> int:
    if isinstance(exc, TableUnavailable):
        return 503
    if isinstance(exc, NoEntriesForLetter):
        return 404
    if isinstance(exc, NotClassifiable):
        return 422
    return 400


@app.errorhandler(CutterError)
def _cutter_error(exc: CutterError):
    body = {"error": exc.message, "kind": type(exc).__name__}
    if isinstance(exc, TableUnavailable) and exc.detail:
        body["detail"] = exc.detail
    return jsonify(body), _status_for(exc)


def _year_arg(name: str = "year") -> int | None:
    raw = request.args.get(name, "", type=str).strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidYear(raw) from None


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": _engine is not None})


@app.get("/api/cutter")
def api_cutter():
    surname = request.args.get("surname", "", type=str)
    res = _engine.lookup(surname)  # type: ignore
    return jsonify(res.to_dict())


@app.get("/api/literature")
def api_literature():
    work_type = request.args.get("work_type", "", type=str)
    res = _engine.compose(  # type: ignore
        work_type,
        title=request.args.get("title", "", type=str),
        editor=request.args.get("editor", "", type=str),
        year=_year_arg(),
    )
    return jsonify(res.to_dict())


@app.get("/api/call-number")
def api_call_number():
    res = _engine.generate(  # type: ignore
        request.args.get("item_type", "standard", type=str),
        request.args.get("author", "", type=str),
        edition=request.args.get("edition", None, type=int),
        work_type=request.args.get("work_type", None, type=str),
        title=request.args.get("title", "", type=str),
        editor=request.args.get("editor", "", type=str),
        year=_year_arg(),
    )
    return jsonify(res.to_dict())


@app.get("/api/year-code")
def api_year_code():
    year = _year_arg()
    if year is None:
        raise InvalidYear("")
    return jsonify({"year": year, "code": year_code(year)})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the JSON API on top of Engine")
    ap.add_argument("--store", default=CFG.DEFAULT_STORE_DSN,
                    help='Table store DSN: "json:///dir", "sqlite:///file" or "memory://"')
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    return serve(args.store, host=args.host, port=args.port, verbose=args.verbose)


def serve(dsn: str, *, host: str = "127.0.0.1", port: int = 8000, verbose: bool = False) -> int:
    if verbose:
        logging.basicConfig(level=logging.INFO)

    global _engine
    _engine = Engine(dsn=dsn)
    try:
        app.run(host=host, port=port, debug=verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
