from __future__ import annotations
import argparse, json, logging, sys
from cutter.engine import Engine
from cutter.errors import CutterError
from cutter.models import ItemType, WorkType
from cutter.DB.sqlite_store import SQLiteStore
from cutter import config as CFG


def _print_result(res, as_json: bool) -> None:
    if as_json:
        print(json.dumps(res.to_dict(), ensure_ascii=False, indent=2))
        return
    print(f"Cutter: {res.code}")
    for step in res.steps:
        print(f"  - {step}")
    matches = res.resolution.nearby_matches
    if matches:
        print("Entry                                Cutter   ")
        letter = res.resolution.first_letter
        for m in matches:
            mark = "<- SELECTED" if m.name == res.resolution.selected_entry.name else ""
            print(f"{m.name:<36} {letter + m.cutter:<8} {mark}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Cutter number CLI (Engine-backed)")
    p.add_argument("--store", default=CFG.DEFAULT_STORE_DSN,
                   help='Table store DSN: "json:///dir", "sqlite:///file" or "memory://"')
    p.add_argument("--surname", "--author", dest="author", default=None, help="Author surname (or title)")
    p.add_argument("--item-type", choices=[t.value for t in ItemType], default=ItemType.STANDARD.value)
    p.add_argument("--work-type", choices=[t.value for t in WorkType], default=None)
    p.add_argument("--title", default=None)
    p.add_argument("--editor", default=None)
    p.add_argument("--year", type=int, default=None)
    p.add_argument("--edition", type=int, default=None)
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--repl", action="store_true", help="Interactive loop (standard items)")
    p.add_argument("--serve", action="store_true", help="Run the JSON API instead")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--import-json", default=None, metavar="DIR",
                   help="Import cutter_table_*.json from DIR into the SQLite file given by --into")
    p.add_argument("--into", default=None, metavar="PATH")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    if args.import_json:
        if not args.into:
            p.error("--import-json requires --into")
        store = SQLiteStore.build_from_json_dir(args.import_json, args.into)
        print(f"imported {len(store.partitions())} partitions into {args.into}")
        store.close()
        return 0

    if args.serve:
        from .web import serve
        return serve(args.store, port=args.port, verbose=args.verbose)

    eng = Engine(dsn=args.store)
    try:
        def run_query(author: str) -> int:
            try:
                res = eng.generate(
                    args.item_type, author,
                    edition=args.edition, work_type=args.work_type,
                    title=args.title, editor=args.editor, year=args.year,
                )
            except CutterError as exc:
                print(f"error: {exc.message}", file=sys.stderr)
                return 1
            _print_result(res, args.json)
            return 0

        rc = 0
        if args.author:
            rc = run_query(args.author)

        if args.repl:
            print("Type a surname (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return rc
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
