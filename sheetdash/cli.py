#!/usr/bin/env python3
"""
Sheetdash CLI — run the API server or inspect a spreadsheet/CSV locally.

USAGE:
  python -m sheetdash.cli serve                         # Start API server
  python -m sheetdash.cli serve --port 8000 --reload

  python -m sheetdash.cli inspect sales.xlsx            # Shape + dashboard metrics
  python -m sheetdash.cli inspect orders.csv --json     # Full dashboard + analytics JSON
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from sheetdash.data.parser import parse
from sheetdash.data.schemas import FILE_SUFFIXES, classify_filename
from sheetdash.data.store import DatasetStore
from sheetdash.analytics.dashboard import analytics_view, dashboard_view
from sheetdash.errors import SheetdashError


def cmd_inspect(args) -> int:
    """Parse a local file and print what the dashboard would show."""
    path = Path(args.file)
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        return 1

    kind = classify_filename(path.name)
    if kind is None:
        print(f"Unsupported file type: {path.name} (expected {', '.join(FILE_SUFFIXES)})", file=sys.stderr)
        return 1

    try:
        table = parse(path.read_bytes(), kind)
    except SheetdashError as exc:
        print(f"{exc}", file=sys.stderr)
        return 1

    if table.is_empty:
        print(f"{path.name}: file is empty or could not be parsed", file=sys.stderr)
        return 1

    dataset = DatasetStore().create(
        name=path.name,
        uploaded_at=datetime.now(timezone.utc),
        row_count=len(table.rows),
        column_count=len(table.columns),
        columns=table.columns,
        rows=table.rows,
    )

    if args.json:
        payload = {"dashboard": dashboard_view(dataset), "analytics": analytics_view(dataset)}
        print(json.dumps(payload, indent=2, default=str))
        return 0

    metrics = dashboard_view(dataset)["metrics"]
    print("\n" + "=" * 60)
    print(f"  {dataset.name}")
    print("=" * 60)
    print(f"  Rows:            {dataset.row_count:,}")
    print(f"  Columns:         {dataset.column_count}  ({', '.join(dataset.columns[:8])}"
          f"{', ...' if dataset.column_count > 8 else ''})")
    print(f"  Total Sales:     ${metrics['totalSales']:,.2f}")
    print(f"  Order Count:     {metrics['orderCount']:,}")
    print(f"  Avg Order Value: ${metrics['avgOrderValue']:,.2f}")
    print(f"  Top Territory:   {metrics['topTerritory']}\n")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Sheetdash API on {args.host}:{args.port}...")
    uvicorn.run("sheetdash.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Sheetdash — spreadsheet and CSV dashboard backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address (default 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    # inspect subcommand
    inspect_parser = subparsers.add_parser("inspect", help="Parse a local file and print dashboard metrics")
    inspect_parser.add_argument("file", help="Path to a .xlsx, .xls or .csv file")
    inspect_parser.add_argument("--json", action="store_true", help="Print dashboard + analytics views as JSON")
    inspect_parser.set_defaults(func=cmd_inspect)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
