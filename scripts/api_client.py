"""Lightweight REST client for the pystandings API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pystandings REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("standings", type=Path, nargs="?", help="Standings CSV to upload before querying")
    parser.add_argument("--reload", action="store_true", help="Ask the server to reload its configured source")
    parser.add_argument("--sort", default="rank", help="Column to sort by")
    parser.add_argument("--descending", action="store_true", help="Sort in descending order")
    parser.add_argument("--search", default="", help="Name filter")
    parser.add_argument("--summary", action="store_true", help="Print histogram and totals")
    parser.add_argument("--compare", nargs=2, metavar=("PLAYER_A", "PLAYER_B"), help="Compare two players")
    parser.add_argument("--export-path", type=Path, help="Download the current view as CSV")
    args = parser.parse_args()

    view_params = {
        "column": args.sort,
        "ascending": str(not args.descending).lower(),
        "query": args.search,
    }

    with httpx.Client(base_url=args.base_url) as client:
        if args.standings is not None:
            files = {"file": (args.standings.name, args.standings.read_bytes(), "text/csv")}
            resp = client.post("/standings", files=files)
            resp.raise_for_status()
            print("Upload:", json.dumps(resp.json(), indent=2))
        elif args.reload:
            resp = client.post("/standings/reload")
            if resp.status_code == 502:
                raise SystemExit(f"reload failed: {resp.json()['detail']}")
            resp.raise_for_status()
            print("Reload:", json.dumps(resp.json(), indent=2))

        resp = client.get("/standings", params=view_params)
        resp.raise_for_status()
        payload = resp.json()
        print(f"Showing {len(payload['records'])} of {payload['total_records']} players")
        for record in payload["records"]:
            print(f"  #{record['rank']} {record['name']} win_rate={record['win_rate']}")

        if args.summary:
            for path in ("/standings/histogram", "/standings/totals"):
                resp = client.get(path)
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))

        if args.compare:
            resp = client.get("/standings/compare", params={"a": args.compare[0], "b": args.compare[1]})
            if resp.status_code == 404:
                raise SystemExit(f"comparison failed: {resp.json()['detail']}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))

        if args.export_path:
            resp = client.get("/standings/export.csv", params=view_params)
            resp.raise_for_status()
            args.export_path.write_text(resp.text, encoding="utf-8")
            print(f"CSV export saved to {args.export_path}")


if __name__ == "__main__":
    main()
