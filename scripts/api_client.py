"""Lightweight REST client for the fflclient API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Query a running fflclient REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("season", type=int, help="Season to query")
    parser.add_argument("--player", type=int, help="Fetch one player's season instead of the league")
    parser.add_argument("--week", type=int, help="Scoring period for team rosters")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=60.0) as client:
        if args.player is not None:
            resp = client.get(f"/seasons/{args.season}/players/{args.player}")
            if resp.status_code == 404:
                raise SystemExit(f"no data for player {args.player} in {args.season}")
        elif args.week is not None:
            resp = client.get(f"/seasons/{args.season}/teams", params={"scoring_period_id": args.week})
        else:
            resp = client.get(f"/seasons/{args.season}/league")
        resp.raise_for_status()
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
