"""
Find the fake coin from the command line and print the weighings it took.

Usage:
    python coinscale/scripts/find_fake.py                       # mock scale, random fake
    python coinscale/scripts/find_fake.py --fake 7 --coins 27
    python coinscale/scripts/find_fake.py --http http://127.0.0.1:9100
"""
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).parents[2]
sys.path.insert(0, str(ROOT))

from coinscale.adapters.scale.http_scale import HttpScale
from coinscale.adapters.scale.mock_scale import MockScale
from coinscale.locator.contracts import LocateRequest
from coinscale.locator.session import LocateSession
from coinscale.services.status_store import StatusStore


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Locate the one fake coin with a balance scale")
    parser.add_argument("--coins", type=int, default=9, help="number of coins (default 9)")
    parser.add_argument("--fake", type=int, default=None, help="fake coin for the mock scale")
    parser.add_argument("--http", metavar="URL", default=None, help="use the scale server at URL")
    parser.add_argument("--no-select", action="store_true", help="do not report the answer to the scale")
    parser.add_argument("-v", "--verbose", action="store_true", help="print the session log")
    args = parser.parse_args(argv)

    status = StatusStore()
    if args.http:
        scale = HttpScale(status, base_url=args.http)
    else:
        scale = MockScale(status, fake=args.fake, coins=args.coins)

    try:
        rr = LocateSession(scale, status).run(LocateRequest(coins=list(range(args.coins)), select=not args.no_select))
    finally:
        if args.http:
            scale.close()

    if args.verbose:
        for line in status.logs:
            print(f"  | {line}")

    if not rr.ok:
        print(f"[ERROR] {rr.error_code}: {rr.error}")
        return 1

    print(f"The fake coin is: {rr.coin}")
    if rr.message:
        print(rr.message)
    print(f"Took {len(rr.weighings)} weighings:")
    for w in rr.weighings:
        print(f"  {w.describe()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
