#!/usr/bin/env python3
"""Engine RPC smoke checks: run read-only methods and report pass/fail.

Usage:
  python scripts/rpc_smoke.py
  python scripts/rpc_smoke.py --host 10.0.0.5 --port 8080
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from pydantic import ValidationError

from viabtc_rpc.config.loader import load_config
from viabtc_rpc.config.schema import EngineConfig
from viabtc_rpc.rpc.client import RpcClient
from viabtc_rpc.rpc.methods import Method
from viabtc_rpc.utils.exceptions import ApplicationError

READ_ONLY_CHECKS: list[tuple[Method, Any]] = [
    (Method.ASSET_LIST, None),
    (Method.MARKET_LIST, None),
    (Method.MARKET_SUMMARY, None),
]


def run_checks(client: RpcClient, market: str | None) -> list[tuple[str, bool, str]]:
    checks = list(READ_ONLY_CHECKS)
    if market:
        checks += [
            (Method.MARKET_LAST, [market]),
            (Method.MARKET_STATUS_TODAY, [market]),
            (Method.ORDER_DEPTH, [market, 5, "0"]),
        ]
    report: list[tuple[str, bool, str]] = []
    for method, params in checks:
        outcome = client.try_call(method, params)
        if outcome.ok:
            report.append((method.value, True, "ok"))
        elif isinstance(outcome.error, ApplicationError):
            # The engine answered; the call path works even if the arguments are rejected.
            report.append((method.value, True, f"application error: {outcome.error.message}"))
        else:
            report.append((method.value, False, str(outcome.error)))
    return report


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--market", default=None, help="Market for per-market checks, e.g. BTCUSDT")
    args = parser.parse_args()

    engine = load_config().engine
    updates: dict[str, Any] = {}
    if args.host:
        updates["host"] = args.host
    if args.port is not None:
        updates["port"] = args.port
    try:
        engine = EngineConfig.model_validate({**engine.model_dump(), **updates})
    except ValidationError as exc:
        parser.error(f"invalid engine override: {exc}")

    with RpcClient.from_config(engine) as client:
        report = run_checks(client, args.market)

    failed = 0
    for method, ok, detail in report:
        print(f"{'PASS' if ok else 'FAIL'}  {method:<24} {detail}")
        failed += 0 if ok else 1
    print(f"\n{len(report) - failed}/{len(report)} checks passed against {engine.base_url}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
