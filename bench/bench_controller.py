import argparse
import statistics
import time

from methodacl import MethodAccessController


def gen_policy(n: int) -> list:
    entries = []
    for i in range(n - 1):
        entries.append(
            {
                "id": f"grant_{i}",
                "roles": f"role_{i}",
                "classes": "Account",
                "methods": "get .*",
                "strategy": True,
            }
        )
    entries.append({"id": "deny_close", "roles": ".*", "classes": "Account", "methods": "close", "strategy": False})
    return entries


def run(size: int, iters: int, n_roles: int):
    controller = MethodAccessController(gen_policy(size))
    # one granted role plus unmatched ones, so every role is matched against the whole policy
    roles = [f"role_{size // 2}"] + [f"auditor_{i}" for i in range(n_roles - 1)]
    timings = []
    permitted = False
    for _ in range(iters):
        t0 = time.perf_counter()
        permitted = controller.permits(roles, "Account", "get balance")
        timings.append((time.perf_counter() - t0) * 1000.0)
    timings.sort()
    return {
        "p50": statistics.median(timings),
        "avg": statistics.fmean(timings),
        "p99": timings[min(len(timings) - 1, int(len(timings) * 0.99))],
        "permitted": permitted,
    }


def main():
    ap = argparse.ArgumentParser(
        description="Time MethodAccessController.permits() for a multi-role request on Account.'get balance'."
    )
    ap.add_argument("--sizes", type=int, nargs="+", default=[10, 50, 100, 500, 1000], help="policy entry counts")
    ap.add_argument("--roles", type=int, default=2, help="roles per request (one of them is granted)")
    ap.add_argument("--iters", type=int, default=200, help="permits() calls per policy size")
    args = ap.parse_args()
    print("policy_entries,roles,avg_ms,p50_ms,p99_ms,permitted")
    for s in args.sizes:
        r = run(s, args.iters, max(1, args.roles))
        print(f"{s},{max(1, args.roles)},{r['avg']:.4f},{r['p50']:.4f},{r['p99']:.4f},{r['permitted']}")


if __name__ == "__main__":
    main()
