import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import requests
import concurrent.futures
import argparse

BASE = os.environ.get("BBP_BASE", "http://127.0.0.1:8000")

def checkout_task(i, slug, qty, origin):
    headers = {"Content-Type": "application/json"}
    if origin:
        headers["Origin"] = origin
    try:
        r = requests.post(f"{BASE}/api/create-checkout-session", json={"slug": slug, "quantity": qty}, headers=headers, timeout=20)
        return (i, r.status_code, r.text)
    except requests.RequestException as e:
        return (i, "ERR", str(e))

def run_checkout_concurrent(workers, slug, qty, origin):
    print(f"Running checkout smoke test: workers={workers}, slug={slug}, qty={qty}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(checkout_task, i, slug, qty, origin) for i in range(workers)]
        results = [f.result() for f in futures]
    for r in results:
        print(r)
    ok = [r for r in results if r[1] == 200]
    print(f"{len(ok)}/{len(results)} sessions created")

def run_bad_requests(origin):
    print("Running rejection checks")
    cases = [
        {"slug": "does-not-exist", "quantity": 1},
        {"slug": "", "quantity": 1},
        {"slug": "tree-fiddy", "quantity": 11},
        {"slug": "tree-fiddy", "quantity": "2"},
    ]
    for payload in cases:
        r = requests.post(f"{BASE}/api/create-checkout-session", json=payload, headers={"Origin": origin} if origin else {}, timeout=20)
        print(payload, "->", r.status_code, r.text)

if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--workers", type=int, default=5)
    p.add_argument("--slug", default="tree-fiddy")
    p.add_argument("--qty", type=int, default=1)
    p.add_argument("--origin", default="http://localhost:3000")
    p.add_argument("--mode", choices=["checkout", "reject", "both"], default="both")
    args = p.parse_args()
    if args.mode in ("checkout", "both"):
        run_checkout_concurrent(args.workers, args.slug, args.qty, args.origin)
    if args.mode in ("reject", "both"):
        run_bad_requests(args.origin)
