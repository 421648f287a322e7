import argparse
import os
import sys

from dotenv import load_dotenv

from hstspreload.requestors import HttpxRequestor
from hstspreload.response import Mode, check_response
from hstspreload.util import format_issues

load_dotenv()


def run_checks(urls, mode: Mode, requestor: HttpxRequestor, timeout=10, verify=True):
    """Fetch every URL and print its report. Return True if all of them passed."""
    all_passed = True
    for url in urls:
        resp, error = requestor.run(url, timeout=timeout, verify=verify)
        if error is not None:
            print(f"{url}: request failed: {error!r}")
            all_passed = False
            continue
        header, issues = check_response(resp, mode)
        print(f"{url} ({mode})")
        print(format_issues(header, issues))
        all_passed = all_passed and issues.passed
    return all_passed


def main(argv=None, requestor=None):
    parser = argparse.ArgumentParser(
        description="Check whether the HSTS header of a site satisfies the preload list rules."
    )
    parser.add_argument("urls", nargs="+", help="URLs to check (https://...)")
    parser.add_argument(
        "--removable",
        action="store_true",
        help="Check the removal rules instead of the submission rules",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=float(os.getenv("HSTS_TIMEOUT", "10")),
        help="Request timeout in seconds (env: HSTS_TIMEOUT)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        default=os.getenv("HSTS_VERIFY", "true").lower() in ("0", "false", "no"),
        help="Do not verify TLS certificates (env: HSTS_VERIFY=false)",
    )
    args = parser.parse_args(argv)

    mode = Mode.REMOVABLE if args.removable else Mode.PRELOADABLE
    if requestor is None:
        requestor = HttpxRequestor()
    try:
        passed = run_checks(
            args.urls, mode, requestor, timeout=args.timeout, verify=not args.insecure
        )
    finally:
        requestor.close()
    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
