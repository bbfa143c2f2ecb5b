#!/usr/bin/env python3
"""
Post-Deployment Health Check Script

Checks a running YelpCamp deployment and reports whether its pages,
its map feed and its database connection respond.

Usage:
    python scripts/health_check.py --url <DEPLOYMENT_URL> [--retry 3] [--retry-delay 10]

Checks Performed:
    1. Home page (/) returns 200 OK
    2. Campground list (/campgrounds) returns 200 OK
    3. Health endpoint (/api/health) returns 200 OK and the database is connected
    4. Map feed (/api/campgrounds) returns a GeoJSON FeatureCollection

Exit Codes:
    0: All health checks passed
    1: One or more health checks failed
"""

import argparse
import sys
import time
import requests
from typing import Dict, Tuple


def check_endpoint(url: str, endpoint: str, timeout: int = 10, expected_status: int = 200) -> Tuple[bool, str]:
    """
    Checks if an endpoint returns the expected HTTP status code.

    Returns:
        Tuple[bool, str]: (success, message)
    """
    full_url = f"{url.rstrip('/')}{endpoint}"

    try:
        response = requests.get(full_url, timeout=timeout, allow_redirects=True)

        if response.status_code == expected_status:
            return True, f"✓ {endpoint} returned {response.status_code}"
        else:
            return False, f"✗ {endpoint} returned {response.status_code} (expected {expected_status})"

    except requests.exceptions.Timeout:
        return False, f"✗ {endpoint} timed out after {timeout} seconds"
    except requests.exceptions.RequestException as e:
        return False, f"✗ {endpoint} request failed: {str(e)}"


def check_health_endpoint(url: str, timeout: int = 10) -> Tuple[bool, str]:
    """
    Checks the /api/health endpoint and verifies database connectivity.
    """
    full_url = f"{url.rstrip('/')}/api/health"

    try:
        response = requests.get(full_url, timeout=timeout)
        data = response.json()
    except requests.exceptions.RequestException as e:
        return False, f"✗ /api/health request failed: {str(e)}"
    except ValueError:
        return False, "✗ /api/health returned invalid JSON"

    db_status = data.get('database', {}).get('status', 'unknown')
    if response.status_code == 200 and db_status == 'connected':
        return True, "✓ /api/health returned 200, database connected"
    return False, f"✗ /api/health returned {response.status_code}, database status: {db_status}"


def check_map_feed(url: str, timeout: int = 10) -> Tuple[bool, str]:
    """
    Checks that /api/campgrounds serves a GeoJSON FeatureCollection.
    """
    full_url = f"{url.rstrip('/')}/api/campgrounds"

    try:
        response = requests.get(full_url, timeout=timeout)
        data = response.json()
    except requests.exceptions.RequestException as e:
        return False, f"✗ /api/campgrounds request failed: {str(e)}"
    except ValueError:
        return False, "✗ /api/campgrounds returned invalid JSON"

    if response.status_code != 200 or data.get('type') != 'FeatureCollection':
        return False, f"✗ /api/campgrounds returned {response.status_code} without a FeatureCollection"
    return True, f"✓ /api/campgrounds returned {len(data.get('features', []))} feature(s)"


def run_health_checks(url: str) -> Dict[str, Tuple[bool, str]]:
    """
    Runs all health checks and returns results keyed by check name.
    """
    print(f"\n{'='*60}")
    print("YelpCamp Health Checks")
    print(f"{'='*60}\n")
    print(f"Target URL: {url}\n")

    results = {
        "home": check_endpoint(url, "/", timeout=15),
        "campgrounds": check_endpoint(url, "/campgrounds", timeout=15),
        "api_health": check_health_endpoint(url, timeout=15),
        "map_feed": check_map_feed(url, timeout=15),
    }
    for success, message in results.values():
        print(f"  {message}")

    return results


def print_summary(results: Dict[str, Tuple[bool, str]]) -> bool:
    """
    Prints a summary of health check results.

    Returns:
        bool: True if all checks passed, False otherwise
    """
    passed = sum(1 for success, _ in results.values() if success)
    total = len(results)

    print(f"\nTotal: {passed}/{total} checks passed\n")

    if passed == total:
        print("✓ All health checks passed.\n")
        return True
    print(f"✗ {total - passed} health check(s) failed.\n")
    return False


def main():
    parser = argparse.ArgumentParser(description="Run health checks against a YelpCamp deployment")
    parser.add_argument("--url", required=True, help="Deployment URL to check")
    parser.add_argument("--retry", type=int, default=3, help="Number of attempts (default: 3)")
    parser.add_argument("--retry-delay", type=int, default=10, help="Seconds between attempts (default: 10)")

    args = parser.parse_args()

    for attempt in range(1, args.retry + 1):
        if attempt > 1:
            print(f"Retry attempt {attempt}/{args.retry}")
            time.sleep(args.retry_delay)

        if print_summary(run_health_checks(args.url)):
            sys.exit(0)

    print(f"✗ HEALTH CHECKS FAILED AFTER {args.retry} ATTEMPTS", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
