#!/usr/bin/env python3
"""
Script to verify that the webhook server is reachable and storing readings.
Run this against a live server after starting api_server.py.

Usage:
    python check_webhook_connection.py                           # Checks localhost:8080
    WEBHOOK_SERVER=192.168.1.100:8080 python check_webhook_connection.py
"""

import os
import sys
import requests
from datetime import date

WEBHOOK_SERVER = os.getenv("WEBHOOK_SERVER", "localhost:8080")
BASE_URL = f"http://{WEBHOOK_SERVER}"
WEBHOOK_ENDPOINT = f"{BASE_URL}/webhook"
READINGS_ENDPOINT = f"{BASE_URL}/readings"


def check_health():
    """Check that the server answers its health endpoint"""
    print(f"\n1. Checking connectivity to {BASE_URL}...")
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=5)
        if response.status_code == 200:
            print(f"   ✓ Server is reachable (backend: {response.json().get('backend')})")
            return True
        print(f"   ✗ Server returned status {response.status_code}")
        return False
    except requests.exceptions.ConnectionError as e:
        print(f"   ✗ Connection failed: {e}")
        return False
    except requests.exceptions.Timeout:
        print("   ✗ Request timed out (server not responding)")
        return False


def check_sample_reading():
    """Post a sample reading to the webhook"""
    print("\n2. Sending sample reading...")
    payload = {
        "testDate": date.today().isoformat(),
        "chlorine": 1.5,
        "ph": 7.4,
        "acidDemand": 2.0,
        "totalAlkalinity": 90.0,
    }
    try:
        response = requests.post(WEBHOOK_ENDPOINT, json=payload, timeout=10)
    except requests.exceptions.RequestException as e:
        print(f"   ✗ Request failed: {e}")
        return False

    if response.status_code == 200:
        print(f"   ✓ Reading stored: {response.json()}")
        return True
    print(f"   ✗ Server returned status {response.status_code}")
    print(f"   Response: {response.text}")
    return False


def check_readings():
    """Fetch the stored readings, if the backend supports listing"""
    print("\n3. Fetching readings...")
    try:
        response = requests.get(READINGS_ENDPOINT, timeout=10)
    except requests.exceptions.RequestException as e:
        print(f"   ✗ Request failed: {e}")
        return False

    if response.status_code == 404:
        print("   - Listing not available (append log backend)")
        return True
    if response.status_code == 200:
        print(f"   ✓ {len(response.json()['readings'])} readings stored")
        return True
    print(f"   ✗ Server returned status {response.status_code}")
    return False


def main():
    print("=" * 60)
    print("Pool Readings Webhook Connection Check")
    print("=" * 60)
    print(f"Server: {WEBHOOK_SERVER}")

    if not check_health():
        print("\n✗ Cannot reach webhook server. Troubleshooting steps:")
        print("  1. Verify api_server.py is running on the target machine")
        print("  2. Check READINGS_DB / STORAGE_BACKEND in the server's environment")
        print("  3. Verify firewall settings allow connections on the API port")
        return False

    ok = check_sample_reading() and check_readings()

    print("\n" + "=" * 60)
    print("✓ All checks passed!" if ok else "✗ Some checks failed. See the errors above.")
    print("=" * 60 + "\n")
    return ok


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
