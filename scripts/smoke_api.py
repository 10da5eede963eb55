#!/usr/bin/env python3
"""Smoke script for the wizard API against a running server."""

import sys

import httpx


BASE_URL = "http://127.0.0.1:8001"


def run() -> bool:
    print("=" * 60)
    print("Smoke testing wizard API at", BASE_URL)
    print("=" * 60)

    try:
        with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
            session = client.post("/api/v1/wizard/sessions")
            session.raise_for_status()
            session_id = session.json()["session_id"]
            print(f"✅ Session created: {session_id}")

            base = f"/api/v1/wizard/sessions/{session_id}"
            for option_id in ("ec2", "rds", "light-sail", "amazon-neptune"):
                response = client.post(f"{base}/options/{option_id}/toggle", json={"parent_id": "start-stop-resources"})
                response.raise_for_status()
            data = response.json()
            print(f"✅ Selected actions: {data['selected_actions']}")

            response = client.post(f"{base}/options/ec2/toggle", json={"parent_id": "start-stop-resources"})
            response.raise_for_status()
            data = response.json()
            print(f"✅ After deselecting ec2: {data['action_statuses']['start-stop-resources']}")

            response = client.post(f"{base}/next")
            response.raise_for_status()
            print(f"✅ Moved to step: {response.json()['current_step']}")
    except httpx.ConnectError:
        print("❌ Could not connect to server")
        print(f"   Please start it with: uvicorn account_setup.main:app --reload --port 8001")
        return False
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False

    return True


if __name__ == "__main__":
    sys.exit(0 if run() else 1)
