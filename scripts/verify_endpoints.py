from __future__ import annotations

import json
import os
import sys
import uuid

from fastapi.testclient import TestClient

# Ensure skillgap/ is importable when running as a script.
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from skillgap.config import settings  # noqa: E402
from skillgap.main import app  # noqa: E402


def main() -> int:
    client = TestClient(app)
    prefix = settings.api_prefix

    # 1) register + login a throwaway user
    email = f"smoke-{uuid.uuid4().hex[:8]}@example.com"
    creds = {"email": email, "password": "SmokePass123", "name": "Smoke Test"}
    r = client.post(f"{prefix}/auth/register", json=creds)
    print(f"POST {prefix}/auth/register ->", r.status_code)
    if r.status_code != 201:
        print(json.dumps(r.json(), indent=2))
        return 1
    r = client.post(f"{prefix}/auth/login", json={"email": email, "password": creds["password"]})
    print(f"POST {prefix}/auth/login ->", r.status_code)
    if r.status_code != 200:
        return 1
    headers = {"Authorization": f"Bearer {r.json()['access_token']}"}

    # 2) a couple of skills and a target job
    for skill in ({"name": "JavaScript", "level": 3}, {"name": "React", "level": 2}):
        r = client.post(f"{prefix}/skills", json=skill, headers=headers)
        print(f"POST {prefix}/skills {skill['name']} ->", r.status_code)
    r = client.post(f"{prefix}/skills/target-job", json={"title": "Frontend Developer"}, headers=headers)
    print(f"POST {prefix}/skills/target-job ->", r.status_code)

    # 3) gap analysis
    r = client.get(f"{prefix}/gaps/analyze", headers=headers)
    print(f"\nGET {prefix}/gaps/analyze ->", r.status_code)
    print(json.dumps(r.json(), indent=2, ensure_ascii=False))
    return 0 if r.status_code == 200 else 1


if __name__ == "__main__":
    raise SystemExit(main())
