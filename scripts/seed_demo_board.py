"""Seed a demo organization with legacy proposals and migrate it onto the canonical board.

Creates (idempotent per owner email):
  1. Organization "Demo Contracting LLC" owned by --email
  2. Proposals covering legacy statuses and phases
  3. Runs the workflow migration and prints where each proposal landed

Requires a running GovFlow server:
    GOVFLOW_LOCAL_MODE=1 uvicorn govflow.main:app --reload --port 8081

Usage:
    python scripts/seed_demo_board.py [--api-url http://localhost:8081/api/v1] [--email demo@example.com]
"""

import argparse
import sys

import httpx

from govflow.api.middleware.auth import issue_token

DEMO_PROPOSALS = [
    {"proposal_name": "Navy Logistics Modernization", "status": "evaluating", "current_phase": "phase4"},
    {"proposal_name": "VA Claims Portal", "status": "draft", "current_phase": "phase6"},
    {"proposal_name": "DHS Cyber Range", "status": "won", "current_phase": "phase3"},
    {"proposal_name": "USDA Data Lake", "status": "client_rejected", "current_phase": "phase7"},
    {"proposal_name": "GSA Schedule Refresh", "status": None, "current_phase": "phase2", "proposal_type": "GSA"},
    {"proposal_name": "Army Training SBIR", "status": None, "current_phase": None, "proposal_type": "SBIR"},
]


def main(api_url: str, email: str) -> None:
    token = issue_token(sub=email, email=email)
    client = httpx.Client(
        base_url=api_url,
        timeout=15.0,
        headers={"Authorization": f"Bearer {token}"},
    )

    print(f"GovFlow API: {api_url}")
    print()

    # ── 1. Organization ─────────────────────────────────────────────────────
    print("1. Ensuring demo organization exists...")
    r = client.get("/organizations")
    orgs = r.json() if r.status_code == 200 else []
    if orgs:
        org_id = orgs[0]["org_id"]
        print(f"   -> Already exists: {org_id}")
    else:
        r = client.post("/organizations", json={"organization_name": "Demo Contracting LLC"})
        if r.status_code != 201:
            print(f"   ERROR: {r.status_code} {r.text}", file=sys.stderr)
            sys.exit(1)
        org_id = r.json()["org_id"]
        print(f"   -> Created: {org_id}")

    # ── 2. Proposals ────────────────────────────────────────────────────────
    print("2. Seeding legacy proposals...")
    existing = {p["proposal_name"] for p in client.get("/proposals").json()}
    for proposal in DEMO_PROPOSALS:
        if proposal["proposal_name"] in existing:
            continue
        r = client.post("/proposals", json={"organization_id": org_id, **proposal})
        if r.status_code != 201:
            print(f"   ERROR: {r.status_code} {r.text}", file=sys.stderr)
            sys.exit(1)
        print(f"   -> {proposal['proposal_name']}")

    # ── 3. Migration ────────────────────────────────────────────────────────
    print("3. Running workflow migration...")
    r = client.post("/workflow/migrate", json={"organization_id": org_id})
    if r.status_code != 200:
        print(f"   ERROR: {r.status_code} {r.text}", file=sys.stderr)
        sys.exit(1)
    results = r.json()["results"]
    print(f"   -> configs updated: {results['kanban_configs_updated']}")
    print(f"   -> proposals migrated: {results['proposals_migrated']}")
    for error in results["errors"]:
        print(f"   !! {error}")

    print()
    for proposal in client.get("/proposals").json():
        print(f"   {proposal['proposal_name']:<32} -> {proposal['board_stage_id']}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed a demo GovFlow board")
    parser.add_argument("--api-url", default="http://localhost:8081/api/v1")
    parser.add_argument("--email", default="demo@example.com")
    args = parser.parse_args()
    main(args.api_url, args.email)
