"""Populate a running repairdesk API with sample statuses, symptoms, devices and invoices.

Usage: python scripts/seed_sample_data.py --base-url http://localhost:8080
"""
import argparse
import asyncio
from repairdesk.client import RepairDeskAPIError, RepairDeskClient

STATUSES = ["received", "diagnosing", "waiting for parts", "repaired", "delivered"]
SYMPTOMS = ["no power", "cracked screen", "battery drain", "no signal"]


async def _create(api: RepairDeskClient, entities: str, body: dict):
    try:
        row = await api.create(entities, body)
        print(f"Created {entities} {row['id']}: {body}")
        return row
    except RepairDeskAPIError as e:
        # already seeded rows collide on their domain ids
        print(f"Skipped {entities} {body}: {e.error}")
        return None


async def seed(base_url: str) -> None:
    api = RepairDeskClient(base_url=base_url)
    statuses = [await _create(api, "statuses", {"Status_ID": i, "Status_name": name})
                for i, name in enumerate(STATUSES, start=1)]
    symptoms = [await _create(api, "symptoms", {"Symptom_ID": i, "Symptom_name": name})
                for i, name in enumerate(SYMPTOMS, start=1)]

    for n in range(1, 4):
        device = await _create(api, "devices", {"Device_ID": 1000 + n, "Customer_ID": 500 + n})
        if device is None:
            continue
        status = statuses[n % len(statuses)]
        symptom = symptoms[n % len(symptoms)]
        await _create(api, "repair-invoices", {
            "RepairInvoice_ID": 9000 + n,
            "Device_ID": device["id"],
            "Status_ID": status["id"] if status else None,
            "Symptom_ID": symptom["id"] if symptom else None,
        })


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample repair data")
    parser.add_argument("--base-url", default=RepairDeskClient.base_url)
    args = parser.parse_args()
    asyncio.run(seed(args.base_url))


if __name__ == "__main__":
    main()
