# scripts/test/simulate_rental.py
"""Book a sample rental against a running backend: one vehicle, one customer, one rental."""

import argparse
import requests
import json
from datetime import date, timedelta

BACKEND_URL = "http://localhost:8080/api/v1"

VEHICLE_TEMPLATE = {
    "make": "Toyota",
    "model": "Corolla",
    "year": 2022,
    "color": "White",
    "vehicle_type": "SEDAN",
    "fuel_type": "PETROL",
    "transmission": "AUTOMATIC",
    "seating_capacity": 5,
    "daily_rate": "45.00",
    "mileage": 12000,
    "location": "Main depot",
}

CUSTOMER_TEMPLATE = {
    "first_name": "Sam",
    "last_name": "Rivera",
    "phone": "+1-555-0100",
}


def post(session, url, path, payload, api_key=None):
    headers = {"X-API-Key": api_key} if api_key else {}
    resp = session.post(f"{url}{path}", json=payload, headers=headers, timeout=5)
    print(f"POST {path} → {resp.status_code}")
    print(json.dumps(resp.json(), indent=2, default=str))
    resp.raise_for_status()
    return resp.json()


def main():
    p = argparse.ArgumentParser(description="Create a sample vehicle, customer and rental")
    p.add_argument("--url", default=BACKEND_URL)
    p.add_argument("--reg", default="SIM-0001", help="Vehicle registration number")
    p.add_argument("--days", type=int, default=3, help="Rental length in days")
    p.add_argument("--api-key", default=None)
    args = p.parse_args()

    session = requests.Session()
    vehicle = dict(VEHICLE_TEMPLATE, registration_number=args.reg)
    customer = dict(CUSTOMER_TEMPLATE,
                    email=f"{args.reg.lower()}@example.com",
                    driver_license_number=f"DL-{args.reg}")

    v = post(session, args.url, "/vehicles", vehicle, args.api_key)
    c = post(session, args.url, "/customers", customer, args.api_key)

    start = date.today()
    rental = {
        "rental_number": f"R-{args.reg}-{start:%Y%m%d}",
        "customer_id": c["id"],
        "vehicle_id": v["id"],
        "start_date": start.isoformat(),
        "end_date": (start + timedelta(days=args.days - 1)).isoformat(),
        "pickup_location": "Main depot",
        "return_location": "Main depot",
        "total_amount": str(int(args.days) * 45),
        "start_mileage": vehicle["mileage"],
    }
    r = post(session, args.url, "/rentals", rental, args.api_key)
    print(f"\n✅ Rental {r['rental_number']} for {v['display_name']}: {r['rental_days']} day(s)")


if __name__ == "__main__":
    main()
