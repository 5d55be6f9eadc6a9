#!/usr/bin/env python3
"""
Seed the vehicles table with deterministic random data.

- Deterministic: fixed seed → same dataset every run
- Idempotent: clears the table before seeding

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vehicle_registry.infra.db.models.vehicle import VehicleRow
from vehicle_registry.infra.db.session import get_session


RANDOM_SEED = 42
NUM_VEHICLES = 50

MIN_YEAR = 1950

NAMES_BY_BRAND = {
    "Honda": ["Civic", "Accord", "Fit", "CR-V", "HR-V"],
    "Toyota": ["Corolla", "Camry", "Hilux", "Yaris", "Etios"],
    "Volkswagen": ["Fusca", "Gol", "Polo", "Jetta", "Amarok"],
    "Chevrolet": ["Opala", "Onix", "Cruze", "S10", "Tracker"],
    "Fiat": ["Uno", "Palio", "Argo", "Toro", "Strada"],
    "Ford": ["Ka", "Fiesta", "Focus", "Ranger", "Mustang"],
}


def generate_vehicle(max_year: int) -> VehicleRow:
    brand = random.choice(list(NAMES_BY_BRAND))
    name = random.choice(NAMES_BY_BRAND[brand])

    # Skewed toward recent years
    year = max_year - int(random.triangular(0, max_year - MIN_YEAR, 0))

    return VehicleRow(name=name, brand=brand, year=year)


def seed_vehicles(num_vehicles: int = NUM_VEHICLES, seed: int = RANDOM_SEED) -> None:
    random.seed(seed)
    max_year = date.today().year

    print(f"Seeding database with {num_vehicles} vehicles (seed={seed})...")

    with get_session() as session:
        deleted_count = session.query(VehicleRow).delete()
        print(f"   Deleted {deleted_count} existing vehicles")

        vehicles = [generate_vehicle(max_year) for _ in range(num_vehicles)]
        session.add_all(vehicles)
        session.flush()

        print(f"Seeded {len(vehicles)} vehicles")
        for i, vehicle in enumerate(vehicles[:5], 1):
            print(f"   {i}. {vehicle.year} {vehicle.brand} {vehicle.name}")

        if len(vehicles) > 5:
            print(f"   ... and {len(vehicles) - 5} more")


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
