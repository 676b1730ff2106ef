#!/usr/bin/env python3
"""
Seed the locations table with a fixed set of venues.

Features:
- Deterministic: same venues and seat layouts every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through the CreateLocation use case, so every venue is validated
  and its seats are generated exactly as the API would

Usage:
    python scripts/seed_locations.py
    # or via Docker:
    docker compose run --rm api uv run python scripts/seed_locations.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy import delete

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from location_service.adapters.in_memory_location_cache import InMemoryLocationCache
from location_service.adapters.postgres_location_repository import PostgresLocationRepository
from location_service.domain.location import CreateLocationRequest
from location_service.infra.db.models.location import LocationRow
from location_service.infra.db.session import get_session
from location_service.use_cases.create_location import CreateLocation
from location_service.use_cases.refresh_location_cache import RefreshLocationCache


# ==============================================================================
# Venues
# ==============================================================================

VENUES = [
    CreateLocationRequest("Avicii Arena", "Globentorget 2", "121 77", "Stockholm", 1600, 40, 4),
    CreateLocationRequest("Friends Arena", "Råsta Strandväg 1", "169 79", "Solna", 5000, 100, 8),
    CreateLocationRequest("Gamla Ullevi", "Skånegatan 10", "411 40", "Göteborg", 1800, 36, 3),
    CreateLocationRequest("Malmö Arena", "Hyllie Stationstorg 2", "215 32", "Malmö", 1300, 26, 2),
    CreateLocationRequest("Cirkus", "Djurgårdsslätten 43", "115 21", "Stockholm", 1650, 30, 2),
    CreateLocationRequest("Konserthuset", "Hötorget 8", "111 57", "Stockholm", 1770, 27, 3),
    CreateLocationRequest("Slottsskogsvallen", "Slottsskogen", "414 76", "Göteborg"),
]


def seed_locations() -> None:
    print(f"🌱 Seeding database with {len(VENUES)} locations...")

    with get_session() as session:
        # Step 1: Clear existing data (seats go with ON DELETE CASCADE)
        print("🗑️  Clearing existing locations...")
        deleted_count = session.execute(delete(LocationRow)).rowcount
        session.commit()
        print(f"   Deleted {deleted_count} existing locations")

        # Step 2: Create venues through the use case
        repository = PostgresLocationRepository(session)
        use_case = CreateLocation(
            location_repository=repository,
            cache_refresher=RefreshLocationCache(repository, InMemoryLocationCache()),
        )

        failures = 0
        for venue in VENUES:
            reply = use_case.execute(venue)
            if reply.succeeded:
                print(f"   ✅ {venue.name}: {venue.seat_count} seats, {venue.row_count} rows")
            else:
                failures += 1
                print(f"   ❌ {venue.name}: {reply.error_message}")

    if failures:
        raise RuntimeError(f"{failures} location(s) could not be seeded")

    print(f"✅ Successfully seeded {len(VENUES)} locations!")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_locations()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
