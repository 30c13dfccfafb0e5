"""
Seed script -- populates the database with a sample campus for reviewers.

Run after migrations:
    python seed.py

Creates:
  - 6 campus roads (a main street, a crossing avenue and footpaths)
  - 8 points of interest along them
"""

import asyncio

from sqlalchemy import text

from campus_nav.domain.enums import LocationCategory, RoadType
from campus_nav.infrastructure.database import async_session_factory, engine
from campus_nav.infrastructure.repositories import (
    LocationRepository,
    RoadRepository,
)


ROADS = [
    {
        "name": "Main Gate Road",
        "type": RoadType.STREET,
        "coordinates": [
            (19.1290, 72.9160), (19.1310, 72.9150),
            (19.1334, 72.9133), (19.1360, 72.9118),
        ],
    },
    {
        "name": "Hostel Avenue",
        "type": RoadType.STREET,
        "coordinates": [
            (19.1320, 72.9100), (19.1334, 72.9133), (19.1345, 72.9165),
        ],
    },
    {
        "name": "Lake Side Path",
        "type": RoadType.PATH,
        "coordinates": [
            (19.1300, 72.9100), (19.1325, 72.9145), (19.1350, 72.9150),
        ],
    },
    {
        "name": "Library Walk",
        "type": RoadType.PATH,
        "coordinates": [(19.1345, 72.9165), (19.1360, 72.9118)],
    },
    {
        "name": "Ring Road",
        "type": RoadType.HIGHWAY,
        "coordinates": [
            (19.1280, 72.9090), (19.1370, 72.9090),
            (19.1370, 72.9180), (19.1280, 72.9180), (19.1280, 72.9090),
        ],
    },
    {
        "name": "Sports Complex Lane",
        "type": RoadType.CUSTOM,
        "coordinates": [(19.1360, 72.9118), (19.1370, 72.9090)],
    },
]

LOCATIONS = [
    {"name": "Main Gate", "lat": 19.1290, "lng": 72.9160, "category": LocationCategory.CUSTOM},
    {"name": "Central Library", "lat": 19.1345, "lng": 72.9165, "category": LocationCategory.SCHOOL},
    {"name": "Lecture Hall Complex", "lat": 19.1334, "lng": 72.9133, "category": LocationCategory.SCHOOL},
    {"name": "Hostel 4 Mess", "lat": 19.1320, "lng": 72.9100, "category": LocationCategory.RESTAURANT},
    {"name": "Campus Hospital", "lat": 19.1310, "lng": 72.9150, "category": LocationCategory.HOSPITAL},
    {"name": "Guest House", "lat": 19.1350, "lng": 72.9150, "category": LocationCategory.HOTEL},
    {"name": "Shopping Centre", "lat": 19.1300, "lng": 72.9100, "category": LocationCategory.SHOPPING},
    {"name": "Sports Complex", "lat": 19.1370, "lng": 72.9090, "category": LocationCategory.CUSTOM},
]


async def seed():
    async with async_session_factory() as session:
        # Check if already seeded
        result = await session.execute(text("SELECT count(*) FROM roads"))
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        # ── Roads ─────────────────────────────────────────────────────
        road_repo = RoadRepository(session)
        for r in ROADS:
            await road_repo.create_road(
                name=r["name"], type=r["type"], coordinates=r["coordinates"]
            )
        print(f"  Created {len(ROADS)} roads")

        # ── Locations ─────────────────────────────────────────────────
        location_repo = LocationRepository(session)
        for loc in LOCATIONS:
            await location_repo.create_location(
                name=loc["name"],
                lat=loc["lat"],
                lng=loc["lng"],
                category=loc["category"],
            )
        print(f"  Created {len(LOCATIONS)} locations")

        await session.commit()
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
