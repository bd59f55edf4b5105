#!/usr/bin/env python
"""Seed the Pokémon catalog from a JSON fixture.

The fixture holds a ``types`` list (name, colour, optional artwork) and a
``pokemon`` list whose ``types`` field names entries of the first list in
slot order. Existing rows are merged so re-running the script is safe.

Usage:
    python -m backend.scripts.seed_pokemon
    python -m backend.scripts.seed_pokemon ./data/fixtures/pokemon.json --limit 3
    python -m backend.scripts.seed_pokemon --create-tables   # SQLite dev only
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.db.connection import get_database_type, get_engine, get_session
from backend.db.models import Base, Pokemon, PokemonType, pokemon_type_links

logger = logging.getLogger(__name__)

DEFAULT_FIXTURE = Path("./data/fixtures/pokemon.json")


class SeedError(ValueError):
    """Raised when a fixture entry is malformed."""


async def _upsert_types(
    session: AsyncSession, entries: list[dict[str, Any]]
) -> dict[str, PokemonType]:
    existing = {
        row.name: row for row in (await session.execute(select(PokemonType))).scalars()
    }
    for entry in entries:
        name = entry.get("name")
        color = entry.get("color")
        if not name or not color:
            raise SeedError(f"Type entry requires name and color: {entry!r}")
        pokemon_type = existing.get(name)
        if pokemon_type is None:
            pokemon_type = PokemonType(name=name, color=color)
            session.add(pokemon_type)
            existing[name] = pokemon_type
        pokemon_type.color = color
        pokemon_type.image_url = entry.get("image_url")
        pokemon_type.image_url_outline = entry.get("image_url_outline")
    await session.flush()
    return existing


async def load_catalog(
    session: AsyncSession,
    payload: dict[str, Any],
    *,
    limit: int | None = None,
) -> int:
    """Merge ``payload`` into the catalog tables and return the Pokémon count.

    The caller owns the transaction; nothing is committed here.
    """

    types_by_name = await _upsert_types(session, payload.get("types", []))

    loaded = 0
    for entry in payload.get("pokemon", []):
        if limit is not None and loaded >= limit:
            break
        if "id" not in entry or not entry.get("name"):
            raise SeedError(f"Pokémon entry requires id and name: {entry!r}")

        pokemon_id = int(entry["id"])
        await session.merge(
            Pokemon(
                id=pokemon_id,
                name=entry["name"],
                description=entry.get("description"),
                image_url=entry.get("image_url"),
                height=entry.get("height"),
                weight=entry.get("weight"),
            )
        )
        await session.flush()

        await session.execute(
            delete(pokemon_type_links).where(pokemon_type_links.c.pokemon_id == pokemon_id)
        )
        for slot, type_name in enumerate(entry.get("types", [])):
            pokemon_type = types_by_name.get(type_name)
            if pokemon_type is None:
                raise SeedError(f"Pokémon {pokemon_id} references unknown type {type_name!r}")
            await session.execute(
                insert(pokemon_type_links).values(
                    pokemon_id=pokemon_id, type_id=pokemon_type.id, slot=slot
                )
            )
        loaded += 1

    return loaded


async def seed_pokemon(
    fixture_path: Path,
    *,
    limit: int | None = None,
    create_tables: bool = False,
) -> int:
    """Load ``fixture_path`` into the configured database."""

    if create_tables:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    payload = json.loads(fixture_path.read_text(encoding="utf-8"))

    async with get_session() as session:
        try:
            loaded = await load_catalog(session, payload, limit=limit)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
    return loaded


async def main() -> int:
    """CLI entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    parser = argparse.ArgumentParser(description="Seed the Pokémon catalog")
    parser.add_argument(
        "fixture_path",
        nargs="?",
        type=Path,
        default=DEFAULT_FIXTURE,
        help=f"Path to the JSON fixture (default: {DEFAULT_FIXTURE})",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of Pokémon to load")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from the ORM metadata instead of relying on Alembic",
    )
    args = parser.parse_args()

    if not args.fixture_path.exists():
        logger.error("Fixture not found: %s", args.fixture_path)
        return 1

    db_type = get_database_type()
    logger.info("Database type detected: %s", db_type.upper())
    if args.create_tables and db_type != "sqlite":
        logger.error("--create-tables is only supported for SQLite; run `alembic upgrade head`")
        return 1

    try:
        loaded = await seed_pokemon(
            args.fixture_path, limit=args.limit, create_tables=args.create_tables
        )
    except (SeedError, json.JSONDecodeError) as exc:
        logger.error("Seeding aborted: %s", exc)
        return 1

    logger.info("Loaded %s Pokémon from %s", loaded, args.fixture_path)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
