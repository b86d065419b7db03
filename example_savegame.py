#!/usr/bin/env python3
"""
Example of using Preferences as a save game for player data.

Usage:
    python example_savegame.py [path]

The file is created on first run; run it again to see the values
written by the previous run loaded back.
"""

import sys
from dataclasses import dataclass

from prefstore import Preferences


@dataclass
class PlayerData:
    name: str = "Unnamed"  # Kept when the save has no "name" pair
    level: int = 1
    experience: int = 0


@dataclass
class WorldData:
    time: float = 0.0
    is_raining: bool = False


def run(path: str) -> None:
    print("=" * 60)
    print("Save game example")
    print("=" * 60)

    # Normally a game manager loads and saves; other entities only
    # read and write the tables they need.
    print("\n1. Loading save game...")
    savegame = Preferences(path)
    savegame.load()

    # Each table can be read once per load
    print("\n2. Reading tables...")
    player = savegame.read_table(PlayerData())          # Table "PlayerData"
    world = savegame.read_table(WorldData(), "World")   # Explicit table name

    print("   ---------------- PlayerData")
    print(f"   name       {player.name}")
    print(f"   level      {player.level}")
    print(f"   experience {player.experience}")
    print("   ---------------- World")
    print(f"   time       {world.time}")
    print(f"   is_raining {world.is_raining}")

    print("\n3. Playing...")
    player.experience += 150
    if player.experience >= 1000:
        player.level += 1
        player.experience -= 1000
    world.time += 12.5
    world.is_raining = not world.is_raining

    # Only queued in memory until save()
    print("\n4. Writing tables...")
    savegame.write_table(player)
    savegame.write_table(world, "World")

    print("\n5. Saving...")
    savegame.save()

    errors = [d for d in savegame.diagnostics if d.is_error]
    print("\n" + "=" * 60)
    print(f"Done ({len(errors)} problems reported)")
    print("=" * 60)


if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else "example.save")
