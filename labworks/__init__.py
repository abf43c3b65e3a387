"""Small console programs: War, a copyable pointer demo, a crafting inventory and a dungeon."""

__version__ = "0.1.0"