"""XP tables, class and skill tree definitions, ammo, stat bars and pooled projectiles."""

__version__ = "0.1.0"