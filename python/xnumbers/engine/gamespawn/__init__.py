from xnumbers.engine.gamespawn.spawn import SpawnConfig, SpawnMethod, SpawnPolicy, next_spawn

__all__ = ["SpawnConfig", "SpawnMethod", "SpawnPolicy", "next_spawn"]
