"""Profile storage adapters."""

from travel_checkin.adapters.storage.in_memory_profile_store import InMemoryProfileStore
from travel_checkin.adapters.storage.json_file_profile_store import JsonFileProfileStore

__all__ = ["InMemoryProfileStore", "JsonFileProfileStore"]
