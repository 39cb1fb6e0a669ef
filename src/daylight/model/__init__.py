from .locations import LocationConfig, get_location, load_locations

__all__ = ["LocationConfig", "get_location", "load_locations"]
