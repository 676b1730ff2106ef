from location_service.infra.db.models.location import LocationRow, LocationSeatRow

__all__ = ["LocationRow", "LocationSeatRow"]
