from festivals.handlers.serializers import FestivalRecord

__all__ = ["FestivalRecord"]
