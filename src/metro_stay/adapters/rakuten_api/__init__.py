"""Rakuten Travel lodging adapter."""

from metro_stay.adapters.rakuten_api.rakuten_lodging_provider import RakutenLodgingProvider

__all__ = ["RakutenLodgingProvider"]
