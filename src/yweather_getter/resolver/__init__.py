from yweather_getter.resolver.base import IdentifierResolver
from yweather_getter.resolver.text import to_ascii
from yweather_getter.resolver.yql import YQL_API_URL, YQLPlaceResolver

__all__ = [
    "IdentifierResolver",
    "YQLPlaceResolver",
    "YQL_API_URL",
    "to_ascii",
]
