"""Shared fixtures: sample feeds and geocoder responses."""

import pytest

from yweather_getter.data import PlaceIdentifier

FORECAST_ROWS = [
    ("Sat", "18 Oct 2014", "12", "18", "30", "Partly Cloudy"),
    ("Sun", "19 Oct 2014", "13", "20", "28", "Mostly Cloudy"),
    ("Mon", "20 Oct 2014", "15", "19", "11", "Showers"),
    ("Tue", "21 Oct 2014", "14", "21", "32", "Sunny"),
    ("Wed", "22 Oct 2014", "12", "17", "12", "Rain"),
]


def forecast_element(day: str, date: str, low: str, high: str, code: str, text: str) -> str:
    return (
        f'<yweather:forecast day="{day}" date="{date}" low="{low}" high="{high}" '
        f'text="{text}" code="{code}" />'
    )


def make_feed(
    *,
    title: str = "Yahoo! Weather - Tokyo, JP",
    forecasts: list[str] | None = None,
    condition: str = (
        '<yweather:condition text="Fair" code="34" temp="16" date="Sat, 18 Oct 2014 9:00 pm JST" />'
    ),
    wind: str = '<yweather:wind chill="16" direction="340" speed="6.44" />',
) -> str:
    """Build a feed in the provider's RSS shape."""
    if forecasts is None:
        forecasts = [forecast_element(*row) for row in FORECAST_ROWS]
    forecast_xml = "\n".join(forecasts)
    return f"""<?xml version="1.0" encoding="UTF-8" standalone="yes" ?>
<rss version="2.0" xmlns:yweather="http://xml.weather.yahoo.com/ns/rss/1.0"
     xmlns:geo="http://www.w3.org/2003/01/geo/wgs84_pos#">
<channel>
<title>{title}</title>
<link>http://us.rd.yahoo.com/dailynews/rss/weather/Tokyo__JP/*http://weather.yahoo.com/forecast/JAXX0085_c.html</link>
<description>Yahoo! Weather for Tokyo, JP</description>
<language>en-us</language>
<lastBuildDate>Sat, 18 Oct 2014 9:00 pm JST</lastBuildDate>
<ttl>60</ttl>
<yweather:location city="Tokyo" region="TY" country="Japan" />
<yweather:units temperature="C" distance="km" pressure="mb" speed="km/h" />
{wind}
<yweather:atmosphere humidity="72" visibility="9.99" pressure="1015.92" rising="0" />
<yweather:astronomy sunrise="5:49 am" sunset="5:02 pm" />
<image>
<title>Yahoo! Weather</title>
<width>142</width>
<height>18</height>
</image>
<item>
<title>Conditions for Tokyo, JP at 9:00 pm JST</title>
<geo:lat>35.67</geo:lat>
<geo:long>139.77</geo:long>
<pubDate>Sat, 18 Oct 2014 9:00 pm JST</pubDate>
{condition}
<description><![CDATA[<b>Current Conditions:</b><br />Fair, 16 C]]></description>
{forecast_xml}
<guid isPermaLink="false">JAXX0085_2014_10_22_7_00_JST</guid>
</item>
</channel>
</rss>
"""


PROVIDER_ERROR_FEED = """<?xml version="1.0" encoding="UTF-8" standalone="yes" ?>
<rss version="2.0" xmlns:yweather="http://xml.weather.yahoo.com/ns/rss/1.0"
     xmlns:geo="http://www.w3.org/2003/01/geo/wgs84_pos#">
<channel>
<title>Yahoo! Weather - Error</title>
<description>Yahoo! Weather Error</description>
<item>
<title>City not found</title>
<description>Invalid Input /forecastrss?w=0&amp;u=c</description>
</item>
</channel>
</rss>
"""


@pytest.fixture
def tokyo_feed() -> str:
    return make_feed()


@pytest.fixture
def tokyo_place() -> PlaceIdentifier:
    return PlaceIdentifier(
        woeid="1118370",
        neighborhood="",
        county="",
        state="Tokyo Prefecture",
        country="Japan",
    )


@pytest.fixture
def yql_tokyo_response() -> dict:
    """Sample YQL geo.places JSON response with a single match."""
    return {
        "query": {
            "count": 1,
            "created": "2014-10-18T12:00:00Z",
            "lang": "en-US",
            "results": {
                "place": {
                    "woeid": "1118370",
                    "name": "Tokyo",
                    "placeTypeName": {"code": "7", "content": "Town"},
                    "country": {"code": "JP", "type": "Country", "content": "Japan"},
                    "admin1": {"code": "JP-13", "type": "Prefecture", "content": "Tokyo Prefecture"},
                    "admin2": None,
                    "admin3": None,
                    "locality1": {"type": "Town", "content": "Tokyo"},
                    "locality2": None,
                }
            },
        }
    }
