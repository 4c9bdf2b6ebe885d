"""get-weather stream function.

Answers the model's ``get-weather`` tool calls with the current weather from
OpenWeatherMap. The provider's body is passed through as is.
"""

import logging
from dataclasses import dataclass, field

from llm_sfn import SfnHandler, Success, TransportFailure, FunctionResult, to_text
from llm_sfn_host import config, http

logger = logging.getLogger(__name__)

DATA_TAG = 0x62

API_URL = "https://api.openweathermap.org/data/2.5/weather?lat={lat:f}&lon={lon:f}&appid={key}&units=metric"
API_KEY_VARIABLE = "OPENWEATHERMAP_API_KEY"
FALLBACK_MESSAGE = "can not get the weather information at the moment"

DESCRIPTION = (
    "Get current weather for a given city. If no city is provided, you "
    "should ask to clarify the city. If the city name is given, you should "
    "convert the city name to Latitude and Longitude geo coordinates, keeping "
    "Latitude and Longitude in decimal format."
)


@dataclass(kw_only=True)
class LLMArguments:
    """Arguments of a get-weather call, filled in by the model."""

    city: str = field(default="", metadata={
        "description": "The city name to get the weather for"
    })
    latitude: float = field(metadata={
        "description": "The latitude of the city, in decimal format, range should be in (-90, 90)"
    })
    longitude: float = field(metadata={
        "description": "The longitude of the city, in decimal format, range should be in (-180, 180)"
    })


handler = SfnHandler("get-weather")


def build_request_url(lat: float, lon: float, api_key: str) -> str:
    return API_URL.format(lat=lat, lon=lon, key=api_key)


def fetch_weather(lat: float, lon: float) -> FunctionResult:
    """Call the provider once.

    The API key is read on every call. Whatever status the provider answers
    with, its body is a :class:`Success`; only a failed connection or body
    read is a :class:`TransportFailure`.
    """
    url = build_request_url(lat, lon, config.get_with_default(API_KEY_VARIABLE, ""))
    try:
        response = http.get(url)
    except http.TransportError as e:
        return TransportFailure(e)
    return Success(response.text())


@handler.function(name="get-weather", description=DESCRIPTION, arguments=LLMArguments, tags=[DATA_TAG])
def get_weather(args: LLMArguments) -> str:
    result = fetch_weather(args.latitude, args.longitude)
    if isinstance(result, Success):
        logger.info("get-weather city=%s result=%s", args.city, result.text)
    else:
        logger.error("get-weather: %s", result.message)
    return to_text(result, FALLBACK_MESSAGE)
