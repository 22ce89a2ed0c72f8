"""Open-Meteo forecast API constants.

API docs: https://open-meteo.com/en/docs

The base URL lives in settings (``weather_api_url``); the endpoint path and
requested variables are fixed here.
"""

FORECAST_PATH = "/forecast"

CURRENT_VARS = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
]

HOURLY_VARS = [
    "temperature_2m",
    "weather_code",
    "relative_humidity_2m",
    "wind_speed_10m",
]

DAILY_VARS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "sunrise",
    "sunset",
    "wind_speed_10m_max",
    "wind_direction_10m_dominant",
]
