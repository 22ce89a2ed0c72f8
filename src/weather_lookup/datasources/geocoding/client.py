"""Open-Meteo geocoding API constants.

API docs: https://open-meteo.com/en/docs/geocoding-api
"""

SEARCH_PATH = "/search"
