"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API paths and requested variables
    ├── models.py         # Dataclasses for parsed API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - geocoding: city name -> CityMatch list (degrades to [] on failure)
  - weather:   coordinates -> current weather + forecast list

Both use the shared ``services.http.session``; base URLs come from
settings so they can be pointed at a mirror.
"""
