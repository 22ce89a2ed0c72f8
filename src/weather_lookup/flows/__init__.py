"""
Prefect flows for the lookup pipeline.

Flows:
- lookup: city name -> coordinates -> current weather, forecast, weekly summary

Usage (local):
    python -m weather_lookup.flows.lookup Paris

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'lookup-weather/default'
"""
