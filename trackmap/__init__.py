"""
trackmap

Decode GPS activity files (GPX, TCX, FIT) into one track model,
enrich them from Strava exports and merge them back into GPX.
"""

__version__ = "0.1.0"
