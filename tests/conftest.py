"""
Shared test data: small GPX and TCX documents.
"""

import pytest


# =============================================================================
# Test Data
# =============================================================================

# One <trk> with two segments (the first has a point without lat) and a route
SAMPLE_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>2021_06_15_Morning Ride</name>
    <src>1234.gpx</src>
    <desc>Along the river</desc>
    <link href="https://example.com/track/1"><text>Track</text><type>trackOnWeb</type></link>
    <link href="https://example.com/chart/1.png"><type>elevationChartUrlTab</type></link>
    <trkseg>
      <trkpt lat="52.5200" lon="13.4050"><ele>34.0</ele><time>2021-06-15T07:30:00Z</time></trkpt>
      <trkpt lat="52.5210" lon="13.4060"><ele>40.5</ele><time>2021-06-15T07:31:00Z</time></trkpt>
      <trkpt lon="13.4070"><ele>45.0</ele><time>2021-06-15T07:32:00Z</time></trkpt>
      <trkpt lat="52.5230" lon="13.4080"><ele>38.0</ele><time>2021-06-15T07:33:00Z</time></trkpt>
      <trkpt lat="52.5240" lon="13.4090"><ele>50.0</ele><time>2021-06-15T07:35:00Z</time></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="52.5300" lon="13.4100"><ele>60</ele><time>2021-06-15T08:00:00Z</time></trkpt>
      <trkpt lat="52.5310" lon="13.4110"><time>2021-06-15T08:10:00Z</time></trkpt>
    </trkseg>
  </trk>
  <rte>
    <name>Planned</name>
    <rtept lat="52.0" lon="13.0"><ele>100</ele></rtept>
    <rtept lat="52.1" lon="13.1"/>
  </rte>
</gpx>
"""

TCX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<TrainingCenterDatabase '
    'xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2">\n'
)


def build_tcx(laps: int = 2, points_per_lap: int = 10, unpositioned_per_lap: int = 1) -> str:
    """TCX with `laps` laps of `points_per_lap` positioned trackpoints each."""
    parts = [TCX_HEADER, "  <Activities>\n", '    <Activity Sport="Running">\n']
    minute = 0
    for lap in range(laps):
        parts.append(f'      <Lap StartTime="2021-06-15T07:{minute:02d}:00Z">\n        <Track>\n')
        for i in range(unpositioned_per_lap):
            parts.append(
                f"          <Trackpoint><Time>2021-06-15T07:{minute:02d}:00Z</Time>"
                "<HeartRateBpm><Value>120</Value></HeartRateBpm></Trackpoint>\n"
            )
        for i in range(points_per_lap):
            parts.append(
                "          <Trackpoint>"
                f"<Time>2021-06-15T07:{minute:02d}:{i:02d}Z</Time>"
                "<Position>"
                f"<LatitudeDegrees>{52.5 + lap * 0.01 + i * 0.0001:.6f}</LatitudeDegrees>"
                f"<LongitudeDegrees>{13.4 + i * 0.0001:.6f}</LongitudeDegrees>"
                "</Position>"
                f"<AltitudeMeters>{100 + i}</AltitudeMeters>"
                "</Trackpoint>\n"
            )
        parts.append("        </Track>\n      </Lap>\n")
        minute += 1
    parts.append("    </Activity>\n  </Activities>\n</TrainingCenterDatabase>\n")
    return "".join(parts)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_gpx() -> str:
    return SAMPLE_GPX


@pytest.fixture
def make_tcx():
    """Factory for TCX documents: make_tcx(laps=2, points_per_lap=10)."""
    return build_tcx
