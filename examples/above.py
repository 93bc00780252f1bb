"""List amateur radio satellites within 70 degrees of the zenith.

Usage: python above.py API_KEY LAT LNG
"""

import sys

from n2yo import N2yoClient, SatelliteCategory

USAGE = "Usage: above.py API_KEY LAT LNG"

if len(sys.argv) != 4:
    print(USAGE)
    sys.exit(1)

client = N2yoClient(api_key=sys.argv[1])
result = client.above(
    float(sys.argv[2]), float(sys.argv[3]), 0.0, 70, SatelliteCategory.AMATEUR_RADIO
)

print(f"{result.info.category}: {result.info.satcount} satellites overhead")
for sat in result.above:
    print(f"{sat.satid:>6} {sat.satname:<24} {sat.latitude:8.3f} {sat.longitude:9.3f} {sat.altitude:9.1f} km")
