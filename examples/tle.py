"""Print the current TLE of a satellite.

Usage: python tle.py API_KEY NORAD_ID
"""

import sys

from n2yo import N2yoClient

USAGE = "Usage: tle.py API_KEY NORAD_ID"

if len(sys.argv) != 3:
    print(USAGE)
    sys.exit(1)

client = N2yoClient(api_key=sys.argv[1])
result = client.tle(int(sys.argv[2]))

print(f"NORAD ID:       {result.info.satid}")
print(f"Satellite name: {result.info.satname}")
print(f"TLE:\r\n{result.tle}")

elements = result.to_tle()
print(f"Epoch:          {elements.epoch}")
print(f"Incl:           {elements.inclination_deg:.4f}°")
print(f"Period:         {1440 / elements.mean_motion_rev_per_day:.1f} min")
