"""Orbital elements from the two-line element text returned by N2YO.

The ``tle`` endpoint returns both lines in a single string joined by CRLF.
This module turns that string into a typed record backed by an sgp4
``Satrec``, ready for local propagation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime

from sgp4.api import Satrec, WGS72
from sgp4.conveniences import sat_epoch_datetime

logger = logging.getLogger(__name__)

_LINE_LENGTH = 69


@dataclass(frozen=True)
class TLE:
    """A parsed Two-Line Element set.

    Attributes:
        name: Satellite name, empty when unknown.
        line1: Raw TLE line 1.
        line2: Raw TLE line 2.
        norad_id: NORAD catalog number.
        epoch: Element set epoch as an aware UTC datetime.
        inclination_deg: Orbital inclination in degrees.
        raan_deg: Right ascension of ascending node in degrees.
        eccentricity: Orbital eccentricity (dimensionless).
        arg_perigee_deg: Argument of perigee in degrees.
        mean_anomaly_deg: Mean anomaly in degrees.
        mean_motion_rev_per_day: Mean motion in revolutions per day.
        bstar: BSTAR drag term.
        satrec: Underlying sgp4 Satrec.
    """

    name: str
    line1: str
    line2: str
    norad_id: int
    epoch: datetime
    inclination_deg: float
    raan_deg: float
    eccentricity: float
    arg_perigee_deg: float
    mean_anomaly_deg: float
    mean_motion_rev_per_day: float
    bstar: float
    satrec: Satrec = field(repr=False, compare=False)

    def __str__(self) -> str:
        header = f"{self.name}\n" if self.name else ""
        return f"{header}{self.line1}\n{self.line2}"


def _check_line(line: str, number: str) -> None:
    if len(line) != _LINE_LENGTH or not line.startswith(f"{number} "):
        logger.error("Invalid TLE line %s: %r", number, line)
        raise ValueError(f"Invalid TLE line {number}: {line!r}")


def parse_tle(text: str, name: str = "") -> TLE:
    """Parse one element set from N2YO ``tle`` text.

    Args:
        text: Line 1 and line 2, separated by CRLF or LF.
        name: Satellite name to attach to the record.

    Returns:
        The parsed TLE.

    Raises:
        ValueError: If the text does not hold exactly two valid TLE lines
            for the same catalog number.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) != 2:
        logger.error("Expected 2 TLE lines, got %d", len(lines))
        raise ValueError(f"Expected 2 TLE lines, got {len(lines)}")

    line1, line2 = lines
    _check_line(line1, "1")
    _check_line(line2, "2")
    if line1[2:7] != line2[2:7]:
        logger.error("TLE lines belong to different objects: %r != %r", line1[2:7], line2[2:7])
        raise ValueError(
            f"TLE lines belong to different objects: {line1[2:7]!r} != {line2[2:7]!r}"
        )

    sat = Satrec.twoline2rv(line1, line2, WGS72)
    logger.debug("Parsed TLE for NORAD %d", sat.satnum)

    return TLE(
        name=name.strip(),
        line1=line1,
        line2=line2,
        norad_id=sat.satnum,
        epoch=sat_epoch_datetime(sat),
        inclination_deg=math.degrees(sat.inclo),
        raan_deg=math.degrees(sat.nodeo),
        eccentricity=sat.ecco,
        arg_perigee_deg=math.degrees(sat.argpo),
        mean_anomaly_deg=math.degrees(sat.mo),
        mean_motion_rev_per_day=sat.no_kozai * 1440.0 / (2.0 * math.pi),
        bstar=sat.bstar,
        satrec=sat,
    )
