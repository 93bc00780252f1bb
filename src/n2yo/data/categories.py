"""Satellite categories understood by the ``above`` endpoint.

Codes are fixed by N2YO, see https://www.n2yo.com/api/#above.
"""

from __future__ import annotations

from enum import IntEnum


class SatelliteCategory(IntEnum):
    """N2YO satellite category and its numeric code."""

    ALL = 0
    BRIGHTEST = 1
    ISS = 2
    WEATHER = 3
    NOAA = 4
    GOES = 5
    EARTH_RESOURCES = 6
    SEARCH_AND_RESCUE = 7
    DISASTER_MONITORING = 8
    TDRSS = 9
    GEOSTATIONARY = 10
    INTELSAT = 11
    GORIZONT = 12
    RADUGA = 13
    MOLNIYA = 14
    IRIDIUM = 15
    ORBCOMM = 16
    GLOBALSTAR = 17
    AMATEUR_RADIO = 18
    EXPERIMENTAL = 19
    GPS_OPERATIONAL = 20
    GLONASS_OPERATIONAL = 21
    GALILEO = 22
    SBAS = 23
    NAVY_NAVIGATION = 24
    RUSSIAN_LEO_NAVIGATION = 25
    SPACE_AND_EARTH_SCIENCE = 26
    GEODETIC = 27
    ENGINEERING = 28
    EDUCATION = 29
    MILITARY = 30
    RADAR_CALIBRATION = 31
    CUBESATS = 32
    XM_AND_SIRIUS = 33
    TV = 34
    BEIDOU = 35
    YAOGAN = 36
    WESTFORD_NEEDLES = 37
    PARUS = 38
    STRELA = 39
    GONETS = 40
    TSIKLON = 41
    TSIKADA = 42
    O3B_NETWORKS = 43
    TSELINA = 44
    CELESTIS = 45
    IRNSS = 46
    QZSS = 47
    FLOCK = 48
    LEMUR = 49
    GPS_CONSTELLATION = 50
    GLONASS_CONSTELLATION = 51
    STARLINK = 52
    ONEWEB = 53
    CHINESE_SPACE_STATION = 54
    QIANFAN = 55
    KUIPER = 56
