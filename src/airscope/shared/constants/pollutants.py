"""
Pollutant Constants

Identifiers, aliases and display metadata for the pollutants reported by
the upstream providers.
"""


class Pollutant:
    """Canonical pollutant identifiers."""

    PM25 = "pm25"
    PM10 = "pm10"
    NO2 = "no2"
    SO2 = "so2"
    CO = "co"
    O3 = "o3"
    NH3 = "nh3"
    PB = "pb"

    # Government records use these spellings for the same quantities
    ALIASES = {
        "pm2.5": PM25,
        "pm2_5": PM25,
        "ozone": O3,
    }

    DISPLAY_NAMES = {
        PM25: "PM2.5",
        PM10: "PM10",
        NO2: "NO₂",
        SO2: "SO₂",
        CO: "CO",
        O3: "O₃",
        NH3: "NH₃",
        PB: "Pb",
    }

    UNITS = {
        PM25: "µg/m³",
        PM10: "µg/m³",
        NO2: "µg/m³",
        SO2: "µg/m³",
        CO: "mg/m³",
        O3: "µg/m³",
        NH3: "µg/m³",
        PB: "µg/m³",
    }


class SyntheticRanges:
    """Bounds for synthesized fallback readings.

    Each tuple is (low, span): values are drawn from low .. low + span - 1.
    """

    INDEX = (50, 150)
    IAQI = {
        "co": (5, 20),
        "h": (30, 40),
        "no2": (10, 50),
        "o3": (20, 80),
        "p": (1010, 20),
        "pm10": (30, 100),
        "pm25": (20, 80),
        "so2": (5, 30),
        "t": (15, 20),
        "w": (2, 10),
    }
    DOMINANT = Pollutant.PM25
