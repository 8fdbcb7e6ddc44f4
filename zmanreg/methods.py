"""
Calculation method identities.

Each member names one way of calculating a zman. The set is closed: the
reference data must describe every member and may not mention anything else.
Member values are the stable string tokens used in data files and on the
command line.
"""

from __future__ import annotations

from enum import Enum

from .errors import UnknownCalculationMethod


class CalculationMethod(Enum):
    """Closed set of zmanim calculation methods, in catalog order."""

    # Dawn
    ALOS_72 = "alos72"
    ALOS_60 = "alos60"
    ALOS_90 = "alos90"
    ALOS_120 = "alos120"
    ALOS_16_POINT_1_DEGREES = "alos16Point1Degrees"
    ALOS_18_DEGREES = "alos18Degrees"
    ALOS_19_POINT_8_DEGREES = "alos19Point8Degrees"
    ALOS_BAAL_HATANYA = "alosBaalHatanya"

    # Earliest tallis and tefillin
    MISHEYAKIR_10_POINT_2_DEGREES = "misheyakir10Point2Degrees"
    MISHEYAKIR_11_DEGREES = "misheyakir11Degrees"
    MISHEYAKIR_11_POINT_5_DEGREES = "misheyakir11Point5Degrees"

    # Sunrise
    SUNRISE = "sunrise"
    SEA_LEVEL_SUNRISE = "seaLevelSunrise"
    ELEVATION_ADJUSTED_SUNRISE = "elevationAdjustedSunrise"

    # Latest shema
    SOF_ZMAN_SHMA_GRA = "sofZmanShmaGra"
    SOF_ZMAN_SHMA_MGA = "sofZmanShmaMGA"
    SOF_ZMAN_SHMA_MGA_16_POINT_1_DEGREES = "sofZmanShmaMGA16Point1Degrees"
    SOF_ZMAN_SHMA_MGA_90_MINUTES = "sofZmanShmaMGA90Minutes"
    SOF_ZMAN_SHMA_BAAL_HATANYA = "sofZmanShmaBaalHatanya"

    # Latest shacharis
    SOF_ZMAN_TFILA_GRA = "sofZmanTfilaGra"
    SOF_ZMAN_TFILA_MGA = "sofZmanTfilaMGA"
    SOF_ZMAN_TFILA_MGA_16_POINT_1_DEGREES = "sofZmanTfilaMGA16Point1Degrees"
    SOF_ZMAN_TFILA_BAAL_HATANYA = "sofZmanTfilaBaalHatanya"

    # Midday and midnight (single method each)
    CHATZOS = "chatzos"
    SOLAR_MIDNIGHT = "solarMidnight"

    # Earliest mincha
    MINCHA_GEDOLA = "minchaGedola"
    MINCHA_GEDOLA_30_MINUTES = "minchaGedola30Minutes"
    MINCHA_GEDOLA_16_POINT_1_DEGREES = "minchaGedola16Point1Degrees"
    MINCHA_GEDOLA_BAAL_HATANYA = "minchaGedolaBaalHatanya"

    # Mincha ketana
    MINCHA_KETANA = "minchaKetana"
    MINCHA_KETANA_16_POINT_1_DEGREES = "minchaKetana16Point1Degrees"
    MINCHA_KETANA_BAAL_HATANYA = "minchaKetanaBaalHatanya"

    # Plag hamincha
    PLAG_HAMINCHA = "plagHamincha"
    PLAG_HAMINCHA_16_POINT_1_DEGREES = "plagHamincha16Point1Degrees"
    PLAG_HAMINCHA_BAAL_HATANYA = "plagHaminchaBaalHatanya"

    # Candle lighting
    CANDLE_LIGHTING = "candleLighting"

    # Sunset
    SUNSET = "sunset"
    SEA_LEVEL_SUNSET = "seaLevelSunset"
    ELEVATION_ADJUSTED_SUNSET = "elevationAdjustedSunset"

    # Twilight
    BAIN_HASHMASHOS_RT_13_POINT_24_DEGREES = "bainHashmashosRT13Point24Degrees"
    BAIN_HASHMASHOS_YEREIM_18_MINUTES = "bainHashmashosYereim18Minutes"

    # Nightfall
    TZAIS = "tzais"
    TZAIS_50 = "tzais50"
    TZAIS_72 = "tzais72"
    TZAIS_90 = "tzais90"
    TZAIS_GEONIM_3_POINT_7_DEGREES = "tzaisGeonim3Point7Degrees"
    TZAIS_GEONIM_5_POINT_95_DEGREES = "tzaisGeonim5Point95Degrees"
    TZAIS_BAAL_HATANYA = "tzaisBaalHatanya"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: CalculationMethod | str) -> CalculationMethod:
        """
        Resolve a raw token to a calculation method.

        Matching is exact: no case folding, no whitespace stripping.

        Raises:
            UnknownCalculationMethod: if the token is not in the closed set
        """
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise UnknownCalculationMethod(token)
        try:
            return cls(token)
        except ValueError:
            raise UnknownCalculationMethod(token) from None

    @classmethod
    def tokens(cls) -> list[str]:
        """All tokens in catalog order."""
        return [m.value for m in cls]

    def __str__(self) -> str:
        return self.value
