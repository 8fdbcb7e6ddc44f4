"""zmanreg - identities, names and groupings of halachic zmanim calculations."""

import logging

from .errors import ConfigurationError, UnknownCalculationMethod, ZmanRegistryError
from .methods import CalculationMethod
from .models import ZmanMetadata
from .registry import (
    ZmanRegistry,
    get_registry,
    initialize,
    reset_registry,
)
from .zman import Zman

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalculationMethod",
    "ConfigurationError",
    "UnknownCalculationMethod",
    "Zman",
    "ZmanMetadata",
    "ZmanRegistry",
    "ZmanRegistryError",
    "get_registry",
    "initialize",
    "reset_registry",
]
