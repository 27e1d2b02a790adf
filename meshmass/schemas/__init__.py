from meshmass.schemas.mass_properties import MassProperties

__all__ = [
    "MassProperties",
]
