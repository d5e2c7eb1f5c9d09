"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
model, the persistence layer and the 3D preview.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (grid unit, spacing, defaults)
   scattered throughout the code.
2. Deployment: It names the QSettings organisation/application so the stored
   configuration ends up in the same place for every launch.

Exports:
    GRID_UNIT_MM (int): Physical size of one grid unit in millimetres.
    UNIT_SPACING (float): Rendering distance between adjacent grid cells.
    MIN_DIMENSION (float): Smallest size a module may have in any axis.
"""
# Geometry
GRID_UNIT_MM: int = 250
UNIT_SPACING: float = 1.0
MIN_DIMENSION: float = 0.1
# Largest |grid coordinate| the editor offers; imports may go beyond it
GRID_EDIT_LIMIT: int = 999
DEFAULT_DIMENSION: float = 1.0

# Presentation
DEFAULT_COLOR: str = "#FFFFFF"
DEFAULT_CONFIGURATION_NAME: str = "Untitled Configuration"
DEFAULT_PRESET: str = "sideboard"

# QSettings (desktop analogue of browser local storage)
ORG_ID: str = "shelfconfigurator"
APP_ID: str = "modular-configurator"
VISIBLE_APP_NAME: str = "Modular Shelf Configurator"
STORAGE_KEY: str = "configurator/current"
