# -*- coding: utf-8 -*-

"""
Default values used by the workflows.

Every constant below is exposed as a keyword default of the function that uses it,
so a script can override a single value without touching this module.
"""

## Property names understood by the earth model
POROSITY = "Porosity, Total"
SHALE_CONCENTRATION = "Shale Concentration"
SHALE_POROSITY = "Porosity, Shale"
WATER_SATURATION = "Water Saturation, Total"
SALINITY = "Salinity"
SHALE_SALINITY = "Shale Salinity"
WATER_RESISTIVITY = "Water Resistivity"
RESISTIVITY = "Resistivity (Parallel or Homogeneous)"

# (mean, standard deviation) of the jittered per-layer properties
LAYER_PROPERTY_DISTRIBUTIONS = {
    POROSITY: (0.22, 0.04),
    SHALE_CONCENTRATION: (0.15, 0.05),
    SHALE_POROSITY: (0.05, 0.01),
    WATER_SATURATION: (0.20, 0.03),
}

# ppm
DEFAULT_SALINITY = 30000

## Composition slots and the key that names their components
COMPOSITION_SLOTS = {
    "Matrix": "Matrix Components",
    "Shale Solid Composition": "Shale Solid Components",
    "Fluid Composition": "Fluid Components",
    "Fluid": "Fluid Components",
}

MATRIX_COMPONENTS = ["Quartz", "Albite"]
SHALE_COMPONENTS = ["Kaolinite"]
FLUID_COMPONENTS = ["CH4"]

# Compressional and shear slownesses [us/ft] pushed into the component database
COMPONENT_SLOWNESSES = {
    "Albite": (40, 90),
    "Kaolinite": (230, 350),
}

## Calculators
REFERENCE_PRESSURE = 3600
ARCHIE_PARAMETERS = {"a": 1.2, "m": 2.1, "n": 2.5}
ARCHIE_MODEL = "Archie"

## Simulators
SAMPLING_RATE = 0.1524 # m, half a foot
NUCLEAR_TOOLS = {"WL": "UT_Longhorn_WL", "LWD": "UT_Longhorn_LWD"}

## Log sets written by the simulators
RESISTIVITY_LOG_SET = "ARC (1-D UT SA) Simulated"
GR_LOG_SET = "Gamma Ray (Longhorn Wireline) Simulated Logs"
DENSITY_LOG_SET = "Density (Longhorn Wireline) Simulated Logs"
PEF_LOG_SET = "PEF (Longhorn Wireline) Simulated Logs"
NEUTRON_LOG_SET = "Neutron (Longhorn Wireline) Simulated Logs"
SONIC_LOG_SET = "Sonic (Longhorn)"
CALIPER_LOG_SET = "CAL"
MINERALOGY_LOG_SET = "Key-Well Mineralogy"

DENSITY_LOG = "\\rho_\\alpha"

# Each entry perturbs one log (or every log of the set if "log" is None).
# Resistivity noise is applied in conductivity units.
NOISE_PROFILE = [
    {"log_set": RESISTIVITY_LOG_SET, "log": None, "multiplicative": 0.03, "additive": 0.5,
     "data_unit": "OHMM", "noise_unit": "MS/M"},
    {"log_set": GR_LOG_SET, "log": "ECGR", "multiplicative": 0.02, "additive": 0.0},
    {"log_set": DENSITY_LOG_SET, "log": DENSITY_LOG, "multiplicative": 0.0, "additive": 0.015},
    {"log_set": PEF_LOG_SET, "log": "PEF", "multiplicative": 0.005, "additive": 0.0},
    {"log_set": NEUTRON_LOG_SET, "log": "NPHI", "multiplicative": 0.02, "additive": 0.0},
    {"log_set": SONIC_LOG_SET, "log": "DTP", "multiplicative": 0.01, "additive": 0.0},
    {"log_set": SONIC_LOG_SET, "log": "DTS", "multiplicative": 0.01, "additive": 0.0},
    {"log_set": CALIPER_LOG_SET, "log": "CAL", "multiplicative": 0.0, "additive": 0.06},
    {"log_set": MINERALOGY_LOG_SET, "log": None, "multiplicative": 0.001, "additive": 0.0007},
]

# Logs gathered into the resistivity log set; keep=None keeps every log
COMPOSITE_TARGET = RESISTIVITY_LOG_SET
COMPOSITE_PLAN = [
    {"log_set": GR_LOG_SET, "keep": ["ECGR"], "rename": {}},
    {"log_set": DENSITY_LOG_SET, "keep": [DENSITY_LOG], "rename": {DENSITY_LOG: "RHO"}},
    {"log_set": PEF_LOG_SET, "keep": ["PEF"], "rename": {}},
    {"log_set": NEUTRON_LOG_SET, "keep": ["NPHI"], "rename": {}},
    {"log_set": SONIC_LOG_SET, "keep": None, "rename": {}},
]

## Synthetic model workflow
MODELING_LIMITS = (1350, 1380)
MIN_LAYER_THICKNESS = 0.2
LAYER_THICKNESS_RANGE = 3.0
BOTTOM_MARGIN = 3.0

## Depth of investigation workflow (nuclear)
DOI_LAYER_THICKNESS = 2.0
DOI_RADIUS_STEPS = 21
DOI_MAX_INVASION = 0.5
DOI_START_MD = 1000
DOI_POROSITY = 0.2
DOI_FORMATION_SW = 0.01
DOI_INVADED_SW = 1.0
DOI_SALINITY = 1000

## Thickness sensitivity workflow (resistivity)
TS_THIN_LAYERS = 10
TS_RESISTIVITY_RANGE = 1000
TS_THICKNESS_STEPS = 6
TS_THICKNESS_INCREMENT = 2.0
TS_MIN_THICKNESS = 1.0
TS_SECTION_THICKNESS = 15.0
TS_POROSITY = 0.25
TS_START_MD = 1000
TS_REFERENCE_RESISTIVITY = 0.025
TS_TOOL = "ARC"
TS_VARIANT = "1-D UT semi-Analytical"
TS_LOG = "A40H"
