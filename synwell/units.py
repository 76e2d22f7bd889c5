# -*- coding: utf-8 -*-

"""
Unit conversion for the series exchanged with the application.

Only the units that appear in depth data, resistivity logs and the calculator
inputs are covered. Linear units are stored as factors to the base unit of their
category, the remaining ones as a pair of functions (to base, from base).
"""

import numpy as np


# Factors to the base unit (first entry) of each category
conversion_table = {
    "distance": {'M': 1.0, 'DM': 0.1, 'CM': 0.01, 'MM': 0.001, 'IN': 0.0254, 'FT': 0.3048},
    "pressure": {'PA': 1.0, 'KPA': 1.0e3, 'MPA': 1.0e6, 'BAR': 1.0e5, 'ATM': 101325.0, 'PSI': 6894.757293168361},
    "slowness": {'US/M': 1.0, 'US/FT': 1/0.3048},
    "density": {'KG/M3': 1.0, 'G/CC': 1000.0},
}

# Non-linear units: (to base, from base)
function_table = {
    "resistivity": {
        'OHMM': (lambda x: x, lambda x: x),
        'S/M': (lambda x: 1/x, lambda x: 1/x),
        'MS/M': (lambda x: 1000/x, lambda x: 1000/x),
    },
    "temperature": {
        'DEGC': (lambda x: x, lambda x: x),
        'DEGF': (lambda x: (x - 32)*5/9, lambda x: x*9/5 + 32),
        'K': (lambda x: x - 273.15, lambda x: x + 273.15),
    },
}

aliases = {
    'OHM.M': 'OHMM', 'OHM-M': 'OHMM', 'OHM M': 'OHMM',
    'MS_M': 'MS/M', 'MMHO/M': 'MS/M', 'S_M': 'S/M',
    'METER': 'M', 'METERS': 'M', 'FEET': 'FT', 'FOOT': 'FT',
    'G/CM3': 'G/CC', 'US/F': 'US/FT',
    'C': 'DEGC', 'F': 'DEGF',
}


def normalize_unit(unit):
    """
    Returns the canonical (upper case) symbol of a unit.
    """
    if not isinstance(unit, str):
        raise ValueError("Units have to be provided as strings, got {}".format(unit))
    symbol = unit.strip().upper()
    return aliases.get(symbol, symbol)


def unit_category(unit):
    """
    Returns the name of the category a unit belongs to.
    """
    symbol = normalize_unit(unit)
    for category, units in conversion_table.items():
        if symbol in units:
            return category
    for category, units in function_table.items():
        if symbol in units:
            return category
    raise ValueError("{} unit not recognized".format(unit))


def convert(data, from_unit, to_unit):
    """
    This function converts a value or an array of values between two units of the same category.

    Parameters
    -------
    data: float or array
        Values to convert. The input is not modified.

    from_unit: str
        Unit of the input values (e.g. "OHMM", "FT").

    to_unit: str
        Requested unit (e.g. "MS/M", "M").

    Returns
    -------
    converted: array
        A numpy array of converted values with the shape of the input.
    """
    values = np.array(data, dtype=float)
    source = normalize_unit(from_unit)
    target = normalize_unit(to_unit)

    category = unit_category(source)
    if unit_category(target) != category:
        raise ValueError("Cannot convert {} to {}: units describe different quantities".format(from_unit, to_unit))
    if source == target:
        return values

    if category in conversion_table:
        factors = conversion_table[category]
        return values * factors[source] / factors[target]

    to_base = function_table[category][source][0]
    from_base = function_table[category][target][1]
    # Zero resistivity maps to infinite conductivity and back
    with np.errstate(divide='ignore'):
        return from_base(to_base(values))
