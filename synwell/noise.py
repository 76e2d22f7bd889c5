# -*- coding: utf-8 -*-

"""
Synthetic noise for simulated logs.

The perturbed series is y = x + x*N(0,1)*multiplicative + N(0,1)*additive,
with fresh samples for every element.
"""

import logging

import numpy as np

from synwell import units

logger = logging.getLogger(__name__)


def add_noise(data, multiplicative=0.0, additive=0.0, rng=None):
    """
    This function returns a noisy copy of a series.

    Parameters
    -------
    data: array
        Values to perturb. The input is not modified.

    multiplicative: float, optional
        Standard deviation of the noise relative to the value. By default set to 0.

    additive: float, optional
        Standard deviation of the noise in data units. By default set to 0.

    rng: numpy.random.Generator, optional

    Returns
    -------
    noisy: array
        A numpy array with the shape of data. NaN values stay NaN.
    """
    if multiplicative < 0 or additive < 0:
        raise ValueError("Noise levels have to be non-negative")
    rng = np.random.default_rng() if rng is None else rng

    values = np.array(data, dtype=float)
    noisy = values.copy()
    if multiplicative > 0:
        noisy = noisy + values * rng.standard_normal(np.shape(values)) * multiplicative
    if additive > 0:
        noisy = noisy + rng.standard_normal(np.shape(values)) * additive
    return noisy


def add_log_noise(log, multiplicative=0.0, additive=0.0, data_unit=None, noise_unit=None, rng=None):
    """
    This function perturbs the raw data of an application log in place.

    If noise_unit is given, the data are converted from data_unit to noise_unit, perturbed and
    converted back (e.g. resistivity noise defined in conductivity units).
    """
    if (data_unit is None) != (noise_unit is None):
        raise ValueError("data_unit and noise_unit have to be given together")

    values = np.asarray(log.rawData, dtype=float)
    if noise_unit is not None:
        values = units.convert(values, data_unit, noise_unit)
    values = add_noise(values, multiplicative, additive, rng)
    if noise_unit is not None:
        values = units.convert(values, noise_unit, data_unit)
    log.rawData = values

    logger.debug("Noise added to %s (multiplicative=%s, additive=%s)", log.name, multiplicative, additive)
    return values


def add_log_set_noise(log_set, log_names=None, multiplicative=0.0, additive=0.0, data_unit=None, noise_unit=None, rng=None):
    """
    Perturbs every log of a log set, or the logs named in log_names.
    """
    rng = np.random.default_rng() if rng is None else rng
    if log_names is None:
        logs = list(log_set.a_logsNoDepth)
    else:
        logs = [log_set.getLog(name) for name in log_names]

    for log in logs:
        add_log_noise(log, multiplicative, additive, data_unit, noise_unit, rng)
    return logs
