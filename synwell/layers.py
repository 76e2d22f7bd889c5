# -*- coding: utf-8 -*-

"""
Construction of bed boundaries and per-layer property values.

Nothing in this module talks to the application: the functions return numpy
arrays that are later pushed into the earth model by synwell.well.Well.

Layer indices follow the application convention: layer k (counted from 1) lies
between boundaries k-1 and k, layer 1 sits above the first boundary.
"""

import logging

import numpy as np

from synwell import config

logger = logging.getLogger(__name__)


## Bed boundaries

def random_bed_boundaries(modeling_limits, min_thickness=config.MIN_LAYER_THICKNESS,
                          thickness_range=config.LAYER_THICKNESS_RANGE, bottom_margin=config.BOTTOM_MARGIN, rng=None):
    """
    This function draws bed boundaries of random thickness within a modeling interval.

    Parameters
    -------
    modeling_limits: list
        A list of two floats, top and bottom of the modeling interval (measured depth).

    min_thickness: float, optional
        Minimal thickness of a layer. By default set to 0.2.

    thickness_range: float, optional
        Width of the uniform distribution added to min_thickness. By default set to 3.

    bottom_margin: float, optional
        No new boundary is drawn once the last one is deeper than bottom - bottom_margin.
        By default set to 3.

    rng: numpy.random.Generator, optional
        Source of random numbers. By default a fresh generator is created.

    Returns
    -------
    boundaries: array
        A 1D numpy array of strictly increasing depths located inside the modeling interval.
    """
    top, bottom = check_modeling_limits(modeling_limits)
    if min_thickness <= 0 or thickness_range < 0:
        raise ValueError("Layer thickness parameters have to be positive")
    rng = np.random.default_rng() if rng is None else rng

    # The first layer never reaches below the middle of a narrow interval
    boundaries = [top + min(min_thickness + rng.random()*thickness_range, (bottom - top)/2)]
    while boundaries[-1] <= bottom - bottom_margin:
        boundaries.append(boundaries[-1] + min_thickness + rng.random()*thickness_range)

    boundaries = np.array(boundaries)
    inside = boundaries < bottom
    if not inside.all():
        logger.debug("Dropped %d boundaries below the modeling interval", np.count_nonzero(~inside))
    return boundaries[inside]


def regular_bed_boundaries(top, thickness, n_layers):
    """
    Returns n_layers + 1 boundaries spaced by thickness, starting at top.
    """
    if thickness <= 0:
        raise ValueError("Layer thickness has to be positive")
    if n_layers < 1:
        raise ValueError("At least one layer is required")
    return top + thickness*np.arange(n_layers + 1, dtype=float)


def interleaved_bed_boundaries(top, section_thickness, n_sections, thin_thickness):
    """
    This function builds a model of thick reference layers alternating with thin layers.

    Reference boundaries are placed every section_thickness (n_sections + 2 of them). A thin layer
    of thin_thickness is placed just above each of the n_sections interior reference boundaries.

    Returns
    -------
    boundaries: array
        Sorted union of reference and thin layer boundaries.

    reference_boundaries: array
        Boundaries of the reference sections.

    thin_boundaries: array
        Top boundaries of the thin layers.
    """
    if thin_thickness <= 0 or thin_thickness >= section_thickness:
        raise ValueError("Thin layers have to be thinner than a section and thicker than 0")
    reference_boundaries = top + section_thickness*np.arange(n_sections + 2, dtype=float)
    thin_boundaries = reference_boundaries[1:n_sections + 1] - thin_thickness
    boundaries = np.sort(np.hstack([reference_boundaries, thin_boundaries]))
    return boundaries, reference_boundaries, thin_boundaries


def check_modeling_limits(modeling_limits):
    if len(modeling_limits) != 2:
        raise ValueError("Modeling limits have to be given as [top, bottom]")
    top, bottom = float(modeling_limits[0]), float(modeling_limits[1])
    if not top < bottom:
        raise ValueError("Top of the modeling interval has to be shallower than its bottom")
    return top, bottom


def check_bed_boundaries(depths, modeling_limits=None):
    """
    Raises ValueError unless the depths are strictly increasing (and within the modeling limits if given).
    """
    depths = np.atleast_1d(np.asarray(depths, dtype=float))
    if depths.ndim != 1 or np.shape(depths)[0] == 0:
        raise ValueError("Bed boundaries have to be a non-empty 1D sequence of depths")
    if np.isnan(depths).any():
        raise ValueError("Bed boundaries cannot contain NaN values")
    if (np.diff(depths) <= 0.0).any():
        raise ValueError("Bed boundaries have to be strictly increasing")
    if modeling_limits is not None:
        top, bottom = check_modeling_limits(modeling_limits)
        tolerance = 1e-9*max(1.0, abs(bottom))
        if depths[0] < top - tolerance or depths[-1] > bottom + tolerance:
            raise ValueError("Bed boundaries have to lie within the modeling interval [{}, {}]".format(top, bottom))
    return depths


def interior_layer_indices(n_boundaries):
    """
    Indices of the layers between the first and the last boundary.
    """
    return np.arange(2, n_boundaries + 1)


## Layer properties

def jittered_values(n_layers, mean, std, rng=None):
    """
    Absolute values of normal samples, one per layer.
    """
    rng = np.random.default_rng() if rng is None else rng
    return np.abs(rng.normal(mean, std, n_layers))


def random_layer_properties(n_layers, distributions=None, rng=None):
    """
    This function draws one value per layer for each property of the distributions table.

    Parameters
    -------
    n_layers: int
        Number of layers of the model.

    distributions: dict, optional
        Property name -> (mean, standard deviation).
        By default set to config.LAYER_PROPERTY_DISTRIBUTIONS.

    rng: numpy.random.Generator, optional

    Returns
    -------
    properties: dict
        Property name -> 1D numpy array of n_layers non-negative values.
    """
    if distributions is None:
        distributions = config.LAYER_PROPERTY_DISTRIBUTIONS
    rng = np.random.default_rng() if rng is None else rng

    properties = dict()
    for name, (mean, std) in distributions.items():
        properties[name] = jittered_values(n_layers, mean, std, rng)
    return properties


def random_walk_fractions(n_layers, start_range=(0.8, 1.0), step=0.04, rng=None):
    """
    This function draws a volume fraction that drifts from layer to layer.

    The first layer is drawn uniformly from start_range, each following one adds a normal step
    of standard deviation step. Values leaving [0, 1] are pulled back by whole steps.
    """
    if n_layers < 1:
        raise ValueError("At least one layer is required")
    if step <= 0:
        raise ValueError("Random walk step has to be positive")
    rng = np.random.default_rng() if rng is None else rng

    fractions = np.empty(n_layers)
    fractions[0] = start_range[0] + rng.random()*(start_range[1] - start_range[0])
    for i in range(1, n_layers):
        fractions[i] = fractions[i-1] + rng.normal()*step
        while fractions[i] > 1:
            fractions[i] -= step
        while fractions[i] < 0:
            fractions[i] += step
    return fractions


def binary_fractions(values):
    """
    Returns an (n, 2) array of [value, 1 - value] rows.
    """
    values = np.asarray(values, dtype=float)
    return np.vstack([values, 1 - values]).T
