# -*- coding: utf-8 -*-

"""
End-to-end workflows run against a session of the simulation application.

build_synthetic_model
    Random layered model, calculators, resistivity/nuclear/sonic simulations, noise and a composite log set.

depth_of_investigation_nuclear
    Response of a nuclear log to an invasion front moving away from the borehole.

thickness_sensitivity_resistivity
    Response of a resistivity log to thin layers of increasing thickness and resistivity contrast.
"""

import datetime
import logging
import os
import sys

import numpy as np

from synwell import config
from synwell import layers
from synwell import plotting
from synwell.well import nuclear_log_set_name, nuclear_tool

logger = logging.getLogger(__name__)


def build_synthetic_model(session, well_name="Well 1", modeling_limits=config.MODELING_LIMITS, seed=None,
                          add_noise=True, composite=True, output_folder=None):
    """
    This function builds a synthetic well with random layers and simulates its logs.

    Parameters
    -------
    session: synwell.session.Session
        Session of the application.

    well_name: str, optional
        Name of the new well. By default set to "Well 1".

    modeling_limits: list, optional
        Top and bottom of the modeling interval. By default set to [1350, 1380].

    seed: int, optional
        Seed of the random generator used for layers, properties and noise.

    add_noise: bool, optional
        Perturb simulated logs following config.NOISE_PROFILE. By default set to True.

    composite: bool, optional
        Gather logs into the resistivity log set following config.COMPOSITE_PLAN. By default set to True.

    output_folder: str, optional
        If given, the composite log set is saved as txt and plotted as png in this folder.

    Returns
    -------
    results: dict
        "well" (Well), "boundaries", "properties", "quartz" (matrix quartz fraction per layer)
        and "resistivity_log_set" (name of the resistivity simulator output).
    """
    start_time = datetime.datetime.now()
    rng = np.random.default_rng(seed)

    ### Well and bed boundaries
    well = session.add_well(well_name)
    well.modeling_limits = modeling_limits
    boundaries = layers.random_bed_boundaries(modeling_limits, rng=rng)
    well.add_bed_boundaries(boundaries)
    n_layers = np.shape(boundaries)[0] + 1
    logger.info("%s: %d layers between %s and %s", well.name, n_layers, modeling_limits[0], modeling_limits[1])

    ### Random composition
    properties = layers.random_layer_properties(n_layers, rng=rng)
    well.set_properties(properties)
    well.set_properties({config.SALINITY: config.DEFAULT_SALINITY, config.SHALE_SALINITY: config.DEFAULT_SALINITY})

    quartz = layers.random_walk_fractions(n_layers, rng=rng)
    well.set_composition("Matrix", config.MATRIX_COMPONENTS, layers.binary_fractions(quartz))
    well.set_composition("Shale Solid Composition", config.SHALE_COMPONENTS, np.ones(n_layers))
    well.set_composition("Fluid Composition", config.FLUID_COMPONENTS, np.ones(n_layers))

    ### Physical properties
    well.calculate_temperature()
    well.calculate_pore_pressure()
    well.calculate_water_resistivity()
    session.set_archie_parameters()
    well.calculate_resistivities()
    well.calculate_nuclear()
    for component, (slowness_p, slowness_s) in config.COMPONENT_SLOWNESSES.items():
        session.set_component_slowness(component, slowness_p, slowness_s)
    session.set_effective_medium_source("Slownesses")
    well.calculate_effective_medium()

    ### Simulations
    resistivity_log_set = well.simulate_resistivity()
    well.simulate_nuclear()
    well.simulate_sonic()

    ### Post-processing
    if add_noise:
        well.apply_noise_profile(rng=rng)
    if composite:
        well.composite_log_sets()

    if output_folder is not None:
        if not os.path.exists(output_folder):
            os.makedirs(output_folder)
        well.export_log_set(config.COMPOSITE_TARGET, output_folder)
        composite_log_set = well.log_set(config.COMPOSITE_TARGET)
        logs = plotting.log_set_to_dict(composite_log_set)
        plotting.plot_log_tracks(logs, depth_unit=composite_log_set.depthDataUnits,
                                 output_file=os.path.join(output_folder, "{}_logs.png".format(well.name)))

    logger.info("%s: synthetic model processed in %s", well.name, datetime.datetime.now() - start_time)
    return {"well": well, "boundaries": boundaries, "properties": properties, "quartz": quartz,
            "resistivity_log_set": resistivity_log_set}


def depth_of_investigation_nuclear(session, well=None, sim_type="WL", log_name="NPHI", well_name="SensWell1",
                                   layer_thickness=config.DOI_LAYER_THICKNESS, n_steps=config.DOI_RADIUS_STEPS,
                                   max_invasion=config.DOI_MAX_INVASION, start_md=config.DOI_START_MD,
                                   porosity=config.DOI_POROSITY, formation_sw=config.DOI_FORMATION_SW,
                                   invaded_sw=config.DOI_INVADED_SW, salinity=config.DOI_SALINITY, output_file=None):
    """
    This function compares the depth of investigation of a nuclear log with the invasion radius.

    Every layer of the model gets its own invasion front, the first one none and the following
    ones a radius growing linearly up to max_invasion beyond the borehole wall. As the front moves
    into the formation the response changes from the formation value to the invaded value.

    Parameters
    -------
    session: synwell.session.Session

    well: Well, optional
        Well to use. Its bed boundaries are deleted. By default a new well named well_name is created.

    sim_type: str, optional
        "WL" (wireline) or "LWD". By default set to "WL".

    log_name: str, optional
        Simulated log to analyse. Names starting with N are read from the neutron log set,
        the others from the density log set. By default set to "NPHI".

    output_file: str, optional
        If given, the figure is saved to this path.

    Returns
    -------
    results: dict
        "well", "invasion_radius" (m beyond the borehole wall, one per layer), "values"
        (log at the middle of each layer), "formation_value", "invaded_value" and "figure".
    """
    sim_tool = nuclear_tool(sim_type)
    log_set = nuclear_log_set_name(log_name, sim_type)
    invasion_radius = np.linspace(0, max_invasion, n_steps)

    well = session.get_or_add_well(well, well_name)
    borehole_radius = well.borehole_radius

    ### Earth model
    well.modeling_limits = [start_md, start_md + n_steps*layer_thickness]
    well.clear_bed_boundaries()
    boundaries = layers.regular_bed_boundaries(start_md, layer_thickness, n_steps)
    well.add_bed_boundaries(boundaries)
    layer_idx = layers.interior_layer_indices(np.shape(boundaries)[0])

    well.set_composition("Fluid", config.FLUID_COMPONENTS, [1.0], zone_idx=np.arange(2, well.n_radial_boundaries + 1))
    well.set_property(config.POROSITY, porosity, layer_idx)
    well.set_property(config.WATER_SATURATION, formation_sw, layer_idx)
    well.set_property(config.SALINITY, salinity, layer_idx, zone_idx="all")

    # The first layer keeps no invasion front
    for i in range(1, n_steps):
        well.add_invasion_zone(borehole_radius + invasion_radius[i], layer_idx[i])
        progress(i, n_steps - 1)
    sys.stdout.write('\n')

    well.set_property(config.WATER_SATURATION, invaded_sw, layer_idx[1:], zone_idx=2)

    ### Simulation
    well.simulate_nuclear(sim_tool=sim_tool, gr=None, density=True, pef=None, neutron=True,
                          sampling_rate=None, run_calculator_first=True)
    values = well.sample_log(log_set, log_name, layer_idx)
    formation_value = values[0]
    invaded_value = values[-1]
    logger.info("%s: %s formation value %.4f, invaded value %.4f", well.name, log_name, formation_value, invaded_value)

    figure = plotting.plot_depth_of_investigation(invasion_radius*100, values, log_name, formation_value, invaded_value,
                                                  output_file=output_file)
    return {"well": well, "invasion_radius": invasion_radius, "values": values,
            "formation_value": formation_value, "invaded_value": invaded_value, "figure": figure}


def thickness_sensitivity_resistivity(session, well=None, well_name=None, reference_resistivity=config.TS_REFERENCE_RESISTIVITY,
                                      n_thin=config.TS_THIN_LAYERS, resistivity_range=config.TS_RESISTIVITY_RANGE,
                                      n_thickness=config.TS_THICKNESS_STEPS, thickness_increment=config.TS_THICKNESS_INCREMENT,
                                      min_thickness=config.TS_MIN_THICKNESS, section_thickness=config.TS_SECTION_THICKNESS,
                                      porosity=config.TS_POROSITY, start_md=config.TS_START_MD,
                                      tool=config.TS_TOOL, variant=config.TS_VARIANT, log_name=config.TS_LOG, output_file=None):
    """
    This function compares the change of a simulated resistivity log with the change of the
    earth model resistivity in thin layers of different thickness.

    Thick reference layers of constant water resistivity alternate with n_thin thin layers whose
    water resistivity increases logarithmically from reference_resistivity to
    resistivity_range*reference_resistivity. For each of the n_thickness steps the top boundaries
    of the thin layers are moved up by thickness_increment and the simulator is run again.

    Parameters
    -------
    session: synwell.session.Session

    well: Well, optional
        Well to use. Its bed boundaries are deleted. By default a new well is created.

    well_name: str, optional
        Name of the new well. By default set to "SensWellRes <reference_resistivity>".

    reference_resistivity: float, optional
        Water resistivity of the reference layers [ohmm]. By default set to 0.025.

    output_file: str, optional
        If given, the figure is saved to this path.

    Returns
    -------
    results: dict
        "well", "thicknesses" (one per step), "em_resistivity" (earth model resistivity of the thin
        layers), "em_contrast" (log10 contrast to the first thin layer), "sim_contrast" (simulated
        log10 contrast thin/reference, n_thin x n_thickness), "sim_log_resistivity"
        (log10 of the simulated thin layer value) and "figure".
    """
    if reference_resistivity <= 0:
        raise ValueError("Reference water resistivity has to be higher than 0 ohmm")
    if min_thickness + thickness_increment*(n_thickness - 1) >= section_thickness:
        raise ValueError("Thin layers would grow thicker than a section")

    if well_name is None:
        well_name = "SensWellRes {:.2f}".format(reference_resistivity)
    well = session.get_or_add_well(well, well_name)

    ### Earth model
    well.modeling_limits = [start_md, start_md + (n_thin + 1)*section_thickness]
    well.clear_bed_boundaries()
    boundaries, _, thin_boundaries = layers.interleaved_bed_boundaries(start_md, section_thickness, n_thin, min_thickness)
    well.add_bed_boundaries(boundaries)
    n_boundaries = np.shape(boundaries)[0]
    layer_idx = layers.interior_layer_indices(n_boundaries)
    thin_idx = np.arange(3, n_boundaries + 1, 2)

    well.set_property(config.POROSITY, porosity, layer_idx)
    well.set_property(config.WATER_RESISTIVITY, reference_resistivity, layer_idx)
    thin_resistivity = np.logspace(np.log10(reference_resistivity), np.log10(resistivity_range*reference_resistivity), n_thin)
    well.set_property(config.WATER_RESISTIVITY, thin_resistivity, thin_idx)

    ### Earth model resistivities do not depend on thickness
    well.calculate_archie()
    em_resistivity = np.ravel(well.get_property(config.RESISTIVITY, thin_idx))
    em_contrast = np.log10(em_resistivity) - np.log10(em_resistivity[0])

    thicknesses = np.full(n_thickness, np.nan)
    sim_contrast = np.full([n_thin, n_thickness], np.nan)
    sim_log_resistivity = np.full([n_thin, n_thickness], np.nan)

    start_time = datetime.datetime.now()
    for step in range(n_thickness):
        shift = thickness_increment*step
        thicknesses[step] = min_thickness + shift

        # Thin layer tops are every second boundary, starting with the second one
        for i, md in enumerate(thin_boundaries - shift, start=1):
            well.move_bed_boundary(2*i, md)

        output_log_set = well.simulate_resistivity(tool, variant)
        thin_values = well.sample_log(output_log_set, log_name, thin_idx)
        reference_values = well.sample_log(output_log_set, log_name, thin_idx - 1)
        sim_contrast[:, step] = np.log10(thin_values) - np.log10(reference_values)
        sim_log_resistivity[:, step] = np.log10(thin_values)
        progress(step + 1, n_thickness)
    sys.stdout.write('\n')
    logger.info("%s: thickness sensitivity processed in %s", well.name, datetime.datetime.now() - start_time)

    figure = plotting.plot_thickness_sensitivity(em_contrast, sim_contrast, thicknesses, well.name, em_resistivity[0],
                                                 output_file=output_file)
    return {"well": well, "thicknesses": thicknesses, "em_resistivity": em_resistivity, "em_contrast": em_contrast,
            "sim_contrast": sim_contrast, "sim_log_resistivity": sim_log_resistivity, "figure": figure}


def progress(step, total):
    """
    Prints a progress bar on a single terminal line.
    """
    percent = (step * 100) // max(total, 1)
    sys.stdout.write('\rProgress: [%-50s] %3i%% ' % ('=' * (percent // 2), percent))
    sys.stdout.flush()
