# -*- coding: utf-8 -*-

"""
Wrapper around a well object of the simulation application.

The Well class translates Python calls into the accessors exposed by the application
scripting model: the earth model (rEM), the property calculators (EM_Calculators),
the log simulators (Simulators) and the log sets (getLogSet). Errors raised by the
application are not caught here.
"""

import datetime
import logging
import os
import re

import numpy as np
import scipy.interpolate as spi

from synwell import config
from synwell import layers
from synwell import noise
from synwell import units

logger = logging.getLogger(__name__)


class Well():

    def __init__(self, handle):
        """
        Attributes
        ----------
        handle: object
            The well object returned by the application (e.g. by rCSF.addNewWell).
        """
        self.handle = handle

    def __repr__(self):
        return "Well({!r})".format(self.name)

    @property
    def name(self):
        return self.handle.name

    @property
    def modeling_limits(self):
        return [float(x) for x in np.ravel(self.handle.ModelingLimits)]

    @modeling_limits.setter
    def modeling_limits(self, limits):
        top, bottom = layers.check_modeling_limits(limits)
        self.handle.ModelingLimits = [top, bottom]

    @property
    def earth_model(self):
        return self.handle.rEM

    @property
    def display_distance_unit(self):
        return self.handle.rDisplayUnitSys.Distance

    ## Earth model geometry

    def add_bed_boundaries(self, md):
        """
        Adds bed boundaries at the given measured depths.
        """
        depths = layers.check_bed_boundaries(md, self.modeling_limits)
        self.earth_model.addBB('md', depths)
        logger.debug("%s: %d bed boundaries added", self.name, np.shape(depths)[0])
        return depths

    def clear_bed_boundaries(self):
        self.earth_model.deleteBB('mdSegment', [-np.inf, np.inf])

    def move_bed_boundary(self, idx, md):
        self.earth_model.moveBB('idx', idx, 'md', md)

    def add_invasion_zone(self, radius, layer_idx, radius_units="m"):
        """
        Adds a radial boundary (invasion front) at radius in the given layer.
        """
        if radius <= 0:
            raise ValueError("Invasion radius has to be positive")
        self.earth_model.addRad('rad', radius, 'radUnits', radius_units, 'layerIdx', layer_idx)

    @property
    def borehole_radius(self):
        return float(np.atleast_2d(self.earth_model.radB)[0, 0])

    @property
    def n_radial_boundaries(self):
        return int(self.earth_model.numRadB)

    def mid_layer_depths(self, layer_idx):
        return np.ravel(np.asarray(self.earth_model.getMidLayerDepths(layer_idx), dtype=float))

    ## Properties and compositions

    def set_property(self, name, value, layer_idx=None, zone_idx=None):
        """
        Sets a named earth model property.

        Parameters
        -------
        name: str
            Property name, e.g. "Porosity, Total" or "Water Resistivity".

        value: float or array
            A single value for every selected layer or one value per selected layer.

        layer_idx: int or array, optional
            Target layers. By default all layers.

        zone_idx: int, array or "all", optional
            Target radial zones. By default the application default.
        """
        self.earth_model.setProperty(*name_value_pairs(propName=name, value=value, layerIdx=layer_idx, zoneIdx=zone_idx))

    def set_properties(self, properties, layer_idx=None, zone_idx=None):
        for name, value in properties.items():
            self.set_property(name, value, layer_idx, zone_idx)

    def get_property(self, name, layer_idx=None):
        return np.asarray(self.earth_model.getProperty(*name_value_pairs(propName=name, layerIdx=layer_idx)), dtype=float)

    def set_composition(self, slot, components, fractions, zone_idx=None):
        """
        Sets the volume fractions of the components of a composition slot.

        Parameters
        -------
        slot: str
            "Matrix", "Shale Solid Composition", "Fluid Composition" (or "Fluid").

        components: list
            Component names, e.g. ["Quartz", "Albite"].

        fractions: array
            One row per layer, one column per component. Rows have to sum to 1.
            A 1D array is accepted for a single component or a single layer.

        zone_idx: int or array, optional
            Target radial zones.
        """
        if slot not in config.COMPOSITION_SLOTS:
            raise ValueError("{} composition slot not recognized. Allowed slots: {}".format(slot, ", ".join(config.COMPOSITION_SLOTS)))
        fractions = check_fractions(fractions, len(components))
        self.earth_model.Compositions.setComposition(slot, fractions, config.COMPOSITION_SLOTS[slot], list(components),
                                                     *name_value_pairs(zoneIdx=zone_idx))

    ## Calculators

    def run_calculator(self, name, method="calculate", **settings):
        """
        Sets attributes of an earth model calculator and runs it.
        """
        calculator = getattr(self.handle.EM_Calculators, name)
        for key, value in settings.items():
            setattr(calculator, key, value)
        logger.info("%s: running %s calculator", self.name, name)
        getattr(calculator, method)()
        return calculator

    def calculate_temperature(self):
        return self.run_calculator("Temperature_GeothermalGradient")

    def calculate_pore_pressure(self, reference_pressure=config.REFERENCE_PRESSURE):
        return self.run_calculator("PorePressure", method="calculatePorePress", RefPress=reference_pressure)

    def calculate_water_resistivity(self):
        return self.run_calculator("WaterResistivity")

    def calculate_resistivities(self):
        return self.run_calculator("Resistivities")

    def calculate_archie(self):
        return self.run_calculator("Archies", method="run")

    def calculate_nuclear(self, in_situ_salinity=True, in_situ_pressure=True):
        return self.run_calculator("Nuclear", InSituSalinity=in_situ_salinity, InSituPressure=in_situ_pressure)

    def calculate_effective_medium(self):
        return self.run_calculator("EffectiveMediumTheory")

    ## Simulators

    def run_simulator(self, name, method="run", **settings):
        """
        Sets attributes of a log simulator and runs it.
        """
        simulator = getattr(self.handle.Simulators, name)
        for key, value in settings.items():
            setattr(simulator, key, value)
        start_time = datetime.datetime.now()
        getattr(simulator, method)()
        logger.info("%s: %s simulation processed in %s", self.name, name, datetime.datetime.now() - start_time)
        return simulator

    def simulate_resistivity(self, tool=None, variant=None):
        """
        Runs the resistivity simulator and returns the name of its output log set.
        """
        settings = dict()
        if tool is not None:
            settings["Tool"] = tool
        if variant is not None:
            settings["Variant"] = variant
        simulator = self.run_simulator("Resistivity", **settings)
        return simulator.OutputLogSet

    def simulate_nuclear(self, sim_tool=None, gr=True, density=True, pef=True, neutron=True,
                         sampling_rate=config.SAMPLING_RATE, run_calculator_first=None):
        """
        Runs the nuclear simulator. Settings passed as None keep the value already set in the application.
        """
        settings = {"SimTool": sim_tool, "DoGR": gr, "DoDensity": density, "DoPEF": pef, "DoNeutron": neutron,
                    "SamplingRate": sampling_rate, "RunNucCalcFirst": run_calculator_first}
        settings = {key: value for key, value in settings.items() if value is not None}
        return self.run_simulator("Nuclear", method="runSim", **settings)

    def simulate_sonic(self):
        return self.run_simulator("SonicLog")

    ## Log sets

    def log_set(self, name):
        return self.handle.getLogSet(name)

    def log(self, log_set, log_name):
        return self.log_set(log_set).getLog(log_name)

    def get_log_data(self, log_set, log_name):
        return np.asarray(self.log(log_set, log_name).rawData, dtype=float)

    def set_log_data(self, log_set, log_name, data):
        self.log(log_set, log_name).rawData = np.asarray(data, dtype=float)

    def add_noise(self, log_set, log_name=None, multiplicative=0.0, additive=0.0, data_unit=None, noise_unit=None, rng=None):
        """
        Perturbs one log of a log set, or all of its logs if log_name is None.
        """
        log_names = None if log_name is None else [log_name]
        return noise.add_log_set_noise(self.log_set(log_set), log_names, multiplicative, additive, data_unit, noise_unit, rng)

    def apply_noise_profile(self, profile=None, rng=None):
        """
        Applies every entry of a noise profile (by default config.NOISE_PROFILE) and returns the number of perturbed logs.
        """
        if profile is None:
            profile = config.NOISE_PROFILE
        rng = np.random.default_rng() if rng is None else rng
        perturbed = 0
        for entry in profile:
            logs = self.add_noise(entry["log_set"], entry.get("log"), entry.get("multiplicative", 0.0), entry.get("additive", 0.0),
                                  entry.get("data_unit"), entry.get("noise_unit"), rng)
            perturbed += len(logs)
        logger.info("%s: noise added to %d logs", self.name, perturbed)
        return perturbed

    def composite_log_sets(self, target=config.COMPOSITE_TARGET, plan=None):
        """
        This function gathers logs of several log sets into a target log set.

        Parameters
        -------
        target: str
            Name of the log set that receives the logs.

        plan: list, optional
            A list of dictionaries with keys "log_set" (source name), "keep" (list of log names to keep,
            None keeps every log) and "rename" (old name -> new name).
            By default set to config.COMPOSITE_PLAN.

        Returns
        -------
        target_log_set: object
            The application log set holding the composite.
        """
        if plan is None:
            plan = config.COMPOSITE_PLAN
        target_log_set = self.log_set(target)
        for entry in plan:
            source = self.log_set(entry["log_set"])
            keep = entry.get("keep")
            rename = entry.get("rename") or dict()
            # Walk backwards since removing logs shifts the positions of the following ones
            for log in reversed(list(source.a_logsNoDepth)):
                if keep is not None and log.name not in keep:
                    source.removeLogs(log)
                elif log.name in rename:
                    log.name = rename[log.name]
            target_log_set.updateFromLogSet(source)
            logger.debug("%s: %s merged into %s", self.name, entry["log_set"], target)
        return target_log_set

    def sample_log(self, log_set, log_name, layer_idx):
        """
        This function extracts log values at the middle of the given layers.

        Depth data of the log set are converted to the display distance unit of the well
        before linear interpolation. Layers outside the logged interval get NaN.
        """
        source = self.log_set(log_set)
        log = source.getLog(log_name)
        log_depths = np.ravel(units.convert(source.depthData, source.depthDataUnits, self.display_distance_unit))
        interpolation = spi.interp1d(log_depths, np.ravel(np.asarray(log.rawData, dtype=float)),
                                     kind='linear', bounds_error=False, fill_value=np.nan)
        values = interpolation(self.mid_layer_depths(layer_idx))
        if np.isnan(values).any():
            logger.warning("%s: %d samples of %s outside the logged interval", self.name, np.count_nonzero(np.isnan(values)), log_name)
        return values

    def export_log_set(self, log_set, output_folder, log_names="auto"):
        """
        This function saves logs of a log set to a tab separated txt file.

        Parameters
        -------
        log_set: str
            Name of the log set.

        output_folder: str
            A path to the folder where a Results_<timestamp> subfolder is created.

        log_names: list, optional
            Logs to save. By default set to "auto" will save all logs of the set.

        Returns
        -------
        path: str
            Path of the written file.
        """
        source = self.log_set(log_set)
        if log_names == "auto":
            logs = list(source.a_logsNoDepth)
        else:
            logs = [source.getLog(name) for name in log_names]

        output_subfolder = os.path.join(output_folder, "Results_{}".format(datetime.datetime.now().strftime("%Y_%m_%d__%H_%M_%S")))
        if not os.path.exists(output_subfolder):
            os.makedirs(output_subfolder)

        results = np.ravel(np.asarray(source.depthData, dtype=float))
        for log in logs:
            results = np.vstack([results, np.ravel(np.asarray(log.rawData, dtype=float))])

        names = ['DEPTH'] + [log.name for log in logs]
        header = '\t'.join(names) + '\n' + '\t'.join([str(source.depthDataUnits)] + ['-']*len(logs))
        path = os.path.join(output_subfolder, "{}.txt".format(re.sub(r'[^\w\-. ()]', '_', log_set)))
        np.savetxt(path, np.atleast_2d(results).T, fmt='%.4f', delimiter='\t', header=header, comments='')
        logger.info("%s: %s saved to %s", self.name, log_set, path)
        return path


## Helper functions

def name_value_pairs(**arguments):
    """
    Flattens keyword arguments into the name/value argument list the application expects.
    Arguments set to None are left out.
    """
    pairs = list()
    for name, value in arguments.items():
        if value is not None:
            pairs += [name, value]
    return pairs


def check_fractions(fractions, n_components, tolerance=1e-6):
    """
    Returns fractions as an (n_layers, n_components) array after checking they are valid volume fractions.
    """
    fractions = np.asarray(fractions, dtype=float)
    if fractions.ndim == 1:
        if n_components == 1:
            fractions = fractions.reshape(-1, 1)
        else:
            fractions = fractions.reshape(1, -1)
    if fractions.ndim != 2 or np.shape(fractions)[1] != n_components:
        raise ValueError("Composition fractions have to provide one column per component ({} expected)".format(n_components))
    if np.isnan(fractions).any() or (fractions < 0).any() or (fractions > 1).any():
        raise ValueError("Composition fractions have to lie between 0 and 1")
    if (np.abs(np.sum(fractions, axis=1) - 1) > tolerance).any():
        raise ValueError("Composition fractions have to sum to 1 in every layer")
    return fractions


def nuclear_log_set_name(log_name, sim_type="WL"):
    """
    Name of the log set the nuclear simulator writes log_name to.
    Logs starting with N are read from the neutron set, the others from the density set.
    """
    if sim_type.upper().startswith("WL"):
        suffix = "Longhorn Wireline"
    elif sim_type.upper().startswith("LWD"):
        suffix = "Longhorn LWD"
    else:
        raise ValueError("Incorrect simulation type - use 'WL' or 'LWD'")
    kind = "Neutron" if log_name.upper().startswith("N") else "Density"
    return "{} ({}) Simulated Logs".format(kind, suffix)


def nuclear_tool(sim_type="WL"):
    """
    Name of the nuclear simulation tool for a wireline or LWD run.
    """
    for key, tool in config.NUCLEAR_TOOLS.items():
        if sim_type.upper().startswith(key):
            return tool
    raise ValueError("Incorrect simulation type - use 'WL' or 'LWD'")
