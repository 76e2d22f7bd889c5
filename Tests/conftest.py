"""
In-memory stand-in for the scripting model of the simulation application.

The fake objects expose the accessors used by synwell (rCSF, rEM, EM_Calculators,
Simulators, getLogSet, ...) and produce blocky synthetic logs: every simulated
sample takes the value of the layer it falls in. This is enough to check what the
package sends to the application and how it post-processes what comes back.
"""

import os
import sys
from types import SimpleNamespace

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pytest

module_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if module_path not in sys.path:
    sys.path.insert(0, module_path)

from synwell.session import Session


SAMPLE_STEP = 0.05 # m
BOREHOLE_RADIUS = 0.1 # m
DEFAULT_RESISTIVITY = 10.0 # ohmm


def pairs(args):
    return dict(zip(args[0::2], args[1::2]))


## Logs

class FakeLog():

    def __init__(self, name, data):
        self.name = name
        self.rawData = np.asarray(data, dtype=float)


class FakeLogSet():

    def __init__(self, name, depths, depth_units, logs):
        self.name = name
        self.depthData = np.asarray(depths, dtype=float)
        self.depthDataUnits = depth_units
        self.logs = list(logs)
        self.updates = []

    @property
    def a_logsNoDepth(self):
        return list(self.logs)

    def getLog(self, name):
        for log in self.logs:
            if log.name == name:
                return log
        raise KeyError("No log {} in {}".format(name, self.name))

    def removeLogs(self, log):
        self.logs.remove(log)

    def updateFromLogSet(self, other):
        self.updates.append(other.name)
        for log in other.logs:
            self.logs = [own for own in self.logs if own.name != log.name]
            self.logs.append(FakeLog(log.name, log.rawData.copy()))


## Earth model

class FakeCompositions():

    def __init__(self):
        self.calls = []

    def setComposition(self, slot, fractions, components_key, components, *args):
        self.calls.append({"slot": slot, "fractions": np.array(fractions), "components_key": components_key,
                           "components": list(components), "options": pairs(args)})


class FakeEarthModel():

    def __init__(self):
        self.boundaries = np.array([])
        self.radB = np.array([[BOREHOLE_RADIUS, np.inf]])
        self.numRadB = 2
        self.properties = dict()
        self.zone_properties = dict()
        self.invasion = dict()
        self.moves = []
        self.Compositions = FakeCompositions()

    @property
    def n_layers(self):
        return np.shape(self.boundaries)[0] + 1

    def layers(self, idx):
        if idx is None:
            return np.arange(1, self.n_layers + 1)
        return np.atleast_1d(np.asarray(idx, dtype=int))

    def layer_at(self, depths):
        return np.searchsorted(self.boundaries, depths, side='right') + 1

    def addBB(self, *args):
        depths = np.ravel(np.asarray(pairs(args)['md'], dtype=float))
        self.boundaries = np.unique(np.hstack([self.boundaries, depths]))

    def deleteBB(self, *args):
        low, high = pairs(args)['mdSegment']
        self.boundaries = self.boundaries[(self.boundaries < low) | (self.boundaries > high)]

    def moveBB(self, *args):
        options = pairs(args)
        self.moves.append((options['idx'], options['md']))
        self.boundaries[options['idx'] - 1] = options['md']
        assert (np.diff(self.boundaries) > 0).all(), "Bed boundaries crossed"

    def addRad(self, *args):
        options = pairs(args)
        self.invasion[int(options['layerIdx'])] = float(options['rad'])

    def setProperty(self, *args):
        options = pairs(args)
        layer_idx = self.layers(options.get('layerIdx'))
        values = np.atleast_1d(np.asarray(options['value'], dtype=float))
        if np.shape(values)[0] != 1 and np.shape(values)[0] != np.shape(layer_idx)[0]:
            raise ValueError("Property values do not match layers")
        zone = options.get('zoneIdx')
        for i, layer in enumerate(layer_idx):
            value = values[0] if np.shape(values)[0] == 1 else values[i]
            if zone is None or isinstance(zone, str):
                self.properties.setdefault(options['propName'], dict())[int(layer)] = value
            else:
                self.zone_properties.setdefault(options['propName'], dict())[(int(layer), int(zone))] = value

    def getProperty(self, *args):
        options = pairs(args)
        values = self.properties[options['propName']]
        return np.array([values[int(layer)] for layer in self.layers(options.get('layerIdx'))])

    def getMidLayerDepths(self, layer_idx):
        layer_idx = self.layers(layer_idx)
        if (layer_idx < 2).any() or (layer_idx > np.shape(self.boundaries)[0]).any():
            raise IndexError("Layer index out of range")
        return (self.boundaries[layer_idx - 2] + self.boundaries[layer_idx - 1]) / 2


## Calculators and simulators

class FakeCalculator():

    def __init__(self, well, name):
        self.well = well
        self.name = name

    def record(self, method):
        self.well.calls.append((self.name, method))

    def calculate(self):
        self.record("calculate")

    def calculatePorePress(self):
        self.record("calculatePorePress")

    def run(self):
        self.record("run")
        if self.name == "Archies":
            # Rt = Rw / phi^2 for a fully water saturated layer (a=1, m=2)
            em = self.well.rEM
            porosity = em.properties.get("Porosity, Total", dict())
            resistivity = em.properties.setdefault("Resistivity (Parallel or Homogeneous)", dict())
            for layer, rw in em.properties.get("Water Resistivity", dict()).items():
                resistivity[layer] = rw / porosity.get(layer, 0.25)**2


class FakeResistivitySimulator():

    def __init__(self, well):
        self.well = well
        self.Tool = "ARC"
        self.Variant = "1-D UT SA"
        self.OutputLogSet = "ARC (1-D UT SA) Simulated"
        self.runs = 0

    def run(self):
        self.runs += 1
        self.well.calls.append(("Resistivity", "run"))
        depths = self.well.depth_grid()
        em = self.well.rEM
        resistivity = em.properties.get("Resistivity (Parallel or Homogeneous)", dict())
        values = np.array([resistivity.get(int(layer), DEFAULT_RESISTIVITY) for layer in em.layer_at(depths)])
        # Depths are reported in feet, the display unit is meters
        self.well.log_sets[self.OutputLogSet] = FakeLogSet(self.OutputLogSet, depths/0.3048, "FT",
                                                           [FakeLog("A40H", values), FakeLog("P16H", values*1.1)])


class FakeNuclearSimulator():

    def __init__(self, well):
        self.well = well
        self.SimTool = "UT_Longhorn_WL"
        self.DoGR = False
        self.DoDensity = False
        self.DoPEF = False
        self.DoNeutron = False
        self.SamplingRate = 0.1524
        self.RunNucCalcFirst = False

    def runSim(self):
        self.well.calls.append(("Nuclear", "runSim"))
        suffix = "Longhorn LWD" if self.SimTool.endswith("LWD") else "Longhorn Wireline"
        depths = self.well.depth_grid()
        em = self.well.rEM
        layer_idx = em.layer_at(depths)

        # Invaded fraction of the tool volume, full invasion 0.25 m beyond the borehole wall
        invaded = np.array([min(1.0, (em.invasion.get(int(layer), BOREHOLE_RADIUS) - BOREHOLE_RADIUS)/0.25) for layer in layer_idx])
        nphi = 0.05 + 0.15*invaded
        ones = np.ones(np.shape(depths)[0])

        if self.DoNeutron:
            name = "Neutron ({}) Simulated Logs".format(suffix)
            self.well.log_sets[name] = FakeLogSet(name, depths, "M", [FakeLog("NPHI", nphi), FakeLog("TNPH", nphi)])
        if self.DoDensity:
            name = "Density ({}) Simulated Logs".format(suffix)
            self.well.log_sets[name] = FakeLogSet(name, depths, "M", [FakeLog("\\rho_\\alpha", 2.65 - nphi), FakeLog("DRHO", 0.01*ones)])
        if self.DoGR:
            name = "Gamma Ray ({}) Simulated Logs".format(suffix)
            self.well.log_sets[name] = FakeLogSet(name, depths, "M", [FakeLog("ECGR", 50*ones), FakeLog("SGR", 55*ones)])
        if self.DoPEF:
            name = "PEF ({}) Simulated Logs".format(suffix)
            self.well.log_sets[name] = FakeLogSet(name, depths, "M", [FakeLog("PEF", 1.8*ones)])


class FakeSonicSimulator():

    def __init__(self, well):
        self.well = well

    def run(self):
        self.well.calls.append(("SonicLog", "run"))
        depths = self.well.depth_grid()
        ones = np.ones(np.shape(depths)[0])
        self.well.log_sets["Sonic (Longhorn)"] = FakeLogSet("Sonic (Longhorn)", depths, "M",
                                                            [FakeLog("DTP", 70*ones), FakeLog("DTS", 120*ones)])


## Well and case

class FakeWell():

    def __init__(self, name):
        self.name = name
        self.ModelingLimits = [1000.0, 1100.0]
        self.rEM = FakeEarthModel()
        self.rDisplayUnitSys = SimpleNamespace(Distance="M")
        self.calls = []
        self.EM_Calculators = SimpleNamespace(**{name: FakeCalculator(self, name) for name in
                                                 ["Temperature_GeothermalGradient", "PorePressure", "WaterResistivity",
                                                  "Resistivities", "Archies", "Nuclear", "EffectiveMediumTheory"]})
        self.Simulators = SimpleNamespace(Resistivity=FakeResistivitySimulator(self),
                                          Nuclear=FakeNuclearSimulator(self),
                                          SonicLog=FakeSonicSimulator(self))
        self.log_sets = dict()

    def depth_grid(self):
        top, bottom = self.ModelingLimits
        return np.arange(top, bottom + SAMPLE_STEP/2, SAMPLE_STEP)

    def getLogSet(self, name):
        if name not in self.log_sets:
            # Measured logs are present in every well
            depths = self.depth_grid()
            ones = np.ones(np.shape(depths)[0])
            if name == "CAL":
                self.log_sets[name] = FakeLogSet(name, depths, "M", [FakeLog("CAL", 8.5*ones)])
            elif name == "Key-Well Mineralogy":
                self.log_sets[name] = FakeLogSet(name, depths, "M", [FakeLog("VQTZ", 0.7*ones), FakeLog("VALB", 0.3*ones)])
        return self.log_sets[name]


class FakeCase():

    def __init__(self):
        self.wells = dict()
        self.rRockClassDatabase = SimpleNamespace(s_rockClasses=SimpleNamespace(
            Default=SimpleNamespace(ar_model=None, ar_a=1.0, ar_m=2.0, ar_n=2.0,
                                    rEffectiveMediumTheory=SimpleNamespace(UseFromComponentDatabase=None))))
        self.rComponentDatabase = SimpleNamespace(s_SolidDB=SimpleNamespace(
            **{name: SimpleNamespace(slowness_p=None, slowness_s=None) for name in ["Quartz", "Albite", "Kaolinite"]}))

    def addNewWell(self, name):
        unique_name = name
        copy = 1
        while unique_name in self.wells:
            copy += 1
            unique_name = "{} ({})".format(name, copy)
        self.wells[unique_name] = FakeWell(unique_name)
        return self.wells[unique_name]

    def getWell(self, name):
        return self.wells[name]

    def deleteWell(self, name):
        del self.wells[name]


class FakeApp():

    def __init__(self):
        self.rCSF = FakeCase()


@pytest.fixture
def app():
    return FakeApp()


@pytest.fixture
def session(app):
    return Session(app)


@pytest.fixture
def well(session):
    well = session.add_well("Test Well")
    well.modeling_limits = [1000, 1030]
    return well


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
