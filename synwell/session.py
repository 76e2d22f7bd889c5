# -*- coding: utf-8 -*-

"""
Entry point to a running session of the simulation application.
"""

import logging

from synwell import config
from synwell.well import Well

logger = logging.getLogger(__name__)


class Session():

    def __init__(self, app):
        """
        Attributes
        ----------
        app: object
            Root object of the application scripting model. Its rCSF attribute is the
            current case, which owns the wells and the rock class and component databases.
        """
        self.app = app
        self.case = app.rCSF

    ## Wells

    def add_well(self, name):
        """
        Creates a new well and returns it wrapped in a Well object.
        The application may rename the well to avoid duplicates, read Well.name for the final name.
        """
        well = Well(self.case.addNewWell(name))
        if well.name != name:
            logger.warning("Well %s already exists, the new well is named %s", name, well.name)
        else:
            logger.info("Well %s created", name)
        return well

    def get_well(self, name):
        return Well(self.case.getWell(name))

    def delete_well(self, name):
        self.case.deleteWell(name)
        logger.info("Well %s deleted", name)

    def get_or_add_well(self, well=None, name=None):
        """
        Returns well wrapped in a Well object, or a new well named name if well is None.
        """
        if well is None:
            return self.add_well(name)
        if isinstance(well, Well):
            return well
        return Well(well)

    ## Databases

    def rock_class(self, name="Default"):
        return getattr(self.case.rRockClassDatabase.s_rockClasses, name)

    def set_archie_parameters(self, a=config.ARCHIE_PARAMETERS["a"], m=config.ARCHIE_PARAMETERS["m"],
                              n=config.ARCHIE_PARAMETERS["n"], rock_class="Default", model=config.ARCHIE_MODEL):
        """
        Selects the Archie resistivity model of a rock class and sets its tortuosity (a),
        cementation (m) and saturation (n) exponents.

        Parameters
        -------
        model: object, optional
            Value written to the ar_model attribute of the rock class. Scripting models that expose
            the resistivity model as an enumeration expect its member here
            (e.g. Calculators.E_ResistivityModel.Archie). None keeps the current model.
            By default set to "Archie".
        """
        if a <= 0 or m <= 0 or n <= 0:
            raise ValueError("Archie parameters have to be positive")
        rc = self.rock_class(rock_class)
        if model is not None:
            rc.ar_model = model
        rc.ar_a = a
        rc.ar_m = m
        rc.ar_n = n
        logger.info("Rock class %s: Archie a=%s m=%s n=%s", rock_class, a, m, n)
        return rc

    def set_component_slowness(self, component, slowness_p, slowness_s):
        """
        Sets compressional and shear slownesses of a solid component of the component database.
        """
        if slowness_p <= 0 or slowness_s <= 0:
            raise ValueError("Slownesses have to be positive")
        solid = getattr(self.case.rComponentDatabase.s_SolidDB, component)
        solid.slowness_p = slowness_p
        solid.slowness_s = slowness_s
        return solid

    def set_effective_medium_source(self, source="Slownesses", rock_class="Default"):
        self.rock_class(rock_class).rEffectiveMediumTheory.UseFromComponentDatabase = source
