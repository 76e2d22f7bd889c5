# -*- coding: utf-8 -*-

"""
synwell
=========================================
synwell is a Python package that drives a petrophysical well-log simulation application through its
scripting object model. It builds synthetic wells and layered earth models, assigns properties and
compositions, runs the built-in calculators and log simulators, adds synthetic noise to the simulated
logs and composites and plots the results.
"""

__version__ = "1.0.0"

from synwell.session import Session
from synwell.well import Well
from synwell.workflows import build_synthetic_model, depth_of_investigation_nuclear, thickness_sensitivity_resistivity
from synwell.logging_config import setup_logging

__all__ = ["Session", "Well", "build_synthetic_model", "depth_of_investigation_nuclear",
           "thickness_sensitivity_resistivity", "setup_logging"]
