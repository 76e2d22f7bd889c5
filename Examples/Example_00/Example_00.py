"""
   Example 0
   The script allows to print descriptions of all main functions from the package.

   How to run:
   python3 Example_00.py
"""

import synwell as sw

help(sw.Session)

help(sw.Well)

help(sw.build_synthetic_model)

help(sw.depth_of_investigation_nuclear)

help(sw.thickness_sensitivity_resistivity)
