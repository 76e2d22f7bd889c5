"""
   Example 3
   The script checks how well a resistivity log resolves thin layers
   for several reference water resistivities.

   How to run:
   from the Python console of the simulation application, where the root object
   of the scripting model is available as app:
   exec(open("Example_03.py").read()); run(app)
"""

import numpy as np

import synwell as sw

# Specify input data
reference_resistivities = [0.025, 0.25, 2.5] # ohmm


def run(app):
    sw.setup_logging()
    session = sw.Session(app)

    results = dict()
    for reference_resistivity in reference_resistivities:
        results[reference_resistivity] = sw.thickness_sensitivity_resistivity(session,
            reference_resistivity=reference_resistivity, n_thickness=6, thickness_increment=2,
            output_file="./Thickness_{:.3f}.png".format(reference_resistivity))
        np.set_printoptions(precision=3)
        print(results[reference_resistivity]["sim_contrast"])
    return results
