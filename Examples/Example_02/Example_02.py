"""
   Example 2
   The script compares the response of a neutron porosity log with the radius of
   an invasion front, for a wireline and an LWD tool.

   How to run:
   from the Python console of the simulation application, where the root object
   of the scripting model is available as app:
   exec(open("Example_02.py").read()); run(app)
"""

import logging

import synwell as sw


def run(app):
    sw.setup_logging(level=logging.DEBUG, log_file="./Example_02.log")
    session = sw.Session(app)

    results = dict()
    for sim_type in ["WL", "LWD"]:
        results[sim_type] = sw.depth_of_investigation_nuclear(session, sim_type=sim_type, log_name="NPHI",
            well_name="SensWell {}".format(sim_type), output_file="./DOI_{}.png".format(sim_type))
        print("{}: formation {:.4f}, invaded {:.4f}".format(sim_type, results[sim_type]["formation_value"],
            results[sim_type]["invaded_value"]))
    return results
