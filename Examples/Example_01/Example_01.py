"""
   Example 1
   The script builds a well with random layers, simulates resistivity, nuclear
   and sonic logs, adds noise and saves the composite log set.

   How to run:
   from the Python console of the simulation application, where the root object
   of the scripting model is available as app:
   exec(open("Example_01.py").read()); run(app)
"""

import synwell as sw


def run(app):
    sw.setup_logging()
    session = sw.Session(app)

    results = sw.build_synthetic_model(session, well_name="Well 1", modeling_limits=[1350, 1380], seed=1,
        output_folder="./Output")

    print("{} layers".format(len(results["boundaries"]) + 1))
    return results
