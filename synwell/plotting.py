# -*- coding: utf-8 -*-

"""
Figures comparing simulated logs and sensitivity studies.
"""

import logging

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


def log_set_to_dict(log_set, log_names="auto"):
    """
    Returns a dictionary of (n, 2) arrays [depth, value] for the logs of an application log set.
    """
    depths = np.ravel(np.asarray(log_set.depthData, dtype=float))
    if log_names == "auto":
        logs = list(log_set.a_logsNoDepth)
    else:
        logs = [log_set.getLog(name) for name in log_names]
    return {log.name: np.vstack([depths, np.ravel(np.asarray(log.rawData, dtype=float))]).T for log in logs}


def plot_log_tracks(logs, plot_layout="auto", depth_lim="auto", value_lim="auto", aspect_ratio="auto",
                    at_nan="break", colors="auto", depth_unit="m", output_file=None):
    """
    This function plots logs on tracks sharing the depth axis.

    Parameters
    -------
    logs: dict
        Log name -> (n, 2) numpy array of [depth, value].

    plot_layout: list, optional
        A list of sublists of log names. Each sublist consist of logs plotted on one track.
        By default set to "auto" will plot every log on its own track.

    depth_lim: list, optional
        Minimum and maximum depth. By default set to "auto" covers every log.

    value_lim: dict, optional
        Log name -> [min, max]. Logs missing from the dictionary are scaled automatically.
        By default set to "auto".

    aspect_ratio: float, optional
        Height to width ratio. By default set to "auto" (1.25 for up to 25 m of logs, growing with the depth range up to 2.5).

    at_nan: str, optional
        Specify if curves should be broken or continued on NaN values.
        Available options: "break" and "continue". By default set to "break".

    colors: list, optional
        A list of sublists of colours matching plot_layout. By default set to "auto".

    output_file: str, optional
        If given, the figure is saved to this path.

    Returns
    -------
    fig: matplotlib.figure.Figure
    """
    if at_nan not in ("break", "continue"):
        raise ValueError('at_nan parameter has to be set to "break" or "continue"')
    if len(logs) == 0:
        raise ValueError("No logs to plot")

    if plot_layout == "auto":
        plot_layout = [[name] for name in logs.keys()]
    for track in plot_layout:
        for name in track:
            if name not in logs:
                raise ValueError("{} log is not available for plotting".format(name))

    if isinstance(depth_lim, str) and depth_lim == "auto":
        depth_lim = [min(np.nanmin(log[:, 0]) for log in logs.values()), max(np.nanmax(log[:, 0]) for log in logs.values())]
    if value_lim == "auto":
        value_lim = dict()
    if aspect_ratio == "auto":
        aspect_ratio = min(2.5, max(1.25, (depth_lim[1] - depth_lim[0])/25*1.25))

    tracks = len(plot_layout)
    fig_width = 2 + 2*tracks
    fig, ax = plt.subplots(1, tracks, sharey=True, squeeze=False, figsize=[fig_width, fig_width*aspect_ratio], facecolor="white")
    ax = ax[0]

    for track in range(tracks):
        if colors == "auto":
            track_colors = plt.rcParams["axes.prop_cycle"].by_key()["color"]
        else:
            track_colors = colors[track]
        names = plot_layout[track]
        for i in range(len(names)):
            color = track_colors[i % len(track_colors)]
            axis = ax[track] if i == 0 else ax[track].twiny()
            data = logs[names[i]]
            if at_nan == "continue":
                data = data[~np.isnan(data[:, 1]), :]
            axis.plot(data[:, 1], data[:, 0], color=color)
            axis.set_xlabel(names[i], color=color, labelpad=-8)
            axis.spines['top'].set_color(color)
            axis.spines['top'].set_position(('outward', i*45 + 10))
            axis.tick_params(axis='x', color=color)
            if names[i] in value_lim:
                axis.set_xlim(value_lim[names[i]])
                axis.set_xticks(value_lim[names[i]])
        ax[track].grid(True)
        ax[track].xaxis.set_label_position('top')
        ax[track].xaxis.set_ticks_position('top')
        ax[track].margins(x=0, y=0)

    ax[0].set_ylim(depth_lim)
    ax[0].invert_yaxis()
    ax[0].set_ylabel('Depth [{}]'.format(depth_unit), labelpad=10)

    save_figure(fig, output_file)
    return fig


def plot_depth_of_investigation(invasion_radius, values, log_name, formation_value, invaded_value, output_file=None):
    """
    This function plots the tool response against the invasion radius.

    Parameters
    -------
    invasion_radius: array
        Invasion radius (beyond the borehole wall) of each layer in cm.

    values: array
        Simulated log value at the middle of each layer.

    log_name: str
        Name of the simulated log, used as y label.

    formation_value, invaded_value: float
        Reference responses of the uninvaded and fully invaded formation.
    """
    invasion_radius = np.asarray(invasion_radius, dtype=float)
    unit_line = np.ones(np.shape(invasion_radius)[0])

    fig, ax = plt.subplots()
    ax.plot(invasion_radius, values, 'b')
    ax.grid(True)
    ax.set_ylabel(log_name)
    ax.set_xlabel('Invasion Radius (cm)')
    ax.set_title('Depth of Investigation')

    ax.plot(invasion_radius, unit_line*formation_value, 'r--')
    ax.text(invasion_radius[0] + 2, formation_value + .005, 'Formation Value')
    ax.plot(invasion_radius, unit_line*invaded_value, 'r--')
    ax.text(invasion_radius[0] + 2, invaded_value + .005, 'Water (Invaded) Value')

    save_figure(fig, output_file)
    return fig


def plot_thickness_sensitivity(em_contrast, sim_contrast, thicknesses, well_name, reference_resistivity, output_file=None):
    """
    This function plots simulated resistivity contrast against earth model contrast for every layer thickness.

    Parameters
    -------
    em_contrast: array
        log10(R_var) - log10(R_ref) of the earth model, one value per thin layer.

    sim_contrast: array
        Simulated contrast, one row per thin layer and one column per thickness.

    thicknesses: array
        Thin layer thickness of each column of sim_contrast [m].
    """
    em_contrast = np.asarray(em_contrast, dtype=float)
    sim_contrast = np.atleast_2d(np.asarray(sim_contrast, dtype=float))

    title = 'Well:{}:: Thickness Sensitivity (R_ref = {:.3f})'.format(well_name, reference_resistivity)
    fig, ax = plt.subplots()
    ax.plot([0, em_contrast[-1] + .5], [0, em_contrast[-1] + .5], 'r--')
    for i in range(np.shape(sim_contrast)[1]):
        ax.plot(em_contrast, sim_contrast[:, i])
        ax.text(em_contrast[-1], sim_contrast[-1, i], '{:.1f} m Thick'.format(thicknesses[i]))
    ax.set_title(title)
    ax.set_xlabel('log(R_{EMVar}) - log(R_{EMRef})')
    ax.set_ylabel('log(R_{SimVar}) - log(R_{SimRef})')

    save_figure(fig, output_file)
    return fig


def save_figure(fig, output_file):
    if output_file is not None:
        fig.savefig(output_file, bbox_inches='tight')
        logger.info("Figure saved to %s", output_file)
