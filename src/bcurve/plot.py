"""
Functions to plot sampled curves and their control polygons, for debugging.
"""
import os

import plotly.offline as pl
import plotly.graph_objs as go

import matplotlib.pyplot as plt

import numpy as np


class PlottingPlotly:
    """
    Writes offline HTML figures 'curve_plot_2d_<i>.html' into 'out_dir'.
    """
    def __init__(self, out_dir=".", auto_open=True):
        self.out_dir = out_dir
        self.auto_open = auto_open
        self.i_figure = -1
        self._reinit()

    def _reinit(self):
        self.i_figure += 1
        self.data_2d = []

    def add_curve_2d(self, X, Y, **kwargs):
        self.data_2d.append(go.Scatter(x=X, y=Y, mode='lines', **kwargs))

    def add_points_2d(self, X, Y, **kwargs):
        marker = dict(
            size=10,
            color='red',
        )
        self.data_2d.append(go.Scatter(x=X, y=Y,
                                       mode='lines+markers',
                                       marker=marker, **kwargs))

    def show(self):
        """
        Show added plots and clear the list for other plotting.
        :return: Name of the written file or None.
        """
        fname = None
        if self.data_2d:
            fig_2d = go.Figure(data=self.data_2d)
            fname = os.path.join(self.out_dir, 'curve_plot_2d_%d.html' % (self.i_figure))
            pl.plot(fig_2d, filename=fname, auto_open=self.auto_open)
        self._reinit()
        return fname


class PlottingMatplot:
    """
    Shows the figure, or saves it to 'file_name' if given.
    """
    def __init__(self, file_name=None):
        self.file_name = file_name
        self.fig_2d = plt.figure()
        self.ax_2d = self.fig_2d.add_subplot(1, 1, 1)

    def add_curve_2d(self, X, Y, **kwargs):
        self.ax_2d.plot(X, Y, **kwargs)

    def add_points_2d(self, X, Y, **kwargs):
        self.ax_2d.plot(X, Y, 'o--', color='red', **kwargs)

    def show(self):
        """
        Show added plots and clear the list for other plotting.
        """
        if self.file_name is None:
            plt.show()
        else:
            self.fig_2d.savefig(self.file_name)
        plt.close(self.fig_2d)
        self.fig_2d = plt.figure()
        self.ax_2d = self.fig_2d.add_subplot(1, 1, 1)
        return self.file_name


class Plotting:
    """
    Debug plotting class. Several 2d plots can be added and finally displayed on common figure
    calling self.show(). Matplotlib or plotly library is used as backend.
    """
    def __init__(self, backend=None):
        if backend is None:
            backend = PlottingPlotly()
        self.backend = backend

    def plot_2d(self, X, Y):
        """
        Add line scatter plot. Every plot use automatically different color.
        :param X: x-coords of points
        :param Y: y-coords of points
        """
        self.backend.add_curve_2d(X, Y)

    def scatter_2d(self, X, Y):
        """
        Add point scatter plot.
        :param X: x-coords of points
        :param Y: y-coords of points
        """
        self.backend.add_points_2d(X, Y)

    def plot_sample(self, points, control_points=None):
        """
        Add polyline of a sampled curve, e.g. result of CurveEngine.compute_curve.
        :param points: (N, 2) array like
        :param control_points: optionally also plot the control polygon
        """
        x_coord, y_coord = np.asarray(points, dtype=float).T
        self.backend.add_curve_2d(x_coord, y_coord)
        if control_points is not None:
            self.plot_control_polygon(control_points)

    def plot_control_polygon(self, control_points):
        x_poles, y_poles = np.asarray(control_points, dtype=float).T
        self.backend.add_points_2d(x_poles, y_poles)

    def show(self):
        """
        Display added plots. Empty the queue.
        """
        return self.backend.show()
