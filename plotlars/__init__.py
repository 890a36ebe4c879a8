"""Plotly figure specifications (bar plots and RGB array images) built from pandas data."""

__version__ = "0.9.6"