"""
This package contains the grid pipeline of the Video Grid application.

The pipeline orchestrates one grid job: it probes the four inputs, plans the
grid, builds the filter graph and hands everything to the encoder.
"""
