"""Fourier Making Waves -- Fourier synthesis and sampling engine.

This package turns a small set of harmonic amplitudes (or, for the wave-packet
case, a continuous Gaussian spectrum) into dense, ordered ``(x, y)`` sample
sequences suitable for plotting, and keeps axis-scale metadata consistent as
those sequences change.

This package provides tools for:
- Evaluating one harmonic of a sine or cosine series in space, time, or space-and-time
- Sampling single harmonics and summing a Fourier series on a fixed point budget
- Selecting best-fit axis descriptions from hand-tuned zoom ladders
- Decomposing a Gaussian wave packet into discrete or continuous components
- Deriving chart-ready data sets (harmonics, sum, components, amplitudes, envelopes)

Key principles:
- Deterministic: every data set is a pure function of the current inputs
- Wholesale recomputation: point tables are rebuilt, never patched in place
- Defer, then flush: a bulk input change triggers exactly one recomputation

Main subpackages:
- models: Enumerations, axis descriptions, data sets, components, profile
- analysis: Amplitude functions, Fourier series, wave packet, charts, screen models
- scripts: Command-line export of chart data sets
"""

__all__ = []
