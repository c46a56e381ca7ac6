"""
The MODEL layer contains the value types and the vector algebra.
It has no knowledge of units, reference frames or epochs.
It deals with points, their coordinate systems and cartesian normalization.
"""
