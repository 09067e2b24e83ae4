"""Infrastructure Layer.

File I/O and presentation around the pure domain decoders.
"""
