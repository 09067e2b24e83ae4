"""DEM Bounded Context.

Responsible for decoding USGS-style DEM interchange files:
- Value Objects: HeaderInfo, ElevationProfile, DecodedFile
- Decoders: decode_header, decode_profile, decode_dem
"""
