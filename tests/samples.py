"""Seeded sample points shared by the round-trip and reference tests"""

import numpy as np

from geoutm import Hemisphere


def geodetic_samples(count: int, seed: int = 1234):
    """(lat, lng) pairs covering the full UTM latitude range"""
    rng = np.random.default_rng(seed)
    lats = rng.uniform(-80., 84., count)
    lngs = rng.uniform(-180., 180., count)
    return [(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]


def projected_samples(count: int, seed: int = 4321):
    """
    (zone, hemisphere, easting, northing) tuples within the validated bounds. These
    are not derived from geodetic points, so some lie outside their zone's footprint.
    """
    rng = np.random.default_rng(seed)
    out = []
    for _ in range(count):
        zone = int(rng.integers(1, 61))
        easting = float(rng.uniform(200_000., 800_000.))
        if rng.random() < 0.5:
            out.append((zone, Hemisphere.NORTH, easting, float(rng.uniform(1_000., 9_300_000.))))
        else:
            out.append((zone, Hemisphere.SOUTH, easting, float(rng.uniform(1_200_000., 9_990_000.))))
    return out
