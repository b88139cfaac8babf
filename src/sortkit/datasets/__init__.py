"""
Datasets package public API.

    from sortkit.datasets import make_dataset, make_tagged, Tagged, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, Tagged, make_dataset, make_tagged

__all__ = ["make_dataset", "make_tagged", "Tagged", "SUPPORTED_DISTS"]
