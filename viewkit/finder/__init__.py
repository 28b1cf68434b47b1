"""
Finder Package
"""
from viewkit.finder.abstract_finder import AbstractFinder
from viewkit.finder.engine_finder import EngineFinder
from viewkit.finder.view_finder import ViewFinder

__all__ = [
    'AbstractFinder',
    'EngineFinder',
    'ViewFinder',
]
