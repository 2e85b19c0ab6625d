"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextRoadMapReader: Reads a road map and trips from text
- CSVRoadMapRepository: Loads a road map from CSV files
- DijkstraTripSolver: Finds best routes using Dijkstra's algorithm
"""

from .csv_repository import CSVRoadMapRepository
from .dijkstra_solver import DijkstraTripSolver
from .text_reader import TextRoadMapReader

__all__ = ["CSVRoadMapRepository", "DijkstraTripSolver", "TextRoadMapReader"]
