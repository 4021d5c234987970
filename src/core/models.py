"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and the domain layer (lower) use the models defined here to send to/receive from the Service
(Decouples the data model specific to the API layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PieceModel:
    name: str
    type: str
    owner: int
    row: int
    col: int


@dataclass
class MatchModel:
    """Transport-safe representation of a match used between API, Service, and Match layers."""

    match_id: str
    pieces: list[PieceModel]
    current_player: int
    status: str
    winner: Optional[int]
