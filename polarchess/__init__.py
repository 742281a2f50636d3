"""Chess engine building blocks: core types, bitboards, attack tables, rays, moves, history tables, search limiters and material values."""

__version__ = "0.1.0"