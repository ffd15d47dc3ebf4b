"""chessrules — chess position state, legal-move generation and FEN codec."""

__version__ = "0.1.0"
