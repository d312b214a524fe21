"""Rules-engine glue (python-chess)."""

from tcn.engine.pgn_bridge import pgn_to_tcn, tcn_to_pgn

__all__ = ["pgn_to_tcn", "tcn_to_pgn"]
