#!/usr/bin/env python3
"""
Command-Line Interface for TCN
------------------------------
Encode and decode TCN move strings and convert them to and from PGN.
"""

import argparse
import logging
import os
import sys

from tcn.engine.pgn_bridge import pgn_to_tcn, tcn_to_pgn
from tcn.errors import TCNError
from tcn.utils.config_loader import DEFAULT_CONFIG_PATH, default_config, load_config
from tcn.utils.move import Move
from tcn.utils.move_codec import decode_tcn, encode_tcn

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config, level=None):
    """Configure root logging from the ``logging`` config section."""
    log_config = config["logging"]
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_config["log_dir"]:
        os.makedirs(log_config["log_dir"], exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_config["log_dir"], "tcn.log")))
    logging.basicConfig(
        level=(level or log_config["level"]).upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def resolve_config(path):
    """Load *path*; a missing default config falls back to built-in defaults."""
    if path is None:
        if os.path.exists(DEFAULT_CONFIG_PATH):
            return load_config(DEFAULT_CONFIG_PATH)
        return default_config()
    return load_config(path)


def encode_command(args, config):
    """Entry point for the 'encode' subcommand."""
    moves = [Move.from_uci(text) for text in args.moves]
    print(encode_tcn(moves))


def decode_command(args, config):
    """Entry point for the 'decode' subcommand."""
    for move in decode_tcn(args.tcn):
        print(move.uci())


def to_pgn_command(args, config):
    """Entry point for the 'to-pgn' subcommand."""
    pgn_config = config["pgn"]
    print(
        tcn_to_pgn(
            args.tcn,
            fen=args.fen or pgn_config["fen"],
            headers=pgn_config["headers"],
            include_headers=args.headers or pgn_config["include_headers"],
        )
    )


def from_pgn_command(args, config):
    """Entry point for the 'from-pgn' subcommand."""
    if args.file == "-":
        text = sys.stdin.read()
    else:
        with open(args.file, "r") as f:
            text = f.read()
    print(pgn_to_tcn(text))


def build_parser():
    parser = argparse.ArgumentParser(prog="tcn", description="TCN chess move encoding tools")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to the configuration file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode UCI-style moves (e2e4, e7e8q, N@e4).")
    encode_parser.add_argument("moves", nargs="+", help="Moves in play order.")
    encode_parser.set_defaults(func=encode_command)

    decode_parser = subparsers.add_parser("decode", help="Decode a TCN string, one move per line.")
    decode_parser.add_argument("tcn", help="TCN string.")
    decode_parser.set_defaults(func=decode_command)

    to_pgn_parser = subparsers.add_parser("to-pgn", help="Convert TCN to PGN move-text.")
    to_pgn_parser.add_argument("tcn", help="TCN string.")
    to_pgn_parser.add_argument("--fen", type=str, default=None, help="Start position.")
    to_pgn_parser.add_argument("--headers", action="store_true", help="Emit a full PGN document.")
    to_pgn_parser.set_defaults(func=to_pgn_command)

    from_pgn_parser = subparsers.add_parser("from-pgn", help="Convert PGN to TCN.")
    from_pgn_parser.add_argument("file", nargs="?", default="-", help="PGN file, or '-' for stdin.")
    from_pgn_parser.set_defaults(func=from_pgn_command)

    return parser


def main(argv=None):
    """
    Main function to parse arguments and run commands.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    setup_logging(config, args.log_level)

    try:
        args.func(args, config)
    except (TCNError, ValueError) as e:
        # chess.InvalidMoveError / IllegalMoveError are ValueErrors too.
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"✗ {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
