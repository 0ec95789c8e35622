"""
bao sub-commands. Each module exposes setup_parser(subparsers, parent) and run(args);
bao.cli wires them up.
"""
__all__ = ["build", "init", "show"]
