from nestyle.cli.main import cli

__all__ = ["cli"]
