"""Run the h2h CLI with ``python -m h2h``."""
from h2h.pipeline.cli import cli

if __name__ == "__main__":
    cli(obj={})
