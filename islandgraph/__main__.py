"""Allow ``python -m islandgraph``."""

from islandgraph.cli import main

if __name__ == "__main__":
    main()
