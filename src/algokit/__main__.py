"""Command-line interface."""
from algokit.main import main

if __name__ == "__main__":
    main()
