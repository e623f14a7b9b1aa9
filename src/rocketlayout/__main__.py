"""Command-line interface."""
from rocketlayout.main import main

if __name__ == "__main__":
    main()
