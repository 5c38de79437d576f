import sys

from space_dodger.play import main

if __name__ == "__main__":
    sys.exit(main())
