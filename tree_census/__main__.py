import sys

from .scan import main

if __name__ == "__main__":
    sys.exit(main())
