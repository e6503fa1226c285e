import sys

from deskcalc.session import main

if __name__ == "__main__":
    sys.exit(main())
