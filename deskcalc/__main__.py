import sys

from deskcalc.session import main

sys.exit(main())
