import sys

from prim_forest.cli import main

sys.exit(main())
