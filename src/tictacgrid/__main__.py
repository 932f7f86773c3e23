import sys

from tictacgrid.cli import main

sys.exit(main())
