import sys

from graph_radius.cli import main

sys.exit(main())
