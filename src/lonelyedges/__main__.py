import sys

from lonelyedges.cli import main

sys.exit(main())
