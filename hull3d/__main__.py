import sys

from hull3d.cli import main

sys.exit(main())
