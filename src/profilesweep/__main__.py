import sys

from profilesweep.cli import main

sys.exit(main())
