import sys

from olympus.cli import main

sys.exit(main())
