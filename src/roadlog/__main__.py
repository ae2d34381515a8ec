import sys

from roadlog.cli import main

sys.exit(main())
