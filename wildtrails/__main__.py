import sys

from wildtrails.cli import main

sys.exit(main())
