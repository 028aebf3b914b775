import sys

from valuesort.cli import main

sys.exit(main())
